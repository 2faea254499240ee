"""Main facade for GEAR validation.

GearValidator runs one validation pass: load → rules → report.
Composition-based: accepts configuration, registry and parser.
"""

from __future__ import annotations

import logging
import time
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import TYPE_CHECKING

from gearcheck.application.rules._registry import RuleRegistry, default_registry
from gearcheck.application.rules.unparsable import UnparsableFileRule
from gearcheck.application.services.report_builder import build_report
from gearcheck.domain.model.configuration import ValidationConfig
from gearcheck.infrastructure.adapters.resolver import ExternalTypeResolver
from gearcheck.infrastructure.adapters.tree_loader import SourceTreeLoader
from gearcheck.infrastructure.golang.parser import GoSourceParser

if TYPE_CHECKING:
    from gearcheck.domain.model.diagnostic import Diagnostic
    from gearcheck.domain.model.package import Package, SourceTree
    from gearcheck.domain.model.report import ValidationReport
    from gearcheck.domain.ports.source_parser import SourceParserPort
    from gearcheck.domain.ports.type_resolver import TypeResolverPort

logger = logging.getLogger(__name__)


class GearValidator:
    """Validate one Go source tree against the registered rules.

    Every call to validate() builds a fresh loader and resolver: nothing
    is shared between runs.

    Example:
        validator = GearValidator(load_config(find_config(root)))
        report = validator.validate(root)
        sys.exit(report.exit_code)
    """

    def __init__(
        self,
        config: ValidationConfig | None = None,
        registry: RuleRegistry | None = None,
        parser: SourceParserPort | None = None,
        max_workers: int | None = None,
    ) -> None:
        """Initialize validator.

        Args:
            config: Run configuration (default: built-in defaults)
            registry: Rules to run (default: R01..R06)
            parser: Source parser (default: GoSourceParser)
            max_workers: Threads for parsing and per-package checks
                (None = sequential)

        Raises:
            ValueError: If max_workers < 1
        """
        if max_workers is not None and max_workers < 1:
            raise ValueError(f"max_workers must be >= 1, got {max_workers}")

        self._config = config if config is not None else ValidationConfig()
        self._registry = registry if registry is not None else default_registry()
        self._parser = parser if parser is not None else GoSourceParser()
        self._max_workers = max_workers
        self._unparsable = UnparsableFileRule()

        for rule_id in self._config.rules:
            if rule_id not in self._registry and rule_id != self._unparsable.rule_id:
                logger.warning(f"Severity override for unknown rule {rule_id}")

    @property
    def config(self) -> ValidationConfig:
        """Configuration of every run."""
        return self._config

    @property
    def registry(self) -> RuleRegistry:
        """Rules run by this validator."""
        return self._registry

    def validate(self, root: Path) -> ValidationReport:
        """Validate the tree under root.

        Args:
            root: Root directory of the Go source tree

        Returns:
            Report with effective severities in deterministic order

        Raises:
            SourceTreeError: Root missing, not a directory or unreadable
        """
        start_time = time.perf_counter()
        root = Path(root)

        loader = SourceTreeLoader(self._parser, self._config.exclude, max_workers=self._max_workers)
        tree = loader.load(root)
        resolver = ExternalTypeResolver.for_tree(
            tree.root,
            self._parser,
            self._config.classification.module_prefixes,
        )

        diagnostics: list[Diagnostic] = []
        diagnostics.extend(self._unparsable.check_tree(tree, self._config))
        diagnostics.extend(self._run_tree_checks(tree))
        diagnostics.extend(self._run_package_checks(tree, resolver))

        report = build_report(
            diagnostics,
            self._config,
            files_checked=tree.file_count,
            packages_checked=len(tree.packages),
        )

        elapsed_ms = (time.perf_counter() - start_time) * 1000
        logger.info(
            f"Validated {tree.file_count} files in {len(tree.packages)} packages: "
            f"{report.error_count} errors, {report.warning_count} warnings ({elapsed_ms:.1f} ms)"
        )
        return report

    def _run_tree_checks(self, tree: SourceTree) -> list[Diagnostic]:
        diagnostics: list[Diagnostic] = []
        for rule in self._registry:
            found = rule.check_tree(tree, self._config)
            logger.debug(f"{rule.rule_id} tree check: {len(found)} diagnostics")
            diagnostics.extend(found)
        return diagnostics

    def _run_package_checks(self, tree: SourceTree, resolver: TypeResolverPort) -> list[Diagnostic]:
        packages = tree.iter_packages()
        if self._max_workers is None or self._max_workers == 1 or len(packages) < 2:
            diagnostics: list[Diagnostic] = []
            for package in packages:
                diagnostics.extend(self._check_package(package, resolver))
            return diagnostics

        # Results kept per package index; final sort happens in build_report
        results: list[tuple[Diagnostic, ...]] = [()] * len(packages)
        with ThreadPoolExecutor(max_workers=self._max_workers) as executor:
            future_to_idx = {
                executor.submit(self._check_package, package, resolver): idx
                for idx, package in enumerate(packages)
            }
            for future in as_completed(future_to_idx):
                results[future_to_idx[future]] = future.result()
        return [d for found in results for d in found]

    def _check_package(self, package: Package, resolver: TypeResolverPort) -> tuple[Diagnostic, ...]:
        diagnostics: list[Diagnostic] = []
        for rule in self._registry:
            diagnostics.extend(rule.check(package, resolver, self._config))
        return tuple(diagnostics)


def validate(
    root: Path,
    config: ValidationConfig | None = None,
    *,
    max_workers: int | None = None,
) -> ValidationReport:
    """Validate root with the default rules.

    Args:
        root: Root directory of the Go source tree
        config: Run configuration (default: built-in defaults)
        max_workers: Threads for parsing and per-package checks

    Returns:
        Validation report

    Raises:
        SourceTreeError: Root missing, not a directory or unreadable
    """
    return GearValidator(config, max_workers=max_workers).validate(root)
