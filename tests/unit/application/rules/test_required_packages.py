"""Tests for rules/required_packages.py (R05, R06) and rules/domain_boundaries.py (R04)."""

from pathlib import Path

from gearcheck.application.rules.domain_boundaries import DomainBoundariesRule
from gearcheck.application.rules.required_packages import CentralizedConfigRule, SystematicErrorsRule
from gearcheck.domain.model.configuration import Classification, ValidationConfig
from gearcheck.domain.model.enums import Severity
from gearcheck.domain.model.package import SourceTree
from tests.factories import StubResolver, make_package


def tree(*directories: str) -> SourceTree:
    return SourceTree(root=Path("/project"), directories=frozenset(directories))


class TestCentralizedConfigRule:
    """Tests for R05."""

    def test_present(self) -> None:
        """internal/config exists, no diagnostic."""
        assert CentralizedConfigRule().check_tree(tree("internal", "internal/config"), ValidationConfig()) == ()

    def test_missing(self) -> None:
        """One file-level error naming the directory."""
        (diagnostic,) = CentralizedConfigRule().check_tree(tree("internal", "internal/errors"), ValidationConfig())

        assert diagnostic.rule_id == "R05"
        assert diagnostic.severity is Severity.ERROR
        assert diagnostic.file == "internal/config"
        assert diagnostic.is_file_level is True
        assert "missing centralized configuration package" in diagnostic.message

    def test_nested_service_layout(self) -> None:
        """The directory may sit below the root."""
        assert CentralizedConfigRule().check_tree(tree("svc/internal/config"), ValidationConfig()) == ()

    def test_present_on_disk_but_not_walked(self, tmp_path: Path) -> None:
        """A pruned directory still exists under the root."""
        (tmp_path / "internal" / "config").mkdir(parents=True)
        pruned = SourceTree(root=tmp_path, directories=frozenset({"internal"}))

        assert CentralizedConfigRule().check_tree(pruned, ValidationConfig()) == ()

    def test_file_with_directory_name(self, tmp_path: Path) -> None:
        """A regular file named like the directory does not count."""
        (tmp_path / "internal").mkdir()
        (tmp_path / "internal" / "config").write_text("", encoding="utf-8")

        (diagnostic,) = CentralizedConfigRule().check_tree(SourceTree(root=tmp_path), ValidationConfig())

        assert diagnostic.rule_id == "R05"

    def test_configured_directory(self) -> None:
        """Directory name comes from configuration."""
        config = ValidationConfig(classification=Classification(config_dir="internal/settings"))

        assert CentralizedConfigRule().check_tree(tree("internal/settings"), config) == ()

    def test_no_package_findings(self) -> None:
        """Per-package check reports nothing."""
        package = make_package(("a.go", "package a\n"))

        assert CentralizedConfigRule().check(package, StubResolver(), ValidationConfig()) == ()


class TestSystematicErrorsRule:
    """Tests for R06."""

    def test_missing(self) -> None:
        """Missing internal/errors is one error."""
        (diagnostic,) = SystematicErrorsRule().check_tree(tree("internal/config"), ValidationConfig())

        assert diagnostic.rule_id == "R06"
        assert diagnostic.file == "internal/errors"
        assert "missing centralized errors package" in diagnostic.message

    def test_present(self) -> None:
        """internal/errors exists, no diagnostic."""
        assert SystematicErrorsRule().check_tree(tree("internal/errors"), ValidationConfig()) == ()


class TestDomainBoundariesRule:
    """Tests for R04."""

    def test_inert(self) -> None:
        """Reports nothing, whatever the package."""
        package = make_package(("pkg/user/handler/h.go", 'package handler\n\nimport "example.com/shop/pkg/user/repository"\n'))
        rule = DomainBoundariesRule()

        assert rule.check(package, StubResolver(), ValidationConfig()) == ()
        assert rule.check_tree(tree(), ValidationConfig()) == ()
        assert rule.default_severity is Severity.INFO
