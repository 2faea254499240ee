"""Tests for services/validator.py."""

import logging
from pathlib import Path

import pytest

from gearcheck.application.rules import InterfaceUsageRule, RuleRegistry
from gearcheck.application.services.validator import GearValidator, validate
from gearcheck.domain.exceptions import SourceTreeError
from gearcheck.domain.model.enums import ExitCode, Severity
from tests.factories import SCAFFOLD_TREE, make_config, write_tree


@pytest.fixture
def scaffold(tmp_path: Path) -> Path:
    return write_tree(tmp_path, SCAFFOLD_TREE)


class TestGearValidator:
    """Tests for GearValidator."""

    def test_scaffold_is_clean(self, scaffold: Path) -> None:
        """Scaffolded project validates with zero diagnostics."""
        report = GearValidator().validate(scaffold)

        assert report.diagnostics == ()
        assert report.files_checked == 7
        assert report.packages_checked == 4
        assert report.exit_code is ExitCode.OK

    def test_missing_required_directories(self, tmp_path: Path) -> None:
        """R05 and R06 fire once each for an empty tree."""
        report = GearValidator().validate(tmp_path)

        assert [d.rule_id for d in report.diagnostics] == ["R05", "R06"]
        assert report.exit_code is ExitCode.VIOLATIONS

    def test_severity_override_changes_exit_code(self, scaffold: Path) -> None:
        """Downgrading the only error passes the run."""
        (scaffold / "internal" / "errors" / "errors.go").unlink()
        (scaffold / "internal" / "errors").rmdir()

        failing = GearValidator().validate(scaffold)
        passing = GearValidator(make_config(rules={"R06": Severity.WARNING})).validate(scaffold)

        assert failing.exit_code is ExitCode.VIOLATIONS
        assert passing.exit_code is ExitCode.OK
        assert [d.severity for d in passing.diagnostics] == [Severity.WARNING]

    def test_unparsable_file_does_not_stop_run(self, scaffold: Path) -> None:
        """Broken files become R00 findings, the rest is still checked."""
        write_tree(
            scaffold,
            {
                "pkg/user/broken.go": "package user\n\nfunc {\n",
                "pkg/user/extra.go": "package user\n\ntype holder struct {\n\trepo *Repository\n}\n",
            },
        )

        report = GearValidator().validate(scaffold)

        assert [d.rule_id for d in report.diagnostics] == ["R00", "R02"]
        assert report.diagnostics[0].file == "pkg/user/broken.go"
        assert report.files_checked == 8

    def test_exclusions(self, scaffold: Path) -> None:
        """Excluded files are never parsed or reported."""
        write_tree(scaffold, {"vendor/lib/lib.go": "package lib\n\nfunc {\n"})

        report = GearValidator(make_config(exclude=("vendor",))).validate(scaffold)

        assert report.diagnostics == ()
        assert report.packages_checked == 4

    def test_parallel_matches_sequential(self, scaffold: Path) -> None:
        """Worker count never changes the report."""
        write_tree(
            scaffold,
            {
                "pkg/order/service.go": "package order\n\ntype Service interface{}\n\nfunc NewService() *Service { return nil }\n",
                "pkg/order/impl.go": "package order\n\ntype Impl struct{}\n\nfunc (i *Impl) Run() {}\n",
            },
        )

        sequential = GearValidator().validate(scaffold)
        parallel = GearValidator(max_workers=4).validate(scaffold)

        assert sequential == parallel
        assert len(sequential.diagnostics) == 2

    def test_custom_registry(self, tmp_path: Path) -> None:
        """Only registered rules run."""
        write_tree(tmp_path, {"a/a.go": "package a\n\ntype R interface{}\n\nvar x *R\n"})

        report = GearValidator(registry=RuleRegistry([InterfaceUsageRule()])).validate(tmp_path)

        assert [d.rule_id for d in report.diagnostics] == ["R02"]

    def test_invalid_max_workers(self) -> None:
        """max_workers must be positive."""
        with pytest.raises(ValueError, match="max_workers"):
            GearValidator(max_workers=0)

    def test_missing_root(self, tmp_path: Path) -> None:
        """Missing root is fatal."""
        with pytest.raises(SourceTreeError, match="no such directory"):
            GearValidator().validate(tmp_path / "missing")

    def test_unknown_override_warns(self, caplog: pytest.LogCaptureFixture) -> None:
        """Overrides for unregistered rules are logged, not rejected."""
        with caplog.at_level(logging.WARNING, logger="gearcheck"):
            GearValidator(make_config(rules={"R42": Severity.ERROR}))

        assert "unknown rule R42" in caplog.text


class TestValidateFunction:
    """Tests for the validate() shortcut."""

    def test_defaults(self, scaffold: Path) -> None:
        """Default rules and configuration."""
        assert validate(scaffold).passed is True
