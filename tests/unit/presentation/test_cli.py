"""Tests for presentation/cli.py."""

import json
from io import StringIO
from pathlib import Path

import pytest

from gearcheck import __version__
from gearcheck.infrastructure.adapters.gearrc import DEFAULT_GEARRC
from gearcheck.presentation.cli import create_parser, main, make_reporter, split_patterns
from tests.factories import SCAFFOLD_TREE, write_tree

BAD_FIELD = "package user\n\ntype holder struct {\n\trepo *Repository\n}\n"


@pytest.fixture
def scaffold(tmp_path: Path) -> Path:
    return write_tree(tmp_path, SCAFFOLD_TREE)


def run(*argv: str) -> tuple[int, str]:
    output = StringIO()
    code = main(list(argv), output)
    return code, output.getvalue()


class TestValidateCommand:
    """Tests for `gearcheck validate`."""

    def test_clean_tree(self, scaffold: Path) -> None:
        """Exit 0 and only the summary."""
        code, text = run("validate", str(scaffold))

        assert code == 0
        assert text == "0 errors, 0 warnings\n"

    def test_violations(self, scaffold: Path) -> None:
        """Exit 1 when an error is reported."""
        write_tree(scaffold, {"pkg/user/holder.go": BAD_FIELD})

        code, text = run("validate", str(scaffold))

        assert code == 1
        assert text.splitlines()[0].startswith("❌ [R02] pkg/user/holder.go:4:7 - ")
        assert text.splitlines()[-1] == "1 errors, 0 warnings"

    def test_exclude_flag(self, scaffold: Path) -> None:
        """-e patterns are comma-separated and repeatable."""
        write_tree(scaffold, {"pkg/user/holder.go": BAD_FIELD})

        code, _ = run("validate", str(scaffold), "-e", "docs,holder.go", "-e", "vendor")

        assert code == 0

    def test_config_file_overrides(self, scaffold: Path) -> None:
        """ROOT/.gearrc is picked up automatically."""
        write_tree(scaffold, {"pkg/user/holder.go": BAD_FIELD, ".gearrc": "rules:\n  R02: warning\n"})

        code, text = run("validate", str(scaffold))

        assert code == 0
        assert text.startswith("⚠️ [R02]")

    def test_override_exclude(self, scaffold: Path) -> None:
        """--override-exclude drops configured patterns."""
        write_tree(scaffold, {"pkg/user/holder.go": BAD_FIELD, ".gearrc": "exclude:\n  - holder.go\n"})

        assert run("validate", str(scaffold))[0] == 0
        assert run("validate", str(scaffold), "--override-exclude")[0] == 1

    def test_json_format(self, scaffold: Path) -> None:
        """-f json writes one JSON document."""
        code, text = run("validate", str(scaffold), "-f", "json", "--jobs", "2")

        assert code == 0
        assert json.loads(text)["summary"]["files_checked"] == 7

    def test_missing_root(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Fatal errors exit 2 with a message on stderr."""
        code, text = run("validate", str(tmp_path / "missing"))

        assert code == 2
        assert text == ""
        assert "error:" in capsys.readouterr().err

    def test_malformed_config(self, scaffold: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Invalid .gearrc is fatal."""
        write_tree(scaffold, {".gearrc": "rules:\n  R02: fatal\n"})

        code, _ = run("validate", str(scaffold))

        assert code == 2
        assert "unknown severity" in capsys.readouterr().err

    def test_invalid_jobs(self, scaffold: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """--jobs must be positive."""
        assert run("validate", str(scaffold), "-j", "0")[0] == 2
        assert "--jobs" in capsys.readouterr().err


class TestRulesCommand:
    """Tests for `gearcheck rules`."""

    def test_lists_rules(self) -> None:
        """One line per rule, in order."""
        code, text = run("rules")

        lines = text.splitlines()
        assert code == 0
        assert [line[:3] for line in lines] == ["R01", "R02", "R03", "R04", "R05", "R06"]
        assert "interface-usage" in lines[1]
        assert "error" in lines[1]


class TestConfigCommand:
    """Tests for `gearcheck config`."""

    def test_writes_default(self, tmp_path: Path) -> None:
        """Writes .gearrc into the given directory."""
        code, text = run("config", str(tmp_path))

        assert code == 0
        assert (tmp_path / ".gearrc").read_text(encoding="utf-8") == DEFAULT_GEARRC
        assert "Wrote" in text

    def test_refuses_overwrite(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Existing file needs --force."""
        (tmp_path / ".gearrc").write_text("rules: {}\n", encoding="utf-8")

        assert run("config", str(tmp_path))[0] == 2
        assert "--force" in capsys.readouterr().err
        assert run("config", str(tmp_path), "--force")[0] == 0
        assert (tmp_path / ".gearrc").read_text(encoding="utf-8") == DEFAULT_GEARRC


class TestParser:
    """Tests for argument parsing helpers."""

    def test_no_command_prints_help(self) -> None:
        """Bare invocation shows usage and succeeds."""
        code, text = run()

        assert code == 0
        assert "usage: gearcheck" in text

    def test_version(self, capsys: pytest.CaptureFixture[str]) -> None:
        """--version prints the package version."""
        with pytest.raises(SystemExit) as exc_info:
            create_parser().parse_args(["--version"])

        assert exc_info.value.code == 0
        assert __version__ in capsys.readouterr().out

    def test_defaults(self) -> None:
        """validate defaults to the current directory and text output."""
        args = create_parser().parse_args(["validate"])

        assert args.root == Path(".")
        assert args.format == "text"
        assert args.jobs is None

    def test_split_patterns(self) -> None:
        """Commas split, blanks dropped."""
        assert split_patterns(["vendor, docs", "", "*_test.go,"]) == ("vendor", "docs", "*_test.go")

    @pytest.mark.parametrize(
        ("fmt", "name"),
        [("text", "PlainTextReporter"), ("rich", "ConsoleReporter"), ("json", "JSONReporter")],
    )
    def test_make_reporter(self, fmt: str, name: str) -> None:
        """Format names map to reporters."""
        assert type(make_reporter(fmt, StringIO())).__name__ == name
