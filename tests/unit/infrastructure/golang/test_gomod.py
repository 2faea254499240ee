"""Tests for golang/gomod.py."""

from pathlib import Path

from gearcheck.infrastructure.golang.gomod import parse_module_path, read_module_path


class TestParseModulePath:
    """Tests for parse_module_path."""

    def test_plain(self) -> None:
        """Unquoted module path."""
        assert parse_module_path("module example.com/shop\n\ngo 1.22\n") == "example.com/shop"

    def test_quoted(self) -> None:
        """Quoted module path."""
        assert parse_module_path('module "example.com/shop"\n') == "example.com/shop"

    def test_comment_after_directive(self) -> None:
        """Trailing comment is ignored."""
        assert parse_module_path("// header\nmodule example.com/shop // main\n") == "example.com/shop"

    def test_missing(self) -> None:
        """No module directive."""
        assert parse_module_path("go 1.22\n") is None


class TestReadModulePath:
    """Tests for read_module_path."""

    def test_reads_go_mod(self, tmp_path: Path) -> None:
        """Module path from <root>/go.mod."""
        (tmp_path / "go.mod").write_text("module example.com/shop\n")

        assert read_module_path(tmp_path) == "example.com/shop"

    def test_missing_file(self, tmp_path: Path) -> None:
        """No go.mod is not an error."""
        assert read_module_path(tmp_path) is None
