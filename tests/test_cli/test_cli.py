"""Tests for the lynxcss CLI commands."""
from __future__ import annotations

import shutil
from pathlib import Path

import pytest
from click.testing import CliRunner

from lynxcss import __version__
from lynxcss.cli.main import cli
from lynxcss.processor import process_css

FIXTURES = Path(__file__).parent.parent / "fixtures"


@pytest.fixture()
def theme(tmp_path: Path) -> str:
    return str(shutil.copy(FIXTURES / "theme.css", tmp_path / "theme.css"))


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


class TestCLIGroup:
    def test_help_lists_commands(self) -> None:
        result = CliRunner().invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "process" in result.output
        assert "check" in result.output
        assert "inspect" in result.output

    def test_version(self) -> None:
        result = CliRunner().invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


# ---------------------------------------------------------------------------
# process
# ---------------------------------------------------------------------------


class TestProcessCommand:
    def test_prints_resolved_css(self, theme: str) -> None:
        result = CliRunner().invoke(cli, ["process", theme])
        assert result.exit_code == 0
        assert "--spacing-large: calc(16px * 2);" in result.output
        assert "padding: var(--button-pad);" in result.output
        assert "  color-scheme:" not in result.output
        assert "(prefers-color-scheme: dark)" in result.output
        assert ".button.data-size-lg {" in result.output

    def test_writes_output_file(self, theme: str, tmp_path: Path) -> None:
        out = tmp_path / "out.css"
        result = CliRunner().invoke(cli, ["process", theme, "-o", str(out)])
        assert result.exit_code == 0
        assert "--accent: #3377ff;" in out.read_text()

    def test_keep_property(self, theme: str) -> None:
        result = CliRunner().invoke(cli, ["process", theme, "--keep-property", "stroke-dasharray"])
        assert result.exit_code == 0
        assert "stroke-dasharray: 5 5;" in result.output
        assert "stroke-dashoffset" not in result.output

    def test_strict_fails_on_warnings(self) -> None:
        result = CliRunner().invoke(
            cli, ["process", str(FIXTURES / "undefined.css"), "--strict"]
        )
        assert result.exit_code == 1
        assert "color: var(--unknown-var);" in result.output

    def test_strict_passes_without_warnings(self, theme: str) -> None:
        result = CliRunner().invoke(cli, ["process", theme, "--strict"])
        assert result.exit_code == 0

    def test_quiet_disables_strict_failures(self) -> None:
        result = CliRunner().invoke(
            cli, ["process", str(FIXTURES / "undefined.css"), "--strict", "--quiet"]
        )
        assert result.exit_code == 0

    def test_parse_error(self) -> None:
        result = CliRunner().invoke(cli, ["process", str(FIXTURES / "broken.css")])
        assert result.exit_code == 1
        assert "Parse error" in result.output

    def test_parse_error_reports_position(self, tmp_path: Path) -> None:
        css = tmp_path / "bad.css"
        css.write_text("a { color: red; }\nb { color }\n")
        result = CliRunner().invoke(cli, ["process", str(css)])
        assert result.exit_code == 1
        assert "Parse error: line 2, column " in result.output

    def test_output_matches_process_css(self, theme: str) -> None:
        result = CliRunner().invoke(cli, ["process", theme])
        assert result.exit_code == 0
        assert result.output == process_css(Path(theme).read_text()).css

    def test_repeated_reference_cycle_fails_strict(self, tmp_path: Path) -> None:
        css = tmp_path / "cycle.css"
        css.write_text(":root { --a: var(--a) var(--a); }\n")
        result = CliRunner().invoke(cli, ["process", str(css), "--strict", "-o", str(tmp_path / "out.css")])
        assert result.exit_code == 1
        assert "Failed: 1 warning(s)" in result.output

    def test_rejects_zero_iterations(self, theme: str) -> None:
        result = CliRunner().invoke(cli, ["process", theme, "--max-iterations", "0"])
        assert result.exit_code == 2

    def test_missing_file(self, tmp_path: Path) -> None:
        result = CliRunner().invoke(cli, ["process", str(tmp_path / "nope.css")])
        assert result.exit_code == 2


# ---------------------------------------------------------------------------
# check
# ---------------------------------------------------------------------------


class TestCheckCommand:
    def test_clean_file(self, theme: str) -> None:
        result = CliRunner().invoke(cli, ["check", theme])
        assert result.exit_code == 0
        assert "OK: theme.css" in result.output

    def test_undefined_variable(self) -> None:
        result = CliRunner().invoke(cli, ["check", str(FIXTURES / "undefined.css")])
        assert result.exit_code == 1
        assert "Undefined variable '--unknown-var' used in '.element'" in result.output
        assert "Summary: 1 warning(s)" in result.output

    def test_circular_reference(self) -> None:
        result = CliRunner().invoke(
            cli, ["check", str(FIXTURES / "circular.css"), "--max-iterations", "5"]
        )
        assert result.exit_code == 1
        assert result.output.count("Maximum iterations reached") == 1


# ---------------------------------------------------------------------------
# inspect
# ---------------------------------------------------------------------------


class TestInspectCommand:
    def test_lists_scopes(self, theme: str) -> None:
        result = CliRunner().invoke(cli, ["inspect", theme])
        assert result.exit_code == 0
        assert "Scopes: 2" in result.output
        assert "Passes: 2" in result.output
        assert ":root:" in result.output
        assert "  --spacing-unit: 16px" in result.output
        assert ".button.data-size-lg:" in result.output

    def test_reports_limit(self) -> None:
        result = CliRunner().invoke(
            cli, ["inspect", str(FIXTURES / "circular.css"), "--max-iterations", "3"]
        )
        assert result.exit_code == 0
        assert "Passes: 3" in result.output
        assert "possible circular reference" in result.output
