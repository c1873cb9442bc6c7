"""Smoke tests for package import and CLI wiring."""

from typer.testing import CliRunner

import cnpjclean
from cnpjclean.cli import app


def test_package_exports_core_api() -> None:
    """Top-level package should expose the cleaning entry points."""

    report = cnpjclean.clean_text("11.444.777/0001-61")

    assert report.cleaned_text == "cgc 11444777000161"
    assert cnpjclean.is_valid_cnpj("11.444.777/0001-61") is True
    assert cnpjclean.normalize_line("") == ""
    assert cnpjclean.__version__


def test_cli_help_lists_commands() -> None:
    """Top-level help should list both commands."""

    result = CliRunner().invoke(app, ["--help"])

    assert result.exit_code == 0
    assert "clean" in result.output
    assert "validate" in result.output
