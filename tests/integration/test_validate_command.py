"""CLI tests for the `validate` command."""

from __future__ import annotations

from typer.testing import CliRunner

from cnpjclean.cli import app


def test_validate_command_reports_each_value() -> None:
    """Every argument should get a `valid`/`invalid` row and invalid input exits with 2."""

    runner = CliRunner()

    result = runner.invoke(
        app, ["validate", "11.444.777/0001-61", "11.444.777/0001-62", "11111111111111"]
    )

    assert result.exit_code == 2
    assert "11.444.777/0001-61: valid" in result.output
    assert "11.444.777/0001-62: invalid" in result.output
    assert "11111111111111: invalid" in result.output


def test_validate_command_succeeds_for_valid_values() -> None:
    """Only valid values should exit with code 0."""

    runner = CliRunner()

    result = runner.invoke(app, ["validate", "11444777000161", "cgc 11222333000181"])

    assert result.exit_code == 0
    assert "cgc 11222333000181: valid" in result.output
