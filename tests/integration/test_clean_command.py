"""CLI tests for the `clean` command."""

from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

from cnpjclean.cli import app


def test_clean_reads_stdin_and_reports_invalid_line(mixed_paste: str) -> None:
    """Cleaning piped text should print tagged lines and a singular warning."""

    runner = CliRunner()

    result = runner.invoke(app, ["clean"], input=mixed_paste)

    assert result.exit_code == 0
    assert "cgc 12345678000190\ncgc 11444777000161" in result.output
    assert "1 invalid CNPJ detected" in result.output
    assert "line 1: cgc 12345678000190" in result.output


def test_clean_writes_output_file_verbatim(tmp_path: Path, mixed_paste: str) -> None:
    """The `--out` file should hold the cleaned text without a trailing newline."""

    input_path = tmp_path / "paste.txt"
    input_path.write_text(mixed_paste + "\n", encoding="utf-8")
    out_path = tmp_path / "result" / "cleaned.txt"
    runner = CliRunner()

    result = runner.invoke(app, ["clean", str(input_path), "--out", str(out_path)])

    assert result.exit_code == 0
    assert out_path.read_text(encoding="utf-8") == "cgc 12345678000190\ncgc 11444777000161"
    assert f"Cleaned output: {out_path}" in result.output


def test_clean_strict_mode_exits_with_code_two(mixed_paste: str) -> None:
    """Strict mode should fail the command when invalid lines are present."""

    runner = CliRunner()

    result = runner.invoke(app, ["clean", "--strict"], input=mixed_paste)

    assert result.exit_code == 2
    assert "cgc 11444777000161" in result.output


def test_clean_strict_mode_passes_for_valid_input() -> None:
    """Strict mode should succeed when every line is valid."""

    runner = CliRunner()

    result = runner.invoke(app, ["clean", "--strict"], input="11.444.777/0001-61\n11.222.333/0001-81")

    assert result.exit_code == 0
    assert "invalid" not in result.output


def test_clean_no_validate_suppresses_warning(mixed_paste: str) -> None:
    """Disabling validation should keep cleaned output and drop the warning."""

    runner = CliRunner()

    result = runner.invoke(app, ["clean", "--no-validate", "--strict"], input=mixed_paste)

    assert result.exit_code == 0
    assert "cgc 12345678000190" in result.output
    assert "invalid" not in result.output


def test_clean_empty_input_prints_nothing() -> None:
    """Empty input should succeed without output or warnings."""

    runner = CliRunner()

    result = runner.invoke(app, ["clean"], input="")

    assert result.exit_code == 0
    assert result.output == ""


def test_clean_reports_missing_input_file(tmp_path: Path) -> None:
    """A missing input file should fail at the `input` stage."""

    runner = CliRunner()

    result = runner.invoke(app, ["clean", str(tmp_path / "missing.txt")])

    assert result.exit_code == 1
    assert "clean failed at stage `input`" in result.output


def test_clean_reports_missing_config_file(tmp_path: Path) -> None:
    """A missing `--config` path should fail at the `config` stage with a hint."""

    runner = CliRunner()

    result = runner.invoke(app, ["clean", "--config", str(tmp_path / "missing.yml")], input="1")

    assert result.exit_code == 1
    assert "clean failed at stage `config`" in result.output
    assert "Hint: Provide an existing path via `--config <path.yaml>`." in result.output


def test_clean_applies_config_file_and_cli_override(tmp_path: Path, mixed_paste: str) -> None:
    """Config file values should apply unless a CLI option overrides them."""

    config_path = tmp_path / "cnpjclean.yml"
    config_path.write_text("strict: true\nvalidate: true\n", encoding="utf-8")
    runner = CliRunner()

    strict_result = runner.invoke(app, ["clean", "--config", str(config_path)], input=mixed_paste)
    overridden = runner.invoke(
        app, ["clean", "--config", str(config_path), "--no-strict"], input=mixed_paste
    )

    assert strict_result.exit_code == 2
    assert overridden.exit_code == 0


def test_clean_reads_environment_config(
    monkeypatch: pytest.MonkeyPatch, mixed_paste: str
) -> None:
    """`CNPJCLEAN_*` variables should apply when no option or file sets a value."""

    monkeypatch.setenv("CNPJCLEAN_STRICT", "yes")
    runner = CliRunner()

    result = runner.invoke(app, ["clean"], input=mixed_paste)

    assert result.exit_code == 2


def test_clean_verbose_emits_phase_logs(mixed_paste: str) -> None:
    """Verbose mode should log pipeline phases without CNPJ payloads in log lines."""

    runner = CliRunner()

    result = runner.invoke(app, ["clean", "--verbose"], input=mixed_paste)

    assert result.exit_code == 0
    assert "[phase] level=INFO stage=normalize event=start lines=3" in result.output
    phase_lines = [line for line in result.output.splitlines() if line.startswith("[phase]")]
    assert phase_lines
    assert all("11444777000161" not in line for line in phase_lines)
