"""Command-line interface for cnpjclean.

Responsibilities:
- Expose user-facing commands for cleaning pasted CNPJ text and checking numbers.
- Convert CLI options, YAML config, and environment into `CleanerConfig`.
- Own all file, stdin, and clipboard I/O around the pure cleaning pipeline.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from .cli_rendering import (
    echo_cleaned_text,
    echo_validation_summary,
    echo_validity_rows,
    exit_with_command_error,
)
from .config import CleanerConfig, ConfigLoader, ConfigSources
from .errors import PipelineStageError
from .export.clipboard import create_clipboard_exporter
from .models.datatypes import CleaningReport
from .pipeline import CleaningPipeline
from .telemetry.logger import RunLogger
from .validation.cnpj import is_valid_cnpj

INVALID_EXIT_CODE = 2

app = typer.Typer(
    name="cnpjclean",
    no_args_is_help=True,
    help="Clean pasted CNPJ lists into `cgc <digits>` lines and flag bad check digits.",
)


def _load_yaml_values(config_path: Path | None) -> dict[str, object]:
    """Load YAML config values when requested and map failures to stage errors."""

    if config_path is None:
        return {}

    try:
        return ConfigLoader.read_yaml(config_path)
    except FileNotFoundError as exc:
        raise PipelineStageError(
            stage="config",
            detail=f"Config file not found: `{config_path}`.",
            hint="Provide an existing path via `--config <path.yaml>`.",
        ) from exc
    except ValueError as exc:
        raise PipelineStageError(
            stage="config",
            detail=f"Invalid config file `{config_path}`: {exc}",
            hint="Fix config keys/values and rerun.",
        ) from exc
    except Exception as exc:
        raise PipelineStageError(
            stage="config",
            detail=f"Failed to load config file `{config_path}`: {exc}",
            hint="Verify YAML syntax and file permissions.",
        ) from exc


def _load_env_values() -> dict[str, object]:
    """Load environment values and map parse failures to stage errors."""

    try:
        return ConfigLoader.read_env()
    except ValueError as exc:
        raise PipelineStageError(
            stage="config",
            detail=str(exc),
            hint="Unset the variable or use an accepted boolean token.",
        ) from exc


def _resolve_config(config_file: Path | None, cli_values: dict[str, object]) -> CleanerConfig:
    """Resolve effective config from CLI options, YAML file, and environment."""

    return ConfigSources(
        cli=cli_values,
        file=_load_yaml_values(config_file),
        env=_load_env_values(),
    ).resolve()


def _read_input(input_file: Path | None) -> str:
    """Read raw text from a file, or from stdin when no file (or `-`) is given."""

    if input_file is None or str(input_file) == "-":
        return typer.get_text_stream("stdin").read()

    try:
        return input_file.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise PipelineStageError(
            stage="input",
            detail=f"Input file not found: `{input_file}`.",
            hint="Pass an existing text file or pipe text through stdin.",
        ) from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise PipelineStageError(
            stage="input",
            detail=f"Failed to read input file `{input_file}`: {exc}",
            hint="Verify the file is UTF-8 text and readable.",
        ) from exc


def _write_output(out: Path, cleaned_text: str) -> None:
    """Write cleaned text verbatim to `out`."""

    try:
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(cleaned_text, encoding="utf-8")
    except OSError as exc:
        raise PipelineStageError(
            stage="output",
            detail=f"Failed to write cleaned output `{out}`: {exc}",
            hint="Verify the output directory is writable.",
        ) from exc


def _export_to_clipboard(
    report: CleaningReport,
    config: CleanerConfig,
    run_logger: RunLogger | None,
) -> bool:
    """Copy cleaned text to the clipboard; return `False` when there is nothing to copy."""

    if not report.cleaned_text:
        return False

    if run_logger is not None:
        run_logger.log_stage_start("export")
    exporter = create_clipboard_exporter(config.clipboard_command)
    try:
        exporter.copy(report.cleaned_text)
    except Exception as exc:
        if run_logger is not None:
            run_logger.log_stage_failure("export", type(exc).__name__)
        raise
    if run_logger is not None:
        run_logger.log_stage_complete("export")
    return True


@app.command("clean")
def clean_command(
    input_file: Annotated[
        Path | None,
        typer.Argument(help="Text file with one CNPJ per line. Reads stdin when omitted or `-`."),
    ] = None,
    out: Annotated[
        Path | None,
        typer.Option("--out", help="Write cleaned text to this file instead of stdout."),
    ] = None,
    config_file: Annotated[
        Path | None,
        typer.Option("--config", help="Path to YAML config file with command defaults."),
    ] = None,
    validate: Annotated[
        bool | None,
        typer.Option(
            "--validate/--no-validate",
            help="Check CNPJ check digits and report invalid lines.",
        ),
    ] = None,
    copy: Annotated[
        bool | None,
        typer.Option("--copy/--no-copy", help="Copy cleaned text to the system clipboard."),
    ] = None,
    clipboard_command: Annotated[
        str | None,
        typer.Option(
            "--clipboard-command",
            help="Clipboard command reading stdin, e.g. `xclip -selection clipboard`.",
        ),
    ] = None,
    strict: Annotated[
        bool | None,
        typer.Option(
            "--strict/--no-strict",
            help=f"Exit with code {INVALID_EXIT_CODE} when invalid CNPJs are detected.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Emit `[phase]` runtime logs on stderr."),
    ] = False,
) -> None:
    """Strip CNPJ punctuation, tag each line with `cgc `, and flag invalid numbers."""

    try:
        config = _resolve_config(
            config_file,
            {
                "validate": validate,
                "copy_to_clipboard": copy,
                "clipboard_command": clipboard_command,
                "strict": strict,
                "log_phases": True if verbose else None,
            },
        )
        raw_text = _read_input(input_file)
        run_logger = RunLogger() if config.log_phases else None
        report = CleaningPipeline(validate=config.validate, run_logger=run_logger).run(raw_text)
        if out is not None:
            _write_output(out, report.cleaned_text)
    except Exception as exc:
        exit_with_command_error("clean", exc)

    if out is None:
        echo_cleaned_text(report)
    else:
        typer.echo(f"Cleaned output: {out}", err=True)
    echo_validation_summary(report)

    if config.copy_to_clipboard:
        try:
            copied = _export_to_clipboard(report, config, run_logger)
        except Exception as exc:
            exit_with_command_error("clean", exc)
        if copied:
            typer.secho("Copied to clipboard.", fg=typer.colors.GREEN, err=True)
        else:
            typer.echo("Nothing to copy.", err=True)

    if config.strict and report.invalid_count:
        raise typer.Exit(code=INVALID_EXIT_CODE)


@app.command("validate")
def validate_command(
    numbers: Annotated[
        list[str],
        typer.Argument(help="CNPJ values, formatted or digits only."),
    ],
) -> None:
    """Check one or more CNPJ values and print `valid` or `invalid` for each."""

    rows = [(number, is_valid_cnpj(number)) for number in numbers]
    echo_validity_rows(rows)
    if not all(is_valid for _, is_valid in rows):
        raise typer.Exit(code=INVALID_EXIT_CODE)


def main() -> None:
    """CLI entrypoint for console scripts."""
    app()


if __name__ == "__main__":
    main()
