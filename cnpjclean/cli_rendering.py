"""CLI output and error rendering helpers.

This module centralizes user-facing CLI presentation for command diagnostics
and the validity summary of a cleaning report. Cleaned text goes to stdout;
everything else goes to stderr.
"""

from __future__ import annotations

from typing import NoReturn

import typer

from .errors import PipelineStageError
from .models.datatypes import CleaningReport


def exit_with_command_error(command_name: str, exc: Exception) -> NoReturn:
    """Print concise diagnostics for command failures and exit with code 1."""

    if isinstance(exc, PipelineStageError):
        typer.secho(
            f"{command_name} failed at stage `{exc.stage}`: {exc.detail}",
            fg=typer.colors.RED,
            err=True,
        )
        if exc.hint:
            typer.secho(f"Hint: {exc.hint}", fg=typer.colors.YELLOW, err=True)
    else:
        typer.secho(f"{command_name} failed: {exc}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1) from exc


def echo_cleaned_text(report: CleaningReport) -> None:
    """Print cleaned text to stdout; nothing is printed for an empty result."""

    if report.cleaned_text:
        typer.echo(report.cleaned_text)


def echo_validation_summary(report: CleaningReport) -> None:
    """Print the invalid-count warning and one row per invalid line."""

    message = report.warning_message()
    if message is None:
        return
    typer.secho(message, fg=typer.colors.YELLOW, err=True)
    for result in report.invalid_results:
        typer.echo(f"line {result.line_number}: {result.cleaned_token}", err=True)


def echo_validity_rows(rows: list[tuple[str, bool]]) -> None:
    """Print `<value>: valid|invalid` rows in argument order."""

    for value, is_valid in rows:
        typer.echo(f"{value}: {'valid' if is_valid else 'invalid'}")
