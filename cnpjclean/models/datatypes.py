"""Core datatypes produced by the cleaning pipeline.

Responsibilities:
- Represent immutable per-line results and the aggregated run report.
- Derive the cleaned output and validity summary without any I/O.

Key types:
- `LineResult`: normalized token and validity for one input line.
- `CleaningReport`: ordered line results plus aggregated views.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class LineResult:
    """Normalization and validation outcome for one input line.

    Attributes:
        line_number: 1-based position of the line in the raw input.
        raw_line: Original line text as pasted.
        cleaned_token: Tagged token, or an empty string when nothing remained.
        is_valid: Checksum outcome; always `True` for empty tokens.
    """

    line_number: int
    raw_line: str
    cleaned_token: str
    is_valid: bool

    @property
    def is_blank(self) -> bool:
        """Return whether the line produced no token."""

        return not self.cleaned_token


@dataclass(frozen=True, slots=True)
class CleaningReport:
    """Aggregated result for one raw input snapshot.

    Attributes:
        line_results: One entry per input line, in input order.
        validated: Whether checksum validation ran for this report.
    """

    line_results: tuple[LineResult, ...]
    validated: bool = True

    @property
    def non_blank_results(self) -> tuple[LineResult, ...]:
        return tuple(result for result in self.line_results if not result.is_blank)

    @property
    def cleaned_text(self) -> str:
        """Join non-empty tokens with `\\n`, in input order, without a trailing separator."""

        return "\n".join(result.cleaned_token for result in self.non_blank_results)

    @property
    def validity_flags(self) -> tuple[bool, ...]:
        """Return one validity flag per non-empty cleaned line."""

        return tuple(result.is_valid for result in self.non_blank_results)

    @property
    def invalid_results(self) -> tuple[LineResult, ...]:
        return tuple(result for result in self.non_blank_results if not result.is_valid)

    @property
    def invalid_count(self) -> int:
        return len(self.invalid_results)

    def warning_message(self) -> str | None:
        """Return the user-facing invalid-count message, or `None` when all lines passed."""

        count = self.invalid_count
        if count == 0:
            return None
        if count == 1:
            return "1 invalid CNPJ detected"
        return f"{count} invalid CNPJs detected"
