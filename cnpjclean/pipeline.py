"""Line-processing pipeline for pasted CNPJ text.

Responsibilities:
- Split raw input on `\\n` and normalize every line independently.
- Validate each non-empty token and aggregate results into a `CleaningReport`.

Key types:
- `CleaningPipeline`: normalize/validate orchestration facade.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

from .models.datatypes import CleaningReport, LineResult
from .telemetry.logger import RunLogger
from .text.normalizer import CnpjLineNormalizer
from .validation.cnpj import CnpjValidator

_StageResult = TypeVar("_StageResult")


class CleaningPipeline:
    """Turn one raw input snapshot into a fresh, immutable cleaning report."""

    def __init__(
        self,
        *,
        validate: bool = True,
        normalizer: CnpjLineNormalizer | None = None,
        validator: CnpjValidator | None = None,
        run_logger: RunLogger | None = None,
    ) -> None:
        """Initialize pipeline collaborators; validation can be switched off."""

        self._validate = validate
        self._normalizer = normalizer or CnpjLineNormalizer()
        self._validator = validator or CnpjValidator()
        self._run_logger = run_logger

    def run(self, raw_text: str) -> CleaningReport:
        """Normalize and validate every line of `raw_text`.

        The report always holds one `LineResult` per input line, blank lines
        included, so results stay positionally aligned with the input.
        """

        lines = raw_text.split("\n")
        tokens = self._run_stage(
            "normalize",
            lambda: self._normalizer.normalize_lines(lines),
            lines=len(lines),
        )
        if self._validate:
            flags = self._run_stage(
                "validate",
                lambda: [self._validator.is_valid(token) if token else True for token in tokens],
                summarize=lambda result: {"invalid": result.count(False)},
                tokens=sum(1 for token in tokens if token),
            )
        else:
            flags = [True] * len(tokens)

        results = tuple(
            LineResult(
                line_number=index,
                raw_line=line,
                cleaned_token=token,
                is_valid=flag,
            )
            for index, (line, token, flag) in enumerate(zip(lines, tokens, flags), start=1)
        )
        return CleaningReport(line_results=results, validated=self._validate)

    def _run_stage(
        self,
        stage_name: str,
        action: Callable[[], _StageResult],
        summarize: Callable[[_StageResult], dict[str, object]] | None = None,
        **context: object,
    ) -> _StageResult:
        """Run one named stage and emit start/complete/failure telemetry events.

        `summarize` maps the stage result to extra context for the complete event.
        """

        if self._run_logger is not None:
            self._run_logger.log_stage_start(stage_name, **context)
        try:
            result = action()
        except Exception as exc:
            if self._run_logger is not None:
                self._run_logger.log_stage_failure(stage_name, type(exc).__name__)
            raise
        if self._run_logger is not None:
            summary = summarize(result) if summarize is not None else {}
            self._run_logger.log_stage_complete(stage_name, **summary)
        return result


def clean_text(raw_text: str, *, validate: bool = True) -> CleaningReport:
    """Run a default pipeline over `raw_text` without logging."""

    return CleaningPipeline(validate=validate).run(raw_text)
