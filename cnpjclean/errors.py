"""Domain exceptions for CLI diagnostics.

The cleaning core never raises; these errors cover the layers around it
(config loading, input/output files, clipboard export).
"""

from __future__ import annotations


class PipelineStageError(RuntimeError):
    """Raised when a specific command stage fails."""

    def __init__(
        self,
        *,
        stage: str,
        detail: str,
        hint: str | None = None,
    ) -> None:
        super().__init__(detail)
        self.stage = stage
        self.detail = detail
        self.hint = hint


class ClipboardExportError(PipelineStageError):
    """Raised when cleaned text cannot be delivered to the system clipboard."""

    def __init__(self, detail: str, hint: str | None = None) -> None:
        super().__init__(stage="export", detail=detail, hint=hint)
