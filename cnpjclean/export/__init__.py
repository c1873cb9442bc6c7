"""Export collaborators that consume cleaned text verbatim."""

from .clipboard import (
    ClipboardExporter,
    CommandClipboardExporter,
    candidate_commands,
    create_clipboard_exporter,
)

__all__ = [
    "ClipboardExporter",
    "CommandClipboardExporter",
    "candidate_commands",
    "create_clipboard_exporter",
]
