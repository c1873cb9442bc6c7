"""Shared typed data models for cnpjclean.

This package contains dataclasses exchanged between the pipeline, the CLI, and
clipboard export so those layers do not import each other.
"""

from .datatypes import CleaningReport, LineResult

__all__ = [
    "CleaningReport",
    "LineResult",
]
