"""Top-level package for cnpjclean.

This package cleans pasted Brazilian company registration numbers (CNPJ) into
canonical `cgc <digits>` lines and flags lines that fail the CNPJ check-digit
algorithm. The main entry point is `CleaningPipeline`.
"""

from .models.datatypes import CleaningReport, LineResult
from .pipeline import CleaningPipeline, clean_text
from .text.normalizer import normalize_line
from .validation.cnpj import is_valid_cnpj

__all__ = [
    "CleaningPipeline",
    "CleaningReport",
    "LineResult",
    "clean_text",
    "is_valid_cnpj",
    "normalize_line",
    "__version__",
]

__version__ = "0.1.0"
