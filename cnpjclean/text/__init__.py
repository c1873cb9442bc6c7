"""Text normalization components.

This package turns pasted, punctuated CNPJ lines into canonical tagged tokens.
"""

from .normalizer import CNPJ_TAG, STRIPPED_CHARACTERS, CnpjLineNormalizer, normalize_line

__all__ = [
    "CNPJ_TAG",
    "STRIPPED_CHARACTERS",
    "CnpjLineNormalizer",
    "normalize_line",
]
