"""Document validation components."""

from .cnpj import (
    CNPJ_LENGTH,
    FIRST_CHECK_WEIGHTS,
    SECOND_CHECK_WEIGHTS,
    CnpjValidator,
    compute_check_digit,
    extract_digits,
    is_valid_cnpj,
)

__all__ = [
    "CNPJ_LENGTH",
    "FIRST_CHECK_WEIGHTS",
    "SECOND_CHECK_WEIGHTS",
    "CnpjValidator",
    "compute_check_digit",
    "extract_digits",
    "is_valid_cnpj",
]
