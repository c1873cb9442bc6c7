"""CNPJ structural and check-digit validation.

Responsibilities:
- Reduce any token to its digits and check the 14-digit structure.
- Reject repeated-digit values and verify both check digits in order.

The first check digit covers digits 0..11 and is compared against index 12.
The second covers digits 0..12 and is compared against index 13. A first-digit
mismatch returns before the second digit is computed.
"""

from __future__ import annotations

import re
from typing import Sequence


CNPJ_LENGTH = 14
FIRST_CHECK_WEIGHTS: tuple[int, ...] = (5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)
SECOND_CHECK_WEIGHTS: tuple[int, ...] = (6, 5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)

_NON_DIGIT_RE = re.compile(r"[^0-9]")


def extract_digits(value: str) -> str:
    """Remove every character other than ASCII `0`-`9`, including the `cgc ` tag.

    Fullwidth and other non-ASCII Unicode digits are stripped as well.
    """

    return _NON_DIGIT_RE.sub("", value)


def compute_check_digit(digits: str, weights: Sequence[int]) -> int:
    """Compute one modulo-11 check digit for the leading `len(weights)` digits.

    Args:
        digits: Digit-only string at least as long as `weights`.
        weights: Weights applied from the most significant digit onwards.

    Returns:
        `0` when the weighted sum leaves a remainder below 2, else `11 - remainder`.
    """

    total = sum(int(digit) * weight for digit, weight in zip(digits, weights))
    remainder = total % 11
    if remainder < 2:
        return 0
    return 11 - remainder


def is_valid_cnpj(value: str) -> bool:
    """Return whether `value` embeds a structurally valid CNPJ with matching check digits."""

    digits = extract_digits(value)
    if len(digits) != CNPJ_LENGTH:
        return False
    if digits == digits[0] * CNPJ_LENGTH:
        return False

    if compute_check_digit(digits, FIRST_CHECK_WEIGHTS) != int(digits[12]):
        return False
    return compute_check_digit(digits, SECOND_CHECK_WEIGHTS) == int(digits[13])


class CnpjValidator:
    """Validate cleaned tokens or raw digit strings."""

    def is_valid(self, value: str) -> bool:
        """Validate a single token."""

        return is_valid_cnpj(value)
