"""Line normalization for pasted CNPJ text.

Responsibilities:
- Strip CNPJ formatting punctuation from one line of raw text.
- Prefix the remainder with the canonical `cgc ` tag.

Only `.`, `,`, `/`, `-` and the space character are removed. Letters and any
other stray characters are kept verbatim so the validator can flag them.
"""

from __future__ import annotations

import re
from typing import Iterable


CNPJ_TAG = "cgc "
STRIPPED_CHARACTERS = frozenset({".", ",", "/", "-", " "})

_STRIP_RE = re.compile(r"[-.,/ ]")


def normalize_line(line: str) -> str:
    """Return the tagged token for one line, or `""` when nothing remains."""

    remainder = _STRIP_RE.sub("", line)
    if not remainder:
        return ""
    return f"{CNPJ_TAG}{remainder}"


class CnpjLineNormalizer:
    """Normalize raw pasted lines into canonical tagged tokens."""

    def normalize(self, line: str) -> str:
        """Normalize a single line."""

        return normalize_line(line)

    def normalize_lines(self, lines: Iterable[str]) -> list[str]:
        """Normalize every line in order, keeping blank entries as empty tokens."""

        return [self.normalize(line) for line in lines]
