"""Shared pytest fixtures for the full cnpjclean test suite."""

from __future__ import annotations

import pytest

from cnpjclean.config import ENV_KEYS

VALID_CNPJ = "11.444.777/0001-61"
SECOND_VALID_CNPJ = "11.222.333/0001-81"
INVALID_CNPJ = "12.345.678/0001-90"


@pytest.fixture(autouse=True)
def _clear_cnpjclean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer `CNPJCLEAN_*` variables from leaking into config resolution."""

    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def mixed_paste() -> str:
    """Provide a pasted list with one invalid entry, one blank line, and one valid entry."""

    return f"{INVALID_CNPJ}\n\n{VALID_CNPJ}"
