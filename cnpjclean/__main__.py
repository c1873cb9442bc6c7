"""Module entrypoint for running cnpjclean as ``python -m cnpjclean``."""

from __future__ import annotations

from cnpjclean.cli import main


if __name__ == "__main__":
    main()
