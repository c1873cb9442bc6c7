"""Configuration model and loaders for the cnpjclean CLI.

Responsibilities:
- Define CLI runtime settings as a typed dataclass.
- Load partial settings from YAML files and `CNPJCLEAN_*` environment variables.
- Resolve each field with deterministic precedence: CLI > file > env > default.

Key types:
- `CleanerConfig`: resolved settings for one command invocation.
- `ConfigSources`: partial value mappings used for precedence resolution.
- `ConfigLoader`: static construction helpers.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
import os
from pathlib import Path
from typing import Any, Mapping

import yaml


_TRUE_TOKENS = frozenset({"1", "true", "yes", "on"})
_FALSE_TOKENS = frozenset({"0", "false", "no", "off"})
_BOOLEAN_HINT = "(`true`/`false`, `1`/`0`, `yes`/`no`, `on`/`off`)"

_BOOLEAN_KEYS = frozenset({"validate", "copy_to_clipboard", "strict", "log_phases"})
_STRING_KEYS = frozenset({"clipboard_command"})

ENV_KEYS: Mapping[str, str] = {
    "CNPJCLEAN_VALIDATE": "validate",
    "CNPJCLEAN_COPY": "copy_to_clipboard",
    "CNPJCLEAN_CLIPBOARD_COMMAND": "clipboard_command",
    "CNPJCLEAN_STRICT": "strict",
    "CNPJCLEAN_LOG_PHASES": "log_phases",
}


def _normalize_optional_string(value: object) -> str | None:
    """Return stripped text, or `None` for `None` and blank values."""

    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _parse_boolean(value: object, source_label: str) -> bool:
    """Parse a boolean from a native bool or an accepted case-insensitive token."""

    if isinstance(value, bool):
        return value
    token = (_normalize_optional_string(value) or "").lower()
    if token in _TRUE_TOKENS:
        return True
    if token in _FALSE_TOKENS:
        return False
    raise ValueError(f"{source_label} must be a boolean value {_BOOLEAN_HINT}.")


@dataclass(frozen=True, slots=True)
class CleanerConfig:
    """Runtime configuration for one CLI invocation.

    Attributes:
        validate: Run checksum validation on every non-empty line.
        copy_to_clipboard: Export cleaned text to the system clipboard.
        clipboard_command: Explicit clipboard command; `None` auto-detects.
        strict: Exit with a non-zero status when invalid lines are found.
        log_phases: Emit `[phase]` runtime logs on stderr.
    """

    validate: bool = True
    copy_to_clipboard: bool = False
    clipboard_command: str | None = None
    strict: bool = False
    log_phases: bool = False


@dataclass(frozen=True, slots=True)
class ConfigSources:
    """Partial, already-parsed values keyed by `CleanerConfig` field name.

    Attributes:
        cli: Values explicitly provided by CLI options.
        file: Values loaded from a YAML config file.
        env: Values loaded from environment variables.
    """

    cli: Mapping[str, object] = field(default_factory=dict)
    file: Mapping[str, object] = field(default_factory=dict)
    env: Mapping[str, object] = field(default_factory=dict)

    def resolve(self) -> CleanerConfig:
        """Build a config taking each field from the highest-precedence source."""

        resolved: dict[str, object] = {}
        for config_field in fields(CleanerConfig):
            name = config_field.name
            for source in (self.cli, self.file, self.env):
                if source.get(name) is not None:
                    resolved[name] = source[name]
                    break
        return CleanerConfig(**resolved)


class ConfigLoader:
    """Factory methods for reading `CleanerConfig` values from external sources."""

    SUPPORTED_KEYS = _BOOLEAN_KEYS | _STRING_KEYS

    @staticmethod
    def from_yaml(path: Path) -> CleanerConfig:
        """Create a config from a YAML file, falling back to defaults."""

        return ConfigSources(file=ConfigLoader.read_yaml(path)).resolve()

    @staticmethod
    def from_env(env: Mapping[str, str] | None = None) -> CleanerConfig:
        """Create a config from environment variables, falling back to defaults."""

        return ConfigSources(env=ConfigLoader.read_env(env)).resolve()

    @staticmethod
    def read_yaml(path: Path) -> dict[str, object]:
        """Read and validate the values explicitly set in a YAML config file."""

        payload = yaml.safe_load(path.read_text(encoding="utf-8"))
        if payload is None:
            return {}
        if not isinstance(payload, Mapping):
            raise ValueError(f"YAML config `{path}` must contain a top-level mapping/object.")

        unknown = sorted(str(key) for key in payload if key not in ConfigLoader.SUPPORTED_KEYS)
        if unknown:
            raise ValueError(
                f"YAML config `{path}` has unsupported key(s): {', '.join(unknown)}."
            )
        return {
            key: ConfigLoader._parse_value(key, value, f"YAML config `{path}` field `{key}`")
            for key, value in payload.items()
        }

    @staticmethod
    def read_env(env: Mapping[str, str] | None = None) -> dict[str, object]:
        """Read and validate `CNPJCLEAN_*` values present in the environment."""

        env_map: Mapping[str, str] = os.environ if env is None else env
        values: dict[str, object] = {}
        for env_key, name in ENV_KEYS.items():
            if _normalize_optional_string(env_map.get(env_key)) is None:
                continue
            values[name] = ConfigLoader._parse_value(
                name, env_map[env_key], f"Environment variable `{env_key}`"
            )
        return values

    @staticmethod
    def _parse_value(key: str, value: Any, source_label: str) -> object:
        if value is None:
            return None
        if key in _BOOLEAN_KEYS:
            return _parse_boolean(value, source_label)
        if not isinstance(value, str):
            raise ValueError(f"{source_label} must be a string.")
        return _normalize_optional_string(value)
