"""System clipboard export for cleaned CNPJ text.

Responsibilities:
- Deliver a fully formed cleaned-text string to the platform clipboard.
- Resolve a clipboard command deterministically per platform.

Key types:
- `ClipboardExporter`: interface for clipboard delivery.
- `CommandClipboardExporter`: pipes text into a clipboard command via stdin.
"""

from __future__ import annotations

from dataclasses import dataclass
import shlex
import shutil
import subprocess
import sys

from ..errors import ClipboardExportError


_PLATFORM_COMMANDS: dict[str, tuple[tuple[str, ...], ...]] = {
    "darwin": (("pbcopy",),),
    "win32": (("clip",),),
}
_DEFAULT_COMMANDS: tuple[tuple[str, ...], ...] = (
    ("wl-copy",),
    ("xclip", "-selection", "clipboard"),
    ("xsel", "--clipboard", "--input"),
)


def candidate_commands(platform: str | None = None) -> tuple[tuple[str, ...], ...]:
    """Return clipboard command candidates in preference order for a platform."""

    resolved_platform = platform or sys.platform
    return _PLATFORM_COMMANDS.get(resolved_platform, _DEFAULT_COMMANDS)


class ClipboardExporter:
    """Interface for clipboard delivery."""

    def is_available(self) -> bool:
        """Return whether a clipboard mechanism exists in this runtime."""

        raise NotImplementedError

    def copy(self, text: str) -> None:
        """Deliver `text` to the clipboard verbatim."""

        raise NotImplementedError


@dataclass(slots=True)
class CommandClipboardExporter(ClipboardExporter):
    """Clipboard exporter backed by an external command reading stdin.

    Attributes:
        command: Explicit command line; `None` auto-detects per platform.
        platform: Platform override used for auto-detection.
    """

    command: str | None = None
    platform: str | None = None

    def resolve_command(self) -> list[str] | None:
        """Return the argv to run, or `None` when no command can be found."""

        if self.command is not None:
            argv = shlex.split(self.command)
            if not argv:
                return None
            executable = shutil.which(argv[0])
            if executable is None:
                return None
            return [executable, *argv[1:]]

        for candidate in candidate_commands(self.platform):
            executable = shutil.which(candidate[0])
            if executable is not None:
                return [executable, *candidate[1:]]
        return None

    def is_available(self) -> bool:
        return self.resolve_command() is not None

    def copy(self, text: str) -> None:
        """Pipe `text` into the clipboard command or raise `ClipboardExportError`."""

        argv = self.resolve_command()
        if argv is None:
            raise ClipboardExportError(
                "No clipboard command is available in this environment.",
                hint=(
                    "Install `wl-copy`, `xclip` or `xsel`, or pass "
                    "`--clipboard-command <cmd>`."
                ),
            )

        try:
            result = subprocess.run(
                argv,
                input=text,
                check=False,
                capture_output=True,
                text=True,
            )
        except OSError as exc:
            raise ClipboardExportError(
                f"Failed to start clipboard command `{argv[0]}`: {exc}"
            ) from exc

        if result.returncode != 0:
            details = result.stderr.strip() or "unknown error"
            raise ClipboardExportError(
                f"Clipboard command `{argv[0]}` failed with exit code "
                f"{result.returncode}: {details}"
            )


def create_clipboard_exporter(command: str | None = None) -> ClipboardExporter:
    """Create the default clipboard exporter implementation."""

    return CommandClipboardExporter(command=command)
