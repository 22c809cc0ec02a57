"""toolchain/errors.py

Exception types shared by the command builder and the Jack facade.

* :class:`CommandFailedError` - a child process exited abnormally.
* :class:`ToolNotFoundError` - a required tool was never located.
* :class:`InvalidInputError` - the caller passed something unusable.
"""

from __future__ import annotations

from typing import Iterable, List


class CommandFailedError(RuntimeError):
    """Raised when a command exits abnormally.

    Carries the attempted argument list and the diagnostic lines the process
    produced, so callers can report exactly what ran and what it said.
    """

    def __init__(self, command: Iterable[str], output_lines: Iterable[str]) -> None:
        self.command: List[str] = [str(a) for a in command]
        self.output_lines: List[str] = [str(ln) for ln in output_lines]
        super().__init__(self._format())

    def _format(self) -> str:
        lines = ["Command failed:"]
        if self.command:
            lines[0] = f"Command failed: {' '.join(self.command)}"
        lines.extend(f"  {ln}" for ln in self.output_lines)
        return "\n".join(lines)


class ToolNotFoundError(CommandFailedError):
    """A required executable could not be located.

    No process is attempted, so the command is empty and the output holds a
    single human-readable hint. Subclassing :class:`CommandFailedError` keeps
    ``except CommandFailedError`` handlers working for a missing converter.
    """

    def __init__(self, hint: str) -> None:
        self.hint = hint
        super().__init__([], [hint])

    def _format(self) -> str:
        return self.hint


class InvalidInputError(ValueError):
    """Raised before any process runs when an input path is unusable."""
