"""toolchain/command.py

Fluent builder for one process invocation.

A :class:`CommandBuilder` accumulates ordered arguments and environment
variables. A builder may be derived from a parent: the child starts with a
copy of everything the parent has accumulated and is then extended on its
own. Nothing written to the child is visible through the parent.

Example::

    base = CommandBuilder().args("java", "-jar", "/opt/jack.jar").env("LANG", "C")
    lines = base.derive().args("Foo.java").execute()
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Iterable, List, Optional, Union

from toolchain.core_cmd import Command, Executor, execute

ArgLike = Union[str, Path]


class CommandBuilder:
    def __init__(
        self,
        parent: Optional["CommandBuilder"] = None,
        *,
        executor: Optional[Executor] = None,
    ) -> None:
        if parent is not None:
            self._args: List[str] = list(parent._args)
            self._env: Dict[str, str] = dict(parent._env)
            self._working_directory: Optional[Path] = parent._working_directory
            self._timeout_seconds = parent._timeout_seconds
            self._permit_non_zero_exit_status = parent._permit_non_zero_exit_status
            self._executor = executor or parent._executor
        else:
            self._args = []
            self._env = {}
            self._working_directory = None
            self._timeout_seconds = 0
            self._permit_non_zero_exit_status = False
            self._executor = executor or execute

    def derive(self) -> "CommandBuilder":
        """Return a new builder seeded with a copy of this one's state."""
        return CommandBuilder(self)

    # -------------------------
    # Accumulation
    # -------------------------

    def args(self, *args: ArgLike) -> "CommandBuilder":
        """Append arguments in order. Duplicates are kept."""
        self._args.extend(str(a) for a in args)
        return self

    def extend_args(self, args: Iterable[ArgLike]) -> "CommandBuilder":
        self._args.extend(str(a) for a in args)
        return self

    def env(self, key: str, value: str) -> "CommandBuilder":
        """Set an environment variable for the child; the last write wins."""
        self._env[key] = value
        return self

    def working_directory(self, path: Union[str, Path]) -> "CommandBuilder":
        self._working_directory = Path(path)
        return self

    def timeout(self, seconds: int) -> "CommandBuilder":
        """Kill the child after ``seconds``. 0 disables the timeout."""
        self._timeout_seconds = int(seconds)
        return self

    def permit_non_zero_exit_status(self, permit: bool = True) -> "CommandBuilder":
        self._permit_non_zero_exit_status = permit
        return self

    # -------------------------
    # Inspection / execution
    # -------------------------

    @property
    def arg_list(self) -> List[str]:
        return list(self._args)

    @property
    def env_map(self) -> Dict[str, str]:
        return dict(self._env)

    def build(self) -> Command:
        return Command(
            args=tuple(self._args),
            env=dict(self._env),
            working_directory=self._working_directory,
            timeout_seconds=self._timeout_seconds,
            permit_non_zero_exit_status=self._permit_non_zero_exit_status,
        )

    def execute(self) -> List[str]:
        """Run the accumulated command and return its output lines.

        Raises :class:`~toolchain.errors.CommandFailedError` when the process
        exits abnormally.
        """
        return self._executor(self.build())

    def __repr__(self) -> str:
        return f"CommandBuilder({' '.join(self._args)})"
