"""toolchain/core_cmd.py

Command-execution helpers: the process boundary of the toolchain.

This module deliberately avoids Jack-specific knowledge. It provides:

* :class:`Command` - an immutable snapshot of one process invocation.
* :func:`run_cmd` - run a subprocess (no ``shell=True``) and capture output.
* :func:`execute` - run a :class:`Command` and return its output lines, or
  raise :class:`~toolchain.errors.CommandFailedError`.
"""

from __future__ import annotations

import logging
import os
import subprocess
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Dict, List, Mapping, Optional, Tuple

from toolchain.errors import CommandFailedError

logger = logging.getLogger(__name__)

# Exit code reported for a process killed by our timeout (matches coreutils `timeout`).
TIMEOUT_EXIT_CODE = 124


@dataclass(frozen=True)
class Command:
    args: Tuple[str, ...]
    env: Mapping[str, str] = field(default_factory=dict)
    working_directory: Optional[Path] = None
    timeout_seconds: int = 0
    permit_non_zero_exit_status: bool = False

    def __str__(self) -> str:
        return " ".join(self.args)

    def __hash__(self) -> int:
        # env is a plain mapping; hash its items so equal commands hash equal.
        return hash(
            (
                self.args,
                tuple(sorted(self.env.items())),
                self.working_directory,
                self.timeout_seconds,
                self.permit_non_zero_exit_status,
            )
        )


@dataclass(frozen=True)
class CmdResult:
    exit_code: int
    elapsed_seconds: float
    command_str: str
    stdout: str
    stderr: str
    timed_out: bool = False

    def output_lines(self) -> List[str]:
        """stdout lines followed by any stderr lines."""
        return self.stdout.splitlines() + self.stderr.splitlines()


# Signature of the process boundary; tests substitute a recording fake.
Executor = Callable[[Command], List[str]]


def run_cmd(
    cmd: List[str],
    *,
    cwd: Optional[Path] = None,
    timeout_seconds: int = 0,
    env: Optional[Dict[str, str]] = None,
    merge_stderr: bool = False,
) -> CmdResult:
    """Run a subprocess and capture stdout/stderr (no ``shell=True``).

    Never raises on non-zero exit codes. A timeout is reported as exit code
    124 with whatever output was captured. Raises ``OSError`` when the
    executable cannot be started.

    With ``merge_stderr`` the child's stderr is interleaved into stdout in
    emission order and ``CmdResult.stderr`` is empty.
    """
    t0 = time.time()

    # If env is provided, merge it onto the current process environment.
    env2 = None
    if env:
        env2 = os.environ.copy()
        env2.update(env)

    try:
        proc = subprocess.run(
            cmd,
            cwd=str(cwd) if cwd else None,
            text=True,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT if merge_stderr else subprocess.PIPE,
            timeout=timeout_seconds if timeout_seconds and timeout_seconds > 0 else None,
            env=env2,
        )
    except subprocess.TimeoutExpired as e:
        return CmdResult(
            exit_code=TIMEOUT_EXIT_CODE,
            elapsed_seconds=time.time() - t0,
            command_str=" ".join(cmd),
            stdout=_as_text(e.stdout),
            stderr=_as_text(e.stderr),
            timed_out=True,
        )

    return CmdResult(
        exit_code=proc.returncode,
        elapsed_seconds=time.time() - t0,
        command_str=" ".join(cmd),
        stdout=proc.stdout or "",
        stderr=proc.stderr or "",
    )


def _as_text(data) -> str:
    # TimeoutExpired carries bytes even when text=True was requested.
    if data is None:
        return ""
    if isinstance(data, bytes):
        return data.decode("utf-8", errors="replace")
    return data


def execute(command: Command) -> List[str]:
    """Run ``command`` and return its output lines (stderr merged in)."""
    args = list(command.args)
    logger.debug("Executing: %s", command)

    try:
        res = run_cmd(
            args,
            cwd=command.working_directory,
            timeout_seconds=command.timeout_seconds,
            env=dict(command.env),
            merge_stderr=True,
        )
    except OSError as e:
        raise CommandFailedError(args, [f"Failed to start process: {e}"]) from e

    lines = res.output_lines()
    if res.timed_out:
        lines.append(f"Command timed out after {command.timeout_seconds}s")
        raise CommandFailedError(args, lines)

    if res.exit_code != 0:
        if command.permit_non_zero_exit_status:
            logger.debug("Ignoring exit code %d from: %s", res.exit_code, command)
            return lines
        logger.warning("Command exited with code %d: %s", res.exit_code, command)
        raise CommandFailedError(args, lines)

    logger.debug("Command finished in %.2fs", res.elapsed_seconds)
    return lines
