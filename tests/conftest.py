from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import pytest

from toolchain.core_cmd import Command
from toolchain.errors import CommandFailedError
from toolchain.locate import ToolchainConfig, ToolLocation


class RecordingExecutor:
    """Stands in for the process boundary; remembers every command it was given."""

    def __init__(
        self,
        output: Optional[List[str]] = None,
        *,
        fail_with: Optional[CommandFailedError] = None,
    ) -> None:
        self.output = list(output or [])
        self.fail_with = fail_with
        self.commands: List[Command] = []

    @property
    def called(self) -> bool:
        return bool(self.commands)

    @property
    def last_args(self) -> List[str]:
        return list(self.commands[-1].args)

    def __call__(self, command: Command) -> List[str]:
        self.commands.append(command)
        if self.fail_with is not None:
            raise self.fail_with
        return list(self.output)


def make_config(jack: Optional[Path] = None, jill: Optional[Path] = None) -> ToolchainConfig:
    return ToolchainConfig(
        jack=ToolLocation("jack", jack, "override" if jack else "missing"),
        jill=ToolLocation("jill", jill, "root" if jill else "missing"),
    )


@pytest.fixture
def recording_executor() -> RecordingExecutor:
    return RecordingExecutor(["ok"])


@pytest.fixture
def toolchain_dir(tmp_path: Path) -> Path:
    """A fake $ANDROID_BUILD_TOP holding both jars."""
    tools = tmp_path / "aosp" / "prebuilts" / "sdk" / "tools"
    tools.mkdir(parents=True)
    (tools / "jack.jar").write_bytes(b"")
    (tools / "jill.jar").write_bytes(b"")
    return tmp_path / "aosp"
