"""toolchain/locate.py

Resolve the Jack toolchain jars on the host filesystem.

Resolution order for each tool:

1. an explicit override environment variable naming the file (if it exists)
2. ``$ANDROID_BUILD_TOP/<default relative path>`` (if it exists)
3. not found

Lookups never raise; a missing tool is reported as a :class:`ToolLocation`
with ``path=None`` and the caller that needs the tool decides how to fail.

:func:`default_config` memoizes the resolution of ``os.environ`` for the
lifetime of the process. Everything else takes the environment explicitly,
so tests can fabricate one.
"""

from __future__ import annotations

import functools
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

ANDROID_BUILD_TOP_ENV = "ANDROID_BUILD_TOP"
JACK_JAR_ENV = "JACK_JAR"

JACK_JAR_RELPATH = "prebuilts/sdk/tools/jack.jar"
JILL_JAR_RELPATH = "prebuilts/sdk/tools/jill.jar"


@dataclass(frozen=True)
class ToolLocation:
    name: str
    path: Optional[Path] = None
    # "override", "root" or "missing"
    source: str = "missing"

    @property
    def found(self) -> bool:
        return self.path is not None


def locate(
    name: str,
    *,
    default_relative_path: str,
    root_env_var: str = ANDROID_BUILD_TOP_ENV,
    override_env_var: Optional[str] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> ToolLocation:
    """Find ``name`` using the override > root-relative > missing precedence."""
    env = os.environ if environ is None else environ

    # Paths are made absolute without following symlinks.
    if override_env_var:
        override = env.get(override_env_var)
        if override and Path(override).exists():
            return ToolLocation(name=name, path=Path(override).absolute(), source="override")

    root = env.get(root_env_var)
    if root:
        candidate = Path(root) / default_relative_path
        if candidate.exists():
            return ToolLocation(name=name, path=candidate.absolute(), source="root")

    return ToolLocation(name=name)


@dataclass(frozen=True)
class ToolchainConfig:
    jack: ToolLocation
    jill: ToolLocation

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ToolchainConfig":
        return cls(
            jack=locate(
                "jack",
                default_relative_path=JACK_JAR_RELPATH,
                override_env_var=JACK_JAR_ENV,
                environ=environ,
            ),
            jill=locate(
                "jill",
                default_relative_path=JILL_JAR_RELPATH,
                environ=environ,
            ),
        )


@functools.lru_cache(maxsize=None)
def default_config() -> ToolchainConfig:
    """Toolchain locations for this process, resolved on first use."""
    return ToolchainConfig.from_env()
