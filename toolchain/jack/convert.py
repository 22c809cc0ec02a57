"""toolchain/jack/convert.py

Convert a ``.jar`` into a Jack library (``.jack``) with Jill.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Optional, Union

from toolchain.command import CommandBuilder
from toolchain.core_cmd import Executor
from toolchain.errors import CommandFailedError, InvalidInputError, ToolNotFoundError
from toolchain.locate import ToolchainConfig, default_config

from .compiler import JAVA_LAUNCHER

logger = logging.getLogger(__name__)

JILL_NOT_FOUND_HINT = "Jill could not be found, did you run lunch?"

_JAR_SUFFIX_RE = re.compile(r"\.jar$")


def jack_lib_path(jar_path: str) -> str:
    """``/x/Foo.jar`` -> ``/x/Foo.jack``; only a trailing ``.jar`` is replaced."""
    return _JAR_SUFFIX_RE.sub(".jack", jar_path, count=1)


def convert_jar_to_jack_lib(
    jar_path: Union[str, Path],
    *,
    config: Optional[ToolchainConfig] = None,
    executor: Optional[Executor] = None,
    timeout_seconds: int = 0,
) -> str:
    """Convert ``jar_path`` to a Jack library and return the library's path.

    Raises:
        InvalidInputError: ``jar_path`` does not exist (nothing is run).
        ToolNotFoundError: Jill was not located. This is a
            :class:`CommandFailedError` with an empty command.
        CommandFailedError: Jill exited abnormally.
    """
    jar_path = str(jar_path)
    if not Path(jar_path).exists():
        raise InvalidInputError(f"No such jar file to convert: {jar_path}")

    out_path = jack_lib_path(jar_path)

    cfg = config or default_config()
    if not cfg.jill.found:
        raise ToolNotFoundError(JILL_NOT_FOUND_HINT)

    cmd = CommandBuilder(executor=executor).args(
        JAVA_LAUNCHER, "-jar", str(cfg.jill.path), jar_path, "--output", out_path
    ).timeout(timeout_seconds)
    try:
        cmd.execute()
    except CommandFailedError as e:
        logger.error("There was an error converting %s to a jack library: %s", jar_path, e)
        raise

    return out_path
