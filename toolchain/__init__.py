"""toolchain

Locate the Jack/Jill toolchain, build Jack command lines, and run them.

Layout
------
* :mod:`toolchain.locate` - tool discovery and the injectable config.
* :mod:`toolchain.command` - the fluent command builder.
* :mod:`toolchain.core_cmd` - subprocess execution (the process boundary).
* :mod:`toolchain.jack` - the Jack compiler facade and jar conversion.
"""

from __future__ import annotations

from toolchain.command import Command, CommandBuilder
from toolchain.errors import CommandFailedError, InvalidInputError, ToolNotFoundError
from toolchain.jack import JackCompiler, convert_jar_to_jack_lib, get_jack_compiler
from toolchain.locate import ToolchainConfig, ToolLocation, default_config, locate

__all__ = [
    "Command",
    "CommandBuilder",
    "CommandFailedError",
    "InvalidInputError",
    "JackCompiler",
    "ToolLocation",
    "ToolNotFoundError",
    "ToolchainConfig",
    "convert_jar_to_jack_lib",
    "default_config",
    "get_jack_compiler",
    "locate",
]
