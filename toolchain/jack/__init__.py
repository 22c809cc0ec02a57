"""toolchain/jack

Jack compiler package.

* :func:`get_jack_compiler` - acquire a preconfigured :class:`JackCompiler`.
* :func:`convert_jar_to_jack_lib` - turn a ``.jar`` into a ``.jack`` library via Jill.
"""

from __future__ import annotations

from .compiler import JACK_NOT_FOUND_HINT, JAVA_LAUNCHER, JackCompiler, get_jack_compiler
from .convert import JILL_NOT_FOUND_HINT, convert_jar_to_jack_lib, jack_lib_path

__all__ = [
    "JACK_NOT_FOUND_HINT",
    "JAVA_LAUNCHER",
    "JILL_NOT_FOUND_HINT",
    "JackCompiler",
    "convert_jar_to_jack_lib",
    "get_jack_compiler",
    "jack_lib_path",
]
