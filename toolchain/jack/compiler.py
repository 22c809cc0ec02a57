"""toolchain/jack/compiler.py

The Jack compiler facade.

A :class:`JackCompiler` holds a template :class:`CommandBuilder` (the launcher
plus global flags). Configuration methods append to the template and return
the compiler for chaining. :meth:`JackCompiler.compile` derives a fresh
builder for each call, so the template can be reused with different inputs.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence, Union

from toolchain.command import CommandBuilder
from toolchain.core_cmd import Executor
from toolchain.errors import ToolNotFoundError
from toolchain.locate import ToolchainConfig, default_config

logger = logging.getLogger(__name__)

JAVA_LAUNCHER = "java"

JACK_NOT_FOUND_HINT = "Jack library not found, cannot use jack."


def get_jack_compiler(
    config: Optional[ToolchainConfig] = None,
    *,
    executor: Optional[Executor] = None,
) -> "JackCompiler":
    """Return a compiler launching the located ``jack.jar``.

    Raises :class:`ToolNotFoundError` right away when Jack was not located.
    """
    cfg = config or default_config()
    if not cfg.jack.found:
        raise ToolNotFoundError(JACK_NOT_FOUND_HINT)

    logger.debug("Using jack.jar from %s (%s)", cfg.jack.path, cfg.jack.source)
    return JackCompiler(
        [JAVA_LAUNCHER, "-jar", str(cfg.jack.path)],
        executor=executor,
    )


class JackCompiler:
    def __init__(
        self,
        jack_args: Union[str, Sequence[str]],
        *,
        executor: Optional[Executor] = None,
    ) -> None:
        """Create a compiler from launcher arguments.

        ``jack_args`` is either a sequence of tokens or a single string. A
        string is split on runs of whitespace with no quoting support, so
        arguments containing spaces must be passed in the sequence form.
        """
        if isinstance(jack_args, str):
            tokens: List[str] = jack_args.split()
        else:
            tokens = [str(a) for a in jack_args]
        self._builder = CommandBuilder(executor=executor).extend_args(tokens)

    @property
    def args(self) -> List[str]:
        return self._builder.arg_list

    @property
    def env(self) -> Dict[str, str]:
        return self._builder.env_map

    def _flag(self, *args: str) -> "JackCompiler":
        self._builder.args(*args)
        return self

    def import_file(self, path: str) -> "JackCompiler":
        return self._flag("--import", path)

    def import_meta(self, dir: str) -> "JackCompiler":
        return self._flag("--import-meta", dir)

    def import_resource(self, dir: str) -> "JackCompiler":
        return self._flag("--import-resource", dir)

    def incremental_folder(self, dir: str) -> "JackCompiler":
        return self._flag("--incremental-folder", dir)

    def multi_dex(self, mode: str) -> "JackCompiler":
        return self._flag("--multi-dex", mode)

    def output_dex(self, dir: str) -> "JackCompiler":
        return self._flag("--output-dex", dir)

    def output_jack(self, path: str) -> "JackCompiler":
        return self._flag("--output-jack", path)

    def processor(self, names: str) -> "JackCompiler":
        return self._flag("--processor", names)

    def processor_path(self, path: str) -> "JackCompiler":
        return self._flag("--processorpath", path)

    def verbose(self, mode: str) -> "JackCompiler":
        return self._flag("--verbose", mode)

    def add_annotation_processor(self, option: str) -> "JackCompiler":
        return self._flag("-A", option)

    def set_property(self, prop: str) -> "JackCompiler":
        return self._flag("-D", prop)

    def set_class_path(self, class_path: str) -> "JackCompiler":
        return self._flag("-cp", class_path)

    def set_debug(self) -> "JackCompiler":
        return self._flag("-g")

    def set_env_var(self, key: str, value: str) -> "JackCompiler":
        self._builder.env(key, value)
        return self

    def timeout(self, seconds: int) -> "JackCompiler":
        self._builder.timeout(seconds)
        return self

    def working_directory(self, path: Union[str, Path]) -> "JackCompiler":
        self._builder.working_directory(path)
        return self

    def compile(self, files: Union[str, Path, Iterable[Union[str, Path]]]) -> List[str]:
        """Compile ``files`` with the preconfigured options.

        A single path (``str`` or ``Path``) is treated as a one-file list.
        The template is left untouched, so the same compiler can be reused
        for other inputs. Returns the compiler's output lines and lets
        :class:`~toolchain.errors.CommandFailedError` propagate.
        """
        if isinstance(files, (str, Path)):
            files = [files]
        return self._builder.derive().extend_args(files).execute()

    def __repr__(self) -> str:
        return f"JackCompiler({' '.join(self._builder.arg_list)})"
