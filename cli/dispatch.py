from __future__ import annotations

import argparse

from cli.commands.compile import run_compile
from cli.commands.convert import run_convert
from cli.commands.locate import run_locate
from toolchain.core_cmd import Executor
from toolchain.locate import ToolchainConfig


def dispatch(
    args: argparse.Namespace,
    config: ToolchainConfig,
    *,
    executor: Executor | None = None,
) -> int:
    mode = args.mode

    if mode == "locate":
        return int(run_locate(config))

    if not args.inputs:
        raise SystemExit(f"--mode {mode} needs at least one input file.")

    if mode == "compile":
        return int(run_compile(args, config, executor=executor))

    if mode == "convert":
        return int(run_convert(args, config, executor=executor))

    raise SystemExit(f"Unknown mode: {mode}")
