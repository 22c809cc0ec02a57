from __future__ import annotations

from typing import Optional

from toolchain.core_cmd import Executor
from toolchain.errors import CommandFailedError, InvalidInputError
from toolchain.jack import convert_jar_to_jack_lib
from toolchain.locate import ToolchainConfig


def run_convert(
    args,
    config: ToolchainConfig,
    *,
    executor: Optional[Executor] = None,
) -> int:
    """Convert every input jar; stop at the first failure."""
    for jar in args.inputs:
        if args.dry_run:
            print(f"  Would convert : {jar}")
            continue
        try:
            out = convert_jar_to_jack_lib(
                jar, config=config, executor=executor, timeout_seconds=args.timeout_seconds
            )
        except InvalidInputError as e:
            raise SystemExit(f"ERROR: {e}") from e
        except CommandFailedError as e:
            print(f"\n⚠️ Conversion failed:\n{e}")
            return 1
        print(f"  {jar} -> {out}")
    return 0
