from __future__ import annotations

import argparse

MODES = ("locate", "compile", "convert")


def add_base_args(parser: argparse.ArgumentParser) -> None:
    """Register CLI flags that are shared across modes.

    This includes:
    - mode selection
    - positional inputs (sources for compile, jars for convert)
    - execution knobs
    """

    parser.add_argument(
        "--mode",
        choices=MODES,
        required=True,
        help=(
            "locate = report where jack.jar/jill.jar were found, "
            "compile = run Jack on source files, convert = turn .jar files into .jack libraries"
        ),
    )
    parser.add_argument(
        "inputs",
        nargs="*",
        help="(compile) source files in compile order; (convert) jar files to convert",
    )

    parser.add_argument(
        "--no-dotenv",
        action="store_true",
        help="Do not load KEY=VALUE pairs from the repo-root .env file",
    )
    parser.add_argument(
        "--timeout-seconds",
        type=int,
        default=0,
        help="Kill the compiler after this many seconds. 0 = no timeout.",
    )
    parser.add_argument("--dry-run", action="store_true", help="Print the command but do not execute")
    parser.add_argument(
        "-v",
        "--log-debug",
        dest="log_debug",
        action="store_true",
        help="Enable debug logging (shows every command before it runs)",
    )
