#!/usr/bin/env python3
"""
CLI wrapper for the Jack toolchain.

Modes:
  1) locate  - show where jack.jar / jill.jar were found
  2) compile - compile source files with Jack
  3) convert - convert .jar files into .jack libraries with Jill

Usage:
  python jackc.py --mode locate
  python jackc.py --mode compile --output-dex out/ --import core.jack src/A.java src/B.java
  python jackc.py --mode convert libs/guava.jar

Tool discovery reads JACK_JAR and ANDROID_BUILD_TOP, from the shell or from
the repo-root .env file.
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from cli.args.base import add_base_args
from cli.args.jack_options import add_jack_option_args
from cli.dispatch import dispatch
from cli.wiring import build_config, configure_logging


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Locate and run the Jack compiler.")
    add_base_args(parser)
    add_jack_option_args(parser)
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging(debug=args.log_debug)

    config = build_config(load_dotenv_file=not args.no_dotenv)
    return dispatch(args, config)


if __name__ == "__main__":
    sys.exit(main())
