"""cli.wiring

This module is the **composition root** for the command-line runtime.

It is the single place where we *assemble* the running application:

- load the repo-root ``.env`` into the process environment
- resolve the toolchain configuration once
- configure logging

Library code never reads ``.env`` itself; it receives a
:class:`~toolchain.locate.ToolchainConfig` from here.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Mapping, Optional

from dotenv import load_dotenv

from toolchain.locate import ToolchainConfig

ROOT_DIR = Path(__file__).resolve().parents[1]
ENV_PATH: Path = ROOT_DIR / ".env"

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def load_env_file(dotenv_path: Path = ENV_PATH) -> bool:
    """Load KEY=VALUE lines into ``os.environ``; variables already set win."""
    if not dotenv_path.exists():
        return False
    return bool(load_dotenv(dotenv_path, override=False))


def configure_logging(*, debug: bool = False) -> None:
    logging.basicConfig(level=logging.DEBUG if debug else logging.INFO, format=LOG_FORMAT)


def build_config(
    *,
    load_dotenv_file: bool = True,
    dotenv_path: Path = ENV_PATH,
    environ: Optional[Mapping[str, str]] = None,
) -> ToolchainConfig:
    """Resolve toolchain locations for this run.

    ``environ`` defaults to ``os.environ`` after the optional ``.env`` load.
    """
    if load_dotenv_file:
        load_env_file(dotenv_path)
    return ToolchainConfig.from_env(os.environ if environ is None else environ)
