"""cli.common

Small shared helpers for CLI command modules.
"""

from __future__ import annotations

from typing import Dict, Iterable


def parse_env_pairs(pairs: Iterable[str]) -> Dict[str, str]:
    """Parse ``KEY=VALUE`` strings in order; a repeated key keeps the last value."""
    out: Dict[str, str] = {}
    for raw in pairs:
        if "=" not in raw:
            raise SystemExit(f"Expected KEY=VALUE, got: {raw!r}")
        key, val = raw.split("=", 1)
        key = key.strip()
        if not key:
            raise SystemExit(f"Empty variable name in: {raw!r}")
        out[key] = val
    return out
