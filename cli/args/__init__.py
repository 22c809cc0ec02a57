"""CLI argument builder modules.

The top-level :mod:`jackc` is intentionally kept thin. Groups of flags are
registered via small "arg builder" functions housed here:

- :func:`cli.args.base.add_base_args`
- :func:`cli.args.jack_options.add_jack_option_args`
"""

from __future__ import annotations

__all__ = [
    "base",
    "jack_options",
]
