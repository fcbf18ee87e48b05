"""Log-level resolution shared by the CLI and the web app."""

from __future__ import annotations

import logging
import sys


def resolve_log_level(name: str, default: int = logging.WARNING) -> int:
    """Map a level name such as ``"debug"`` to its ``logging`` constant.

    Unknown names fall back to *default* with a warning on stderr.
    """
    level = logging.getLevelName(str(name).strip().upper())
    if isinstance(level, int):
        return level
    print(
        f"warning: unknown log level {name!r}, using {logging.getLevelName(default)}",
        file=sys.stderr,
    )
    return default
