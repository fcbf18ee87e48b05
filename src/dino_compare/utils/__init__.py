"""Shared utilities for dino_compare."""

from dino_compare.utils.determinism import FIXED_SEED, make_picker
from dino_compare.utils.exit_codes import ExitCode
from dino_compare.utils.json_norm import stable_json_dump, stable_json_dumps
from dino_compare.utils.logging_config import resolve_log_level

__all__ = [
    "FIXED_SEED",
    "make_picker",
    "ExitCode",
    "stable_json_dump",
    "stable_json_dumps",
    "resolve_log_level",
]
