"""Determinism utilities for reproducible fact selection.

When a seed is supplied, every category draw comes from a private
``random.Random`` so repeated runs produce identical tiles.
"""

from __future__ import annotations

import os
import random
from typing import Optional

from dino_compare.core.facts import Picker

# Seed used when DINO_COMPARE_DETERMINISTIC=1 and no explicit seed is given
FIXED_SEED = 42


def _env_requires_determinism() -> bool:
    return os.getenv("DINO_COMPARE_DETERMINISTIC", "").lower() in ("1", "true", "yes")


def make_picker(seed: Optional[int] = None) -> Picker:
    """Return a category picker.

    Uses *seed* when given, ``FIXED_SEED`` in deterministic mode, and the
    shared module-level generator otherwise.
    """
    if seed is None and _env_requires_determinism():
        seed = FIXED_SEED
    if seed is None:
        return random.randrange
    return random.Random(seed).randrange
