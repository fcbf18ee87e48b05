"""Enums shared across the core and adapter layers."""

from __future__ import annotations

from enum import Enum


class Diet(str, Enum):
    """What a dinosaur (or the user) eats."""

    HERBIVORE = "herbivore"
    CARNIVORE = "carnivore"
    OMNIVORE = "omnivore"


class Units(str, Enum):
    """Unit system a comparison is displayed in."""

    METRIC = "metric"
    IMPERIAL = "imperial"


class FactCategory(int, Enum):
    """Fact-generation strategies.  The value is the picker index."""

    WHERE = 0
    WHEN = 1
    FACT = 2
    WEIGHT = 3
    HEIGHT = 4
    DIET = 5
