"""Fact selection for dinosaur tiles.

Each dinosaur tile shows one fact drawn uniformly from six categories.  The
draw is made by a picker, ``pick(n) -> int`` in ``[0, n)``, which callers may
inject to make selection deterministic.
"""

from __future__ import annotations

import random
from typing import Callable, Optional

from dino_compare.core.compare import compare_diet, compare_height, compare_weight
from dino_compare.model import FactCategory
from dino_compare.model.records import DisplayRecord, HumanProfile

Picker = Callable[[int], int]

# Pigeons are birds, not dinosaurs: their tile always carries the static fact.
FIXED_FACT_SPECIES = "Pigeon"
FALLBACK_FACT = "Dinosaurs are cool!"
CATEGORY_COUNT = len(FactCategory)


def fact_for_category(
    record: DisplayRecord,
    human: HumanProfile,
    category: int,
) -> str:
    """Return the fact text for one category index."""
    try:
        category = FactCategory(category)
    except ValueError:
        return FALLBACK_FACT

    if category is FactCategory.WHERE:
        return f"The {record.species} lived in {record.where}."
    if category is FactCategory.WHEN:
        return f"The {record.species} lived in the {record.when} period."
    if category is FactCategory.FACT:
        return record.fact
    if category is FactCategory.WEIGHT:
        return compare_weight(record, human.weight)
    if category is FactCategory.HEIGHT:
        return compare_height(record, human.height)
    return compare_diet(record, human.diet)


def select_fact(
    record: DisplayRecord,
    human: HumanProfile,
    pick: Optional[Picker] = None,
) -> str:
    """Choose one fact for *record*.

    The picker is never consulted for the fixed-fact species.
    """
    if record.species == FIXED_FACT_SPECIES:
        return record.fact
    picker = pick if pick is not None else random.randrange
    return fact_for_category(record, human, picker(CATEGORY_COUNT))
