"""Tests for fact selection with injected pickers."""

from __future__ import annotations

import pytest

from dino_compare.core.facts import (
    CATEGORY_COUNT,
    FALLBACK_FACT,
    fact_for_category,
    select_fact,
)
from dino_compare.model import Diet, FactCategory, Units
from dino_compare.model.records import DisplayRecord, HumanProfile


@pytest.fixture
def trex() -> DisplayRecord:
    return DisplayRecord(
        species="Tyrannosaurus",
        diet=Diet.CARNIVORE,
        where="North America",
        when="Late Cretaceous",
        fact="Its bite was the strongest of any land animal.",
        weight=15000,
        height=240,
        units=Units.IMPERIAL,
    )


@pytest.fixture
def pigeon() -> DisplayRecord:
    return DisplayRecord(
        species="Pigeon",
        diet=Diet.HERBIVORE,
        where="World Wide",
        when="Holocene",
        fact="All birds are considered dinosaurs.",
        weight=0.5,
        height=9,
        units=Units.IMPERIAL,
    )


@pytest.fixture
def human() -> HumanProfile:
    return HumanProfile(name="Ada", height=70, weight=3000, diet=Diet.HERBIVORE)


def _always(value: int):
    return lambda n: value


EXPECTED = {
    FactCategory.WHERE: "The Tyrannosaurus lived in North America.",
    FactCategory.WHEN: "The Tyrannosaurus lived in the Late Cretaceous period.",
    FactCategory.FACT: "Its bite was the strongest of any land animal.",
    FactCategory.WEIGHT: "Tyrannosaurus weighed 5.0 times more than you!",
    FactCategory.HEIGHT: "Tyrannosaurus was 3.4 times taller than you!",
    FactCategory.DIET: "You are a herbivore, but Tyrannosaurus was a carnivore.",
}


@pytest.mark.parametrize("category", list(FactCategory))
def test_each_category_maps_to_its_fact(trex, human, category):
    assert select_fact(trex, human, _always(category.value)) == EXPECTED[category]


def test_picker_is_asked_for_six_categories(trex, human):
    seen = []

    def pick(n: int) -> int:
        seen.append(n)
        return 0

    select_fact(trex, human, pick)
    assert seen == [6]
    assert CATEGORY_COUNT == 6


def test_pigeon_always_returns_its_fact(pigeon, human):
    def pick(n: int) -> int:
        raise AssertionError("picker must not be consulted for Pigeon")

    assert select_fact(pigeon, human, pick) == "All birds are considered dinosaurs."


def test_pigeon_ignores_default_randomness(pigeon, human):
    for _ in range(50):
        assert select_fact(pigeon, human) == pigeon.fact


def test_out_of_range_category_falls_back(trex, human):
    assert fact_for_category(trex, human, 6) == FALLBACK_FACT
    assert fact_for_category(trex, human, -1) == FALLBACK_FACT


def test_default_picker_returns_one_of_the_six_facts(trex, human):
    for _ in range(50):
        assert select_fact(trex, human) in EXPECTED.values()


def test_seeded_picker_draws_categories_uniformly():
    from collections import Counter

    from dino_compare.utils.determinism import make_picker

    draws = 60000
    pick = make_picker(2024)
    counts = Counter(pick(CATEGORY_COUNT) for _ in range(draws))
    assert set(counts) == set(range(CATEGORY_COUNT))
    expected = draws / CATEGORY_COUNT
    for category, count in counts.items():
        assert abs(count - expected) < expected * 0.05, (category, count)


def test_selected_facts_spread_evenly_over_categories(trex, human):
    from collections import Counter

    from dino_compare.utils.determinism import make_picker

    by_text = {text: category for category, text in EXPECTED.items()}
    pick = make_picker(7)
    counts = Counter(by_text[select_fact(trex, human, pick)] for _ in range(12000))
    assert set(counts) == set(FactCategory)
    for count in counts.values():
        assert 1800 < count < 2200
