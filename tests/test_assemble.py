"""Tests for collection assembly."""

from __future__ import annotations

from dino_compare.core.assemble import HUMAN_SLOT, assemble
from dino_compare.model import Units
from dino_compare.model.records import HUMAN_PLACEHOLDER, DisplayRecord
from dino_compare.sources import load_source_records


def test_bundled_records_get_placeholder_at_slot_four():
    records = load_source_records()
    collection = assemble(records, Units.IMPERIAL)

    assert len(collection) == len(records) + 1
    assert collection[HUMAN_SLOT] is HUMAN_PLACEHOLDER
    assert sum(1 for item in collection if item is HUMAN_PLACEHOLDER) == 1


def test_source_order_is_preserved_around_the_placeholder():
    records = load_source_records()
    collection = assemble(records, "imperial")
    species = [item.species for item in collection if item is not HUMAN_PLACEHOLDER]
    assert species == [r.species for r in records]


def test_records_are_converted_to_requested_units():
    collection = assemble(load_source_records(), Units.METRIC)
    dinos = [item for item in collection if isinstance(item, DisplayRecord)]
    assert all(d.units is Units.METRIC for d in dinos)
    assert dinos[0].weight == 5882  # Triceratops, 13000 lb


def test_short_source_appends_placeholder():
    records = load_source_records()[:3]
    collection = assemble(records, Units.IMPERIAL)
    assert len(collection) == 4
    assert collection[-1] is HUMAN_PLACEHOLDER


def test_empty_source_yields_only_the_placeholder():
    assert assemble([], Units.IMPERIAL) == [HUMAN_PLACEHOLDER]
