"""Collection assembly: display records plus the human's slot."""

from __future__ import annotations

from typing import Iterable

from dino_compare.core.convert import build_record
from dino_compare.model import Units
from dino_compare.model.records import HUMAN_PLACEHOLDER, ComparableCollection, SourceRecord

# The human tile sits in the centre of a 3x3 grid.
HUMAN_SLOT = 4


def assemble(
    source_records: Iterable[SourceRecord],
    units: Units | str,
) -> ComparableCollection:
    """Build every record in source order and insert the human placeholder.

    With fewer than ``HUMAN_SLOT`` records the placeholder is appended.
    """
    collection: ComparableCollection = [build_record(r, units) for r in source_records]
    collection.insert(HUMAN_SLOT, HUMAN_PLACEHOLDER)
    return collection
