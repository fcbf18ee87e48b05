"""
dino_compare.api
================

Programmatic entrypoints for running comparisons.

Goals:
  - No argparse / web dependencies
  - Injectable randomness (``pick``) for deterministic output
  - JSON-friendly results via ``to_dict()``

Non-goals:
  - Owning presentation (callers render tiles)
  - Retrying data-source failures

Usage::

    from dino_compare.api import build_profile, compare_profile

    human = build_profile(name="Ada", diet="omnivore", units="imperial",
                          feet=5, inches=6, weight=140)
    result = compare_profile(human)
    for tile in result.tiles:
        print(tile.title, tile.body)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional, Sequence

from dino_compare.contracts.load import DINO_DOCUMENT_SCHEMA
from dino_compare.contracts.load import validate_instance as _validate_instance
from dino_compare.core.assemble import assemble
from dino_compare.core.convert import build_record, imperial_height
from dino_compare.core.facts import Picker
from dino_compare.core.validate import validate_profile
from dino_compare.model import Diet, Units
from dino_compare.model.records import (
    ComparableCollection,
    DisplayRecord,
    HumanProfile,
    SourceRecord,
    Tile,
)
from dino_compare.sources import DEFAULT_TIMEOUT, load_source_records
from dino_compare.tiles import render_tiles

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ComparisonResult:
    """Everything produced by one comparison."""

    human: HumanProfile
    collection: ComparableCollection
    tiles: list[Tile]

    @property
    def units(self) -> Units:
        return self.human.units

    def to_dict(self) -> dict:
        return {
            "status": "complete",
            "units": self.units.value,
            "human": self.human.to_dict(),
            "tiles": [t.to_dict() for t in self.tiles],
        }


# ── build_profile ───────────────────────────────────────────────────


def build_profile(
    *,
    name: str,
    diet: Diet | str,
    weight: float,
    units: Units | str = Units.IMPERIAL,
    height: Optional[float] = None,
    feet: Optional[float] = None,
    inches: Optional[float] = None,
) -> HumanProfile:
    """Build a ``HumanProfile`` from raw form input.

    An imperial height may be given directly in inches or as *feet* plus
    *inches*.  A missing height becomes 0 and is caught by the validation gate.
    """
    units = Units(units)
    if height is None:
        if units is Units.IMPERIAL:
            height = imperial_height(feet or 0, inches or 0)
        else:
            height = 0
    return HumanProfile(
        name=name,
        height=height,
        weight=weight,
        diet=Diet(diet),
        units=units,
    )


# ── compare_profile ─────────────────────────────────────────────────


def compare_profile(
    profile: HumanProfile,
    *,
    records: Optional[Sequence[SourceRecord]] = None,
    source: Optional[str | Path] = None,
    pick: Optional[Picker] = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> ComparisonResult:
    """Validate *profile* and compare it against the dinosaur records.

    Parameters
    ----------
    profile:
        The submitted profile.
    records:
        Source records to compare against.  Loaded from *source* when omitted.
    source:
        Data source passed to ``load_source_records`` (bundled by default).
    pick:
        Category picker for fact selection; uniform random when omitted.

    Raises
    ------
    ProfileValidationError
        If the profile fails the validation gate.  Nothing is loaded or built.
    DataSourceError
        If the records have to be loaded and the source fails.
    """
    validate_profile(profile)

    if records is None:
        records = load_source_records(source, timeout=timeout)

    collection = assemble(records, profile.units)
    tiles = render_tiles(collection, profile, pick)
    logger.debug(
        "Compared %r against %d records (%s)",
        profile.name,
        len(records),
        profile.units.value,
    )
    return ComparisonResult(human=profile, collection=collection, tiles=tiles)


# ── list_dinosaurs ──────────────────────────────────────────────────


def list_dinosaurs(
    units: Units | str = Units.IMPERIAL,
    *,
    source: Optional[str | Path] = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> list[DisplayRecord]:
    """Return every dinosaur record converted to *units*."""
    return [build_record(r, units) for r in load_source_records(source, timeout=timeout)]


# ── validate_document ───────────────────────────────────────────────


def validate_document(instance: Any) -> None:
    """Validate a source document.

    Raises ``jsonschema.ValidationError`` on failure.
    """
    _validate_instance(instance, DINO_DOCUMENT_SCHEMA)
