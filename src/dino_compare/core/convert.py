"""Unit conversion and record building.

Source documents store weight in pounds and height in inches.  Metric display
uses the same fixed factors the dataset was published with.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext

from dino_compare.model import Units
from dino_compare.model.records import DisplayRecord, SourceRecord

LB_PER_KG = 2.21
CM_PER_INCH = 2.54
INCHES_PER_FOOT = 12

# Enough digits to quantize any finite float (max ~1.8e308) to an integer.
_PRECISION = 400


def round_half_up(value: float) -> float:
    """Round to the nearest integer, halves away from zero.

    Non-finite values are returned unchanged.
    """
    if not math.isfinite(value):
        return value
    with localcontext() as ctx:
        ctx.prec = _PRECISION
        return int(Decimal(value).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def to_display_units(
    weight: float,
    height: float,
    units: Units | str,
) -> tuple[float, float]:
    """Map a raw (pounds, inches) pair into ``units``.

    Imperial values pass through unchanged.
    """
    if Units(units) is Units.METRIC:
        return round_half_up(weight / LB_PER_KG), round_half_up(height * CM_PER_INCH)
    return weight, height


def build_record(source: SourceRecord, units: Units | str) -> DisplayRecord:
    """Build the display record for one source entry."""
    units = Units(units)
    weight, height = to_display_units(source.weight, source.height, units)
    return DisplayRecord(
        species=source.species,
        diet=source.diet,
        where=source.where,
        when=source.when,
        fact=source.fact,
        weight=weight,
        height=height,
        units=units,
    )


def imperial_height(feet: float, inches: float = 0) -> float:
    """Compose a height in inches from feet and inches."""
    return feet * INCHES_PER_FOOT + inches
