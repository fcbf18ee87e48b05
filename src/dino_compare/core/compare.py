"""Comparison sentences for weight, height and diet.

Ratios are formatted to one decimal place *before* they are compared with 1,
so a ratio of 1.04 reads "1.0" and is reported as equal.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext

from dino_compare.model import Diet
from dino_compare.model.records import DisplayRecord

_ONE_PLACE = Decimal("0.1")

# Enough digits to quantize any finite float (max ~1.8e308) to one place.
_PRECISION = 400


def ratio_to_one_place(numerator: float, denominator: float) -> Decimal:
    """``numerator / denominator`` rounded half-up to one decimal place.

    A zero denominator yields ``Infinity`` (or ``NaN`` for 0/0), as does a
    non-finite quotient.
    """
    if denominator == 0:
        return Decimal("Infinity") if numerator else Decimal("NaN")
    quotient = numerator / denominator
    if math.isnan(quotient):
        return Decimal("NaN")
    if math.isinf(quotient):
        return Decimal("Infinity") if quotient > 0 else Decimal("-Infinity")
    with localcontext() as ctx:
        ctx.prec = _PRECISION
        return Decimal(quotient).quantize(_ONE_PLACE, rounding=ROUND_HALF_UP)


def format_ratio(ratio: Decimal) -> str:
    if ratio.is_nan():
        return "NaN"
    if ratio.is_infinite():
        return "-Infinity" if ratio.is_signed() else "Infinity"
    return str(ratio)


def _compare(
    record_value: float,
    human_value: float,
    *,
    record_larger: str,
    human_larger: str,
    same: str,
    species: str,
) -> str:
    ratio = ratio_to_one_place(record_value, human_value)
    if not ratio.is_nan():
        if ratio > 1:
            return record_larger.format(species=species, ratio=format_ratio(ratio))
        if ratio < 1:
            inverse = ratio_to_one_place(human_value, record_value)
            return human_larger.format(species=species, ratio=format_ratio(inverse))
    return same.format(species=species)


def compare_weight(record: DisplayRecord, human_weight: float) -> str:
    return _compare(
        record.weight,
        human_weight,
        record_larger="{species} weighed {ratio} times more than you!",
        human_larger="You weigh {ratio} times more than {species}!",
        same="You weigh the same as {species}!",
        species=record.species,
    )


def compare_height(record: DisplayRecord, human_height: float) -> str:
    return _compare(
        record.height,
        human_height,
        record_larger="{species} was {ratio} times taller than you!",
        human_larger="You are {ratio} times taller than {species}!",
        same="You are the same height as {species}!",
        species=record.species,
    )


def compare_diet(record: DisplayRecord, human_diet: Diet | str) -> str:
    human_diet = Diet(human_diet)
    article = "an" if human_diet is Diet.OMNIVORE else "a"
    if human_diet is record.diet:
        return f"You are {article} {human_diet.value} and {record.species} was too!"
    return (
        f"You are {article} {human_diet.value}, "
        f"but {record.species} was a {record.diet.value}."
    )
