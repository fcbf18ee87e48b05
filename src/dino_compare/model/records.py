"""Records: the plain data that flows through the comparison pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Mapping, Union

from . import Diet, Units


@dataclass(frozen=True, slots=True)
class SourceRecord:
    """One static dinosaur entry from the source document.

    Weight is in pounds, height in inches.
    """

    species: str
    diet: Diet
    where: str
    when: str
    fact: str
    weight: float
    height: float

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SourceRecord":
        return cls(
            species=data["species"],
            diet=Diet(data["diet"]),
            where=data["where"],
            when=data["when"],
            fact=data["fact"],
            weight=data["weight"],
            height=data["height"],
        )


@dataclass(frozen=True, slots=True)
class DisplayRecord:
    """A SourceRecord with weight/height expressed in ``units``."""

    species: str
    diet: Diet
    where: str
    when: str
    fact: str
    weight: float
    height: float
    units: Units

    def __post_init__(self) -> None:
        object.__setattr__(self, "diet", Diet(self.diet))
        object.__setattr__(self, "units", Units(self.units))

    # ── serialisation ───────────────────────────────────────────────

    def to_dict(self) -> dict:
        return {
            "species": self.species,
            "diet": self.diet.value,
            "where": self.where,
            "when": self.when,
            "fact": self.fact,
            "weight": self.weight,
            "height": self.height,
            "units": self.units.value,
        }


@dataclass(frozen=True, slots=True)
class HumanProfile:
    """The user's submitted comparison profile.

    ``height`` is inches (imperial) or centimetres (metric); ``weight`` is
    pounds (imperial) or kilograms (metric).
    """

    name: str
    height: float
    weight: float
    diet: Diet
    units: Units = Units.IMPERIAL

    def __post_init__(self) -> None:
        object.__setattr__(self, "diet", Diet(self.diet))
        object.__setattr__(self, "units", Units(self.units))

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "height": self.height,
            "weight": self.weight,
            "diet": self.diet.value,
            "units": self.units.value,
        }


class _HumanPlaceholder:
    """Marks the slot in a collection where the human's own tile belongs."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "HUMAN_PLACEHOLDER"


HUMAN_PLACEHOLDER = _HumanPlaceholder()

ComparableCollection = List[Union[DisplayRecord, _HumanPlaceholder]]


@dataclass(frozen=True, slots=True)
class Tile:
    """One grid tile: a title, an image reference and body text."""

    title: str
    image: str
    body: str
    kind: str = "dino"  # dino | human

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "image": self.image,
            "body": self.body,
            "kind": self.kind,
        }
