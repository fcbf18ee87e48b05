"""Tile rendering: one (title, image, body) tile per collection element."""

from __future__ import annotations

from typing import Optional

from dino_compare.core.facts import Picker, select_fact
from dino_compare.model.records import (
    HUMAN_PLACEHOLDER,
    ComparableCollection,
    HumanProfile,
    Tile,
)

IMAGE_DIR = "images"
HUMAN_IMAGE = f"{IMAGE_DIR}/human.png"


def image_for(species: str) -> str:
    return f"{IMAGE_DIR}/{species.lower()}.png"


def human_tile(human: HumanProfile) -> Tile:
    return Tile(title=human.name, image=HUMAN_IMAGE, body="", kind="human")


def render_tiles(
    collection: ComparableCollection,
    human: HumanProfile,
    pick: Optional[Picker] = None,
) -> list[Tile]:
    """Render tiles in collection order.

    The placeholder becomes the human's tile; every other element gets a
    freshly selected fact.
    """
    tiles: list[Tile] = []
    for item in collection:
        if item is HUMAN_PLACEHOLDER:
            tiles.append(human_tile(human))
            continue
        tiles.append(
            Tile(
                title=item.species,
                image=image_for(item.species),
                body=select_fact(item, human, pick),
            )
        )
    return tiles
