"""Validation gate for submitted profiles."""

from __future__ import annotations

from dino_compare.errors import ProfileValidationError
from dino_compare.model.records import HumanProfile

EMPTY_NAME_MESSAGE = "Enter a name please"
HEIGHT_MESSAGE = "Enter a height greater than 0"
WEIGHT_MESSAGE = "Enter a weight greater than 0"


def validate_profile(profile: HumanProfile) -> None:
    """Raise ``ProfileValidationError`` for the first failing check.

    Checks run in order: name, height, weight.
    """
    if profile.name == "":
        raise ProfileValidationError("name", EMPTY_NAME_MESSAGE)
    if profile.height < 1:
        raise ProfileValidationError("height", HEIGHT_MESSAGE)
    if profile.weight < 1:
        raise ProfileValidationError("weight", WEIGHT_MESSAGE)
