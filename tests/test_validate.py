"""Tests for the profile validation gate."""

from __future__ import annotations

import pytest

from dino_compare.core.validate import (
    EMPTY_NAME_MESSAGE,
    HEIGHT_MESSAGE,
    WEIGHT_MESSAGE,
    validate_profile,
)
from dino_compare.errors import ProfileValidationError
from dino_compare.model import Diet
from dino_compare.model.records import HumanProfile


def _profile(name="Ada", height=70.0, weight=150.0) -> HumanProfile:
    return HumanProfile(name=name, height=height, weight=weight, diet=Diet.OMNIVORE)


def test_valid_profile_passes():
    validate_profile(_profile())


def test_empty_name_rejected():
    with pytest.raises(ProfileValidationError) as exc:
        validate_profile(_profile(name=""))
    assert exc.value.field == "name"
    assert exc.value.message == EMPTY_NAME_MESSAGE == "Enter a name please"


@pytest.mark.parametrize("height", [0, 0.5, -3])
def test_height_below_one_rejected(height):
    with pytest.raises(ProfileValidationError) as exc:
        validate_profile(_profile(height=height))
    assert exc.value.field == "height"
    assert exc.value.message == HEIGHT_MESSAGE


@pytest.mark.parametrize("weight", [0, 0.9])
def test_weight_below_one_rejected(weight):
    with pytest.raises(ProfileValidationError) as exc:
        validate_profile(_profile(weight=weight))
    assert exc.value.field == "weight"
    assert exc.value.message == WEIGHT_MESSAGE


def test_checks_run_in_order():
    with pytest.raises(ProfileValidationError) as exc:
        validate_profile(_profile(name="", height=0, weight=0))
    assert exc.value.field == "name"

    with pytest.raises(ProfileValidationError) as exc:
        validate_profile(_profile(height=0, weight=0))
    assert exc.value.field == "height"


def test_boundary_of_one_is_accepted():
    validate_profile(_profile(height=1, weight=1))


def test_error_serialises_field_and_message():
    err = ProfileValidationError("weight", WEIGHT_MESSAGE)
    assert err.to_dict() == {"field": "weight", "message": WEIGHT_MESSAGE}
    assert str(err) == WEIGHT_MESSAGE
