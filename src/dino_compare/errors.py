"""Exception types raised by dino_compare."""

from __future__ import annotations


class DinoCompareError(Exception):
    """Base class for all dino_compare errors."""


class ProfileValidationError(DinoCompareError):
    """A submitted profile failed the validation gate.

    ``message`` is the user-facing text; ``field`` names the offending input.
    """

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field
        self.message = message

    def to_dict(self) -> dict:
        return {"field": self.field, "message": self.message}


class DataSourceError(DinoCompareError):
    """The dinosaur document could not be fetched, parsed or validated."""
