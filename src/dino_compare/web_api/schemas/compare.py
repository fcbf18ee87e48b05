"""
Compare Schemas
===============
Request and response models for comparison endpoints.
"""
from datetime import datetime, timezone
from typing import List, Optional

from pydantic import BaseModel, Field

from dino_compare.model import Diet, Units


class CompareRequest(BaseModel):
    """A profile submission"""

    name: str = Field(..., description="Name shown on the human tile")
    diet: Diet = Field(..., description="herbivore, carnivore or omnivore")
    units: Units = Field(default=Units.IMPERIAL, description="metric or imperial")
    weight: float = Field(..., description="Pounds (imperial) or kilograms (metric)")
    height: Optional[float] = Field(
        default=None,
        description="Inches (imperial) or centimetres (metric)",
    )
    feet: Optional[float] = Field(default=None, description="Imperial height, feet part")
    inches: Optional[float] = Field(default=None, description="Imperial height, inches part")

    class Config:
        json_schema_extra = {
            "example": {
                "name": "Ada",
                "diet": "omnivore",
                "units": "imperial",
                "feet": 5,
                "inches": 6,
                "weight": 140
            }
        }


class HumanOut(BaseModel):
    """The profile a comparison was run for"""

    name: str
    height: float
    weight: float
    diet: Diet
    units: Units


class TileOut(BaseModel):
    """One grid tile"""

    title: str
    image: str
    body: str = Field(default="")
    kind: str = Field(default="dino", description="dino or human")


class CompareResponse(BaseModel):
    """Response from a comparison"""

    status: str = Field(..., description="Comparison status: complete")
    units: Units
    human: HumanOut
    tiles: List[TileOut] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class DinoOut(BaseModel):
    """A dinosaur record in the requested units"""

    species: str
    diet: Diet
    where: str
    when: str
    fact: str
    weight: float
    height: float
    units: Units
