"""
Pydantic Schemas
===============
Request and response models for the API.
"""
from .compare import CompareRequest, CompareResponse, DinoOut, HumanOut, TileOut

__all__ = ["CompareRequest", "CompareResponse", "DinoOut", "HumanOut", "TileOut"]
