"""
API Routers
===========
Each router handles a specific domain of the API.
"""
from . import compare, dinos, health

__all__ = ["compare", "dinos", "health"]
