"""
Dino Compare Web API
====================
FastAPI-based REST API for dinosaur comparisons.

Quick Start:
    uvicorn dino_compare.web_api.main:app --reload
"""
from .main import app

__all__ = ["app"]
