"""
FastAPI Application
==================
Main entry point for the Dino Compare API.

Run with:
    uvicorn dino_compare.web_api.main:app --reload
"""
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from dino_compare import __version__
from dino_compare.utils.logging_config import resolve_log_level
from dino_compare.web_api.config import settings
from dino_compare.web_api.routers import compare, dinos, health

logging.basicConfig(
    level=resolve_log_level(settings.LOG_LEVEL, default=logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

# Create application
app = FastAPI(
    title="Dino Compare API",
    description="Compare your height, weight and diet to the dinosaurs",
    version=__version__,
    docs_url="/docs" if settings.DEBUG else None,
    redoc_url="/redoc" if settings.DEBUG else None,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(health.router, tags=["Health"])
app.include_router(dinos.router, prefix="/dinos", tags=["Dinosaurs"])
app.include_router(compare.router, prefix="/compare", tags=["Compare"])


@app.get("/")
async def root():
    """Root endpoint - API info"""
    return {
        "name": "Dino Compare API",
        "version": __version__,
        "docs": "/docs" if settings.DEBUG else "disabled",
    }


# For running directly: python -m dino_compare.web_api.main
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
