"""API router aggregation."""

from fastapi import APIRouter

from src.api.duplicates import router as duplicates_router
from src.api.health import router as health_router
from src.api.similarity import router as similarity_router

api_router = APIRouter()
api_router.include_router(health_router)
# Pairwise field comparison endpoints
api_router.include_router(similarity_router)
# Record-level duplicate check endpoints
api_router.include_router(duplicates_router)
