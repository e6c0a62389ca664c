"""API router aggregation."""

from fastapi import APIRouter

from inventory_assistant.api.fuzzy import router as fuzzy_router
from inventory_assistant.api.health import router as health_router

api_router = APIRouter()
api_router.include_router(health_router)
# Fuzzy filter resolution and matching helpers
api_router.include_router(fuzzy_router)
