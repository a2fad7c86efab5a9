"""Маршруты HTTP API."""
from fastapi import APIRouter

from .routes_settings import router as settings_router
from .routes_step_definitions import router as step_definitions_router

router = APIRouter()
router.include_router(step_definitions_router)
router.include_router(settings_router)

__all__ = ["router"]
