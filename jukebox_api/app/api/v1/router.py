"""
Top‑level router for version 1 of the API.

This router aggregates the resource routers under a unified prefix.
When new endpoints are added, update this file to include their
routers.
"""

from fastapi import APIRouter

from .endpoints import components, jukeboxes, settings

router = APIRouter()

router.include_router(jukeboxes.router, prefix="/jukeboxes", tags=["jukeboxes"])
router.include_router(settings.router, prefix="/settings", tags=["settings"])
router.include_router(components.router, prefix="/components", tags=["components"])
