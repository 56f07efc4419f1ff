"""
API v1 Router - Main Entry Point
Aggregates all v1 API endpoints for the guest registration service
"""

from fastapi import APIRouter

from guests.api.v1 import bans, devmode, facilities, guests, registrations, templates

router = APIRouter(
    responses={
        400: {"description": "Bad Request"},
        403: {"description": "Forbidden"},
        404: {"description": "Not Found"},
        409: {"description": "Conflict"},
        500: {"description": "Internal Server Error"},
    }
)

router.include_router(facilities.router, tags=["Facilities"])
router.include_router(guests.router, tags=["Guests"])
router.include_router(bans.router, tags=["Bans"])
router.include_router(templates.router, tags=["Templates"])
router.include_router(registrations.router, tags=["Registrations"])
router.include_router(devmode.router, tags=["Development Mode"])
