"""
Top-level router for version 1 of the API.

Aggregates the domain routers under a unified prefix.  When new
domains are introduced, include their routers here.
"""

from fastapi import APIRouter

from .endpoints import hotseats, members

router = APIRouter()

router.include_router(members.router, prefix="/members", tags=["members"])
router.include_router(hotseats.router, prefix="/hotseats", tags=["hotseats"])
