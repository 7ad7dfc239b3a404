"""
benchviz dashboard APIRouter aggregation.
"""

from __future__ import annotations

from fastapi import APIRouter

from .dependencies import configure_source
from .routes import api_router

router = APIRouter()
router.include_router(api_router)

__all__ = ["router", "configure_source"]
