"""
Top-level API router that aggregates all sub-routers.
"""

from fastapi import APIRouter

from solarcalc.api.options import router as options_router
from solarcalc.api.estimate import router as estimate_router
from solarcalc.api.export import router as export_router

router = APIRouter()
router.include_router(options_router)
router.include_router(estimate_router)
router.include_router(export_router)
