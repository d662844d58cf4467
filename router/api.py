"""API router aggregator.

This module exists only to keep the public import stable:

    `from router.api import router`

All endpoint implementations live in dedicated `router/routes_*.py` modules.
"""

from __future__ import annotations

from fastapi import APIRouter

from router.routes_health import router as health_router
from router.routes_parse import router as parse_router
from router.routes_sort import router as sort_router


router = APIRouter()
router.include_router(health_router, tags=["Health"])
router.include_router(sort_router, tags=["Sort"])
router.include_router(parse_router, tags=["Parse"])
