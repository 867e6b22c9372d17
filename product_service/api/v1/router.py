"""
Version 1 of the public API.

Groups every bounded-context router under the ``/api/v1`` prefix.
"""

from fastapi import APIRouter

from product_service.interfaces.catalog.router import router as catalog_router

API_V1_PREFIX = "/api/v1"

router = APIRouter(prefix=API_V1_PREFIX)
router.include_router(catalog_router)
