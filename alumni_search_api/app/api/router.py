"""
Top-level API router.

The public paths (``/search``, ``/contact`` ...) are fixed by existing
clients, so no version prefix is used.  Each endpoint module declares
its full path itself.
"""

from fastapi import APIRouter

from .endpoints import add, contact, download, health, search, stats

router = APIRouter()

router.include_router(health.router, tags=["health"])
router.include_router(search.router, tags=["search"])
router.include_router(contact.router, tags=["contact"])
router.include_router(stats.router, tags=["stats"])
router.include_router(add.router, tags=["add"])
router.include_router(download.router, tags=["download"])
