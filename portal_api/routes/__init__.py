"""
Route package initialization.
"""
from .jobs import router as jobs_router
from .marketplace import router as marketplace_router
from .properties import router as properties_router

__all__ = ["properties_router", "jobs_router", "marketplace_router"]
