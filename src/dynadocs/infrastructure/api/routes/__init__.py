"""API Routes for Dynadocs."""

from .documents_router import router as documents_router
from .schemas_router import router as schemas_router

__all__ = [
    "documents_router",
    "schemas_router",
]
