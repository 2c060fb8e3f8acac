"""API route modules."""

from .health import router as health_router
from .contacts import router as contacts_router

__all__ = [
    "health_router",
    "contacts_router",
]
