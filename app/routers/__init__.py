"""
API route handlers for the Real Estate Listing API.
"""

from .properties import router as properties_router
from .listings import router as listings_router
from .inquiries import router as inquiries_router
from .users import router as users_router

__all__ = ["properties_router", "listings_router", "inquiries_router", "users_router"]
