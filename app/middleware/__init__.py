"""
Middleware package for the Real Estate Listing API.
"""

from .validation import RequestValidationMiddleware

__all__ = [
    "RequestValidationMiddleware",
]
