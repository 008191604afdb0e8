"""
Utility modules for the Real Estate Listing API.
"""

from .passwords import hash_password, verify_password

from .exceptions import (
    APIException,
    BadRequestError,
    NotFoundError,
    InternalServerError,
    ServiceUnavailableError,
    InvalidIdentifierError,
    ReferencedRecordNotFoundError,
    PropertyNotFoundError,
    FileUploadError,
    UnsupportedFileTypeError,
    FileSizeExceededError,
    ImageHostingError,
)

from .validators import ValidationUtils

# Dependencies are imported directly where needed to avoid circular imports

__all__ = [
    "hash_password",
    "verify_password",

    # Exceptions
    "APIException",
    "BadRequestError",
    "NotFoundError",
    "InternalServerError",
    "ServiceUnavailableError",
    "InvalidIdentifierError",
    "ReferencedRecordNotFoundError",
    "PropertyNotFoundError",
    "FileUploadError",
    "UnsupportedFileTypeError",
    "FileSizeExceededError",
    "ImageHostingError",

    "ValidationUtils",
]
