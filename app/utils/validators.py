"""
Validation helpers for identifiers and uploaded files.
"""

from typing import Any, BinaryIO, Optional

from bson import ObjectId
from PIL import Image, UnidentifiedImageError

from app.utils.exceptions import (
    FileUploadError,
    InvalidIdentifierError,
    FileSizeExceededError,
    UnsupportedFileTypeError,
)


class ValidationUtils:
    """
    Utility class for common validation operations.
    """

    @staticmethod
    def parse_object_id(value: Any, resource: str) -> ObjectId:
        """
        Convert a string id into a store id.

        Args:
            value: Hex string form of the id
            resource: Resource name used in the error message, e.g. "Property"

        Returns:
            Parsed ObjectId

        Raises:
            InvalidIdentifierError: If the value is not a 24 character hex id
        """
        if isinstance(value, ObjectId):
            return value
        if not isinstance(value, str) or not ObjectId.is_valid(value.strip()):
            raise InvalidIdentifierError(resource)
        return ObjectId(value.strip())

    @staticmethod
    def validate_image_content_type(content_type: Optional[str]) -> str:
        if not content_type or not content_type.lower().startswith("image/"):
            raise UnsupportedFileTypeError(content_type)
        return content_type

    @staticmethod
    def validate_file_size(size: Optional[int], max_size: int) -> None:
        """Reject files larger than max_size. Unknown sizes are checked by the caller."""
        if size is not None and size > max_size:
            raise FileSizeExceededError(size, max_size)

    @staticmethod
    def validate_image_stream(stream: BinaryIO) -> str:
        """
        Check that a stream holds a decodable image and rewind it.

        Returns:
            Image format reported by Pillow, e.g. "JPEG"

        Raises:
            FileUploadError: If the content is not a readable image
        """
        try:
            stream.seek(0)
            with Image.open(stream) as img:
                img.verify()
                image_format = img.format or ""
        except (UnidentifiedImageError, OSError, SyntaxError) as e:
            raise FileUploadError(f"Invalid image file: {e}")
        finally:
            stream.seek(0)
        return image_format
