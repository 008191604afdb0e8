"""
Property service for creating and listing properties and attaching hosted images.
"""

from datetime import datetime, timezone
from typing import List, Optional

from fastapi import UploadFile

from app.database import MongoStore
from app.models.property import Property
from app.repositories.base import StoreError, RecordDecodeError
from app.repositories.property import PropertyRepository
from app.schemas.property import PropertyCreate
from app.services.image import ImageHost
from app.utils.exceptions import (
    ImageHostingError,
    InternalServerError,
    PropertyNotFoundError,
)
from app.utils.validators import ValidationUtils
import logging

logger = logging.getLogger(__name__)

DEFAULT_MAX_UPLOAD_SIZE = 10 * 1024 * 1024


class PropertyService:
    """
    Property service.
    Handles property creation, retrieval and the image attachment pipeline.
    """

    def __init__(self, store: MongoStore, image_host: Optional[ImageHost] = None,
                 max_upload_size: int = DEFAULT_MAX_UPLOAD_SIZE):
        self.property_repo = PropertyRepository(store)
        self.image_host = image_host
        self.max_upload_size = max_upload_size

    async def list_properties(self) -> List[Property]:
        """
        Get every stored property.

        Raises:
            InternalServerError: If the store fails or a document does not decode
        """
        try:
            return await self.property_repo.get_all()
        except StoreError:
            raise InternalServerError("Failed to retrieve Properties")
        except RecordDecodeError:
            raise InternalServerError("Failed to decode retrieved Properties")

    async def create_property(self, property_data: PropertyCreate) -> str:
        """
        Create a new property with an empty image list.

        Args:
            property_data: Validated property payload

        Returns:
            Identifier of the new property
        """
        document = property_data.to_document()
        document["Images"] = []
        document["Created_at"] = datetime.now(timezone.utc)

        try:
            property_id = await self.property_repo.create(document)
        except StoreError:
            raise InternalServerError("Failed to create Property")

        logger.info(f"Property created: {property_data.title} (ID: {property_id})")
        return property_id

    async def attach_image(self, property_id: str, file: UploadFile) -> str:
        """
        Upload an image to the image host and append its URL to the property.

        Args:
            property_id: String id of the target property
            file: Uploaded image file

        Returns:
            Public URL of the hosted image

        Raises:
            InvalidIdentifierError: If the id is malformed
            FileSizeExceededError: If the file exceeds the upload limit
            UnsupportedFileTypeError: If the file is not an image
            PropertyNotFoundError: If no property has this id
            ImageHostingError: If the upload fails or yields no URL
            InternalServerError: If the store fails
        """
        object_id = ValidationUtils.parse_object_id(property_id, "Property")
        ValidationUtils.validate_file_size(self._file_size(file), self.max_upload_size)
        ValidationUtils.validate_image_content_type(file.content_type)
        ValidationUtils.validate_image_stream(file.file)

        try:
            exists = await self.property_repo.exists({"_id": object_id})
        except StoreError:
            raise InternalServerError("Failed to check PropertyID")
        if not exists:
            raise PropertyNotFoundError(property_id)

        if self.image_host is None:
            raise ImageHostingError("Failed to initialize image host")

        await file.seek(0)
        url = await self.image_host.upload(file.file, filename=file.filename)
        if not url:
            raise ImageHostingError("Empty secure URL returned from image host")

        try:
            matched = await self.property_repo.add_image(object_id, url)
        except StoreError:
            raise InternalServerError("Failed to update property with image URL")
        if matched == 0:
            logger.warning(f"Property {property_id} disappeared before image {url} was attached")
            raise PropertyNotFoundError(property_id)

        logger.info(f"Image attached to property {property_id}: {url}")
        return url

    @staticmethod
    def _file_size(file: UploadFile) -> int:
        if file.size is not None:
            return file.size
        stream = file.file
        stream.seek(0, 2)
        size = stream.tell()
        stream.seek(0)
        return size
