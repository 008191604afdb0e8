"""
Listing service.
Creates listings only after the referenced property has been found in the store.
"""

from datetime import datetime, timezone
from typing import List

from app.database import MongoStore
from app.models.listing import Listing
from app.repositories.base import StoreError, RecordDecodeError
from app.repositories.listing import ListingRepository
from app.repositories.property import PropertyRepository
from app.schemas.listing import ListingCreate
from app.utils.exceptions import InternalServerError, ReferencedRecordNotFoundError
from app.utils.validators import ValidationUtils
import logging

logger = logging.getLogger(__name__)


class ListingService:
    """Listing creation with referential validation, and listing retrieval."""

    def __init__(self, store: MongoStore):
        self.listing_repo = ListingRepository(store)
        self.property_repo = PropertyRepository(store)

    async def list_listings(self) -> List[Listing]:
        try:
            return await self.listing_repo.get_all()
        except StoreError:
            raise InternalServerError("Failed to retrieve Listings")
        except RecordDecodeError:
            raise InternalServerError("Failed to decode retrieved Listings")

    async def create_listing(self, listing_data: ListingCreate) -> str:
        """
        Create a new listing for an existing property.

        The existence check and the insert are separate store calls; nothing
        prevents the property from changing in between.

        Args:
            listing_data: Validated listing payload

        Returns:
            Identifier of the new listing

        Raises:
            InvalidIdentifierError: If property_id is not a valid id
            ReferencedRecordNotFoundError: If no property has that id
            InternalServerError: If the lookup or the insert fails
        """
        property_id = ValidationUtils.parse_object_id(listing_data.property_id, "Property")

        try:
            exists = await self.property_repo.exists({"_id": property_id})
        except StoreError:
            raise InternalServerError("Failed to check PropertyID")
        if not exists:
            logger.warning(f"Listing rejected: property {property_id} does not exist")
            raise ReferencedRecordNotFoundError("Property")

        document = listing_data.to_document()
        document["created_at"] = datetime.now(timezone.utc)
        document["photos"] = []

        try:
            listing_id = await self.listing_repo.create(document)
        except StoreError:
            raise InternalServerError("Failed to create Listing")

        logger.info(f"Listing created for property {property_id} (ID: {listing_id})")
        return listing_id
