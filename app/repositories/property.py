"""
Property repository for the ``properties`` collection.
"""

from bson import ObjectId

from app.database import MongoStore, PROPERTIES
from app.models.property import Property
from app.repositories.base import BaseRepository


class PropertyRepository(BaseRepository[Property]):
    collection_name = PROPERTIES

    def __init__(self, store: MongoStore):
        super().__init__(Property, store)

    async def add_image(self, property_id: ObjectId, url: str) -> int:
        """Append an image URL to the property's image list."""
        return await self.push(property_id, "Images", url)
