"""
Listing repository for the ``listings`` collection.
"""

from app.database import MongoStore, LISTINGS
from app.models.listing import Listing
from app.repositories.base import BaseRepository


class ListingRepository(BaseRepository[Listing]):
    collection_name = LISTINGS

    def __init__(self, store: MongoStore):
        super().__init__(Listing, store)
