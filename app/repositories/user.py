"""
User repository for the ``users`` collection.
"""

from app.database import MongoStore, USERS
from app.models.user import User
from app.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    collection_name = USERS

    def __init__(self, store: MongoStore):
        super().__init__(User, store)

    async def email_exists(self, email: str) -> bool:
        """
        Check whether any user has exactly this email.
        Matching uses the collection's default collation, so it is case-sensitive.
        """
        return await self.exists({"email": email})
