"""
User service for account creation, listing and existence checks.
"""

from datetime import datetime, timezone
from typing import List

from app.database import MongoStore
from app.models.user import User
from app.repositories.base import StoreError, RecordDecodeError
from app.repositories.user import UserRepository
from app.schemas.user import UserCreate
from app.utils.exceptions import BadRequestError, InternalServerError
from app.utils.passwords import hash_password
import logging

logger = logging.getLogger(__name__)


class UserService:
    """
    User service.
    Email uniqueness is not enforced on create; callers use user_exists beforehand.
    """

    def __init__(self, store: MongoStore):
        self.user_repo = UserRepository(store)

    async def list_users(self) -> List[User]:
        try:
            users = await self.user_repo.get_all()
        except StoreError:
            raise InternalServerError("Failed to retrieve Users")
        except RecordDecodeError:
            raise InternalServerError("Failed to decode retrieved Users")

        logger.info(f"Successfully retrieved {len(users)} users")
        return users

    async def create_user(self, user_data: UserCreate) -> str:
        """
        Create a new user.
        A supplied password is stored only as a hash.

        Returns:
            Identifier of the new user
        """
        document = user_data.model_dump(exclude={"password"})
        if user_data.password:
            document["password_hash"] = hash_password(user_data.password)
        document["created_at"] = datetime.now(timezone.utc)

        try:
            user_id = await self.user_repo.create(document)
        except StoreError:
            raise InternalServerError("Failed to create User")

        logger.info(f"User created: {user_data.email} (ID: {user_id})")
        return user_id

    async def user_exists(self, email: str) -> bool:
        """
        Check whether a user with exactly this email exists.

        Raises:
            BadRequestError: If email is empty
            InternalServerError: If the lookup fails
        """
        if not email:
            raise BadRequestError("Email query parameter is required")

        try:
            return await self.user_repo.email_exists(email)
        except StoreError:
            raise InternalServerError("Error checking user existence")
