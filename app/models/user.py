"""
User record for people browsing, inquiring and booking viewings.
"""

import enum
from datetime import datetime
from typing import Optional

from pydantic import Field

from app.models.base import Record


class UserRole(str, enum.Enum):
    """User role enumeration."""
    USER = "user"
    AGENT = "agent"
    ADMIN = "admin"


class User(Record):
    """
    User document as stored in the ``users`` collection.
    The password hash is stored alongside but is not part of the record shape.
    """

    id: Optional[str] = Field(None, alias="user_id")
    name: str = ""
    email: str = ""
    phone: str = ""
    role: Optional[str] = None
    created_at: Optional[datetime] = None
