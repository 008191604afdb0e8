"""
Inquiry record: a message from a user about a property.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from app.models.base import Record


class Inquiry(Record):
    id: Optional[str] = Field(None, alias="inquiry_id")
    user_id: str = ""
    property_id: str = ""
    message: str = ""
    created_at: Optional[datetime] = Field(None, alias="Created_at")
