"""
Property record: a development or building that listings belong to.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import Field

from app.models.base import Record


class Property(Record):
    """Property document as stored in the ``properties`` collection."""

    id: Optional[str] = Field(None, alias="property_id")
    title: str = Field("", alias="Title")
    developer: str = Field("", alias="Developer")
    description: str = Field("", alias="Description")
    coordinates: List[float] = Field(default_factory=lambda: [0.0, 0.0], alias="Coordinates")
    min_price: int = Field(0, alias="MinPrice")
    max_price: int = Field(0, alias="MaxPrice")
    facilities: List[str] = Field(default_factory=list, alias="Facilities")
    images: List[str] = Field(default_factory=list, alias="Images")
    built: int = Field(0, alias="Built")
    created_at: Optional[datetime] = Field(None, alias="Created_at")
