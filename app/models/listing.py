"""
Listing record: a unit for sale or rent inside a property.
"""

import enum
from datetime import datetime
from typing import List, Optional

from pydantic import Field

from app.models.base import Record


class ListingType(str, enum.Enum):
    """Whether the unit is offered for sale or for rent."""
    SALE = "sale"
    RENT = "rent"


class ListingStatus(str, enum.Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"


class FacingDirection(str, enum.Enum):
    N = "N"
    S = "S"
    E = "E"
    W = "W"
    NE = "NE"
    NW = "NW"
    SE = "SE"
    SW = "SW"


class Listing(Record):
    """
    Listing document as stored in the ``listings`` collection.
    Enumerated fields are kept as plain strings on read so older documents still decode.
    """

    id: Optional[str] = Field(None, alias="listing_id")
    property_id: str = ""
    description: str = ""
    price: float = 0.0
    minimum_contract: str = ""
    floor: int = 0
    size: float = 0.0  # square meters
    bedroom: int = 0
    bathroom: int = 0
    furniture: str = ""  # e.g. fully-fitted, fully furnished
    status: str = ""  # e.g. ready to move in, finishing in 2026
    listing_type: str = ""
    facing_direction: str = ""
    created_at: Optional[datetime] = None
    photos: List[str] = Field(default_factory=list)
    listing_status: str = ""
