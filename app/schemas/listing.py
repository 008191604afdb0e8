"""
Pydantic schemas for listing requests and responses.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict, Optional

from app.models.listing import ListingType, ListingStatus, FacingDirection


class ListingCreate(BaseModel):
    """
    Schema for creating a new listing.
    ``property_id`` is checked against the properties collection by the service.
    """

    model_config = ConfigDict(
        use_enum_values=True,
        json_schema_extra={
            "example": {
                "property_id": "665f1c2b9d1e8a3f4c2b1a09",
                "description": "Two bedroom corner unit",
                "price": 1850000,
                "minimum_contract": "12 months",
                "floor": 14,
                "size": 112.5,
                "bedroom": 2,
                "bathroom": 2,
                "furniture": "fully furnished",
                "status": "ready to move in",
                "listing_type": "sale",
                "facing_direction": "NE",
                "listing_status": "active",
            }
        },
    )

    property_id: str = Field("", description="Identifier of the property this unit belongs to")
    description: str = Field("", max_length=5000)
    price: float = Field(0.0, ge=0)
    minimum_contract: str = ""
    floor: int = 0
    size: float = Field(0.0, ge=0, description="Size in square meters")
    bedroom: int = Field(0, ge=0, le=50)
    bathroom: int = Field(0, ge=0, le=50)
    furniture: str = ""
    status: str = ""
    listing_type: Optional[ListingType] = None
    facing_direction: Optional[FacingDirection] = None
    listing_status: ListingStatus = ListingStatus.ACTIVE

    def to_document(self) -> Dict[str, Any]:
        document = self.model_dump()
        # Unset enumerations are stored as empty strings
        for key in ("listing_type", "facing_direction"):
            if document[key] is None:
                document[key] = ""
        return document


class ListingCreatedResponse(BaseModel):
    listing_id: str
