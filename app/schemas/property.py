"""
Pydantic schemas for property requests and responses.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from typing import Any, Dict, List


class PropertyCreate(BaseModel):
    """
    Schema for creating a new property.

    Identifier, timestamp and image fields are not accepted from the caller;
    if present in the body they are ignored.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "Title": "Skyview",
                "Developer": "Acme",
                "Description": "Twin towers overlooking the marina",
                "Coordinates": [25.0805, 55.1403],
                "MinPrice": 100000,
                "MaxPrice": 200000,
                "Facilities": ["Pool", "Gym"],
                "Built": 2021,
            }
        },
    )

    title: str = Field("", max_length=255, alias="Title")
    developer: str = Field("", max_length=255, alias="Developer")
    description: str = Field("", max_length=5000, alias="Description")
    coordinates: List[float] = Field(
        default_factory=lambda: [0.0, 0.0],
        min_length=2,
        max_length=2,
        alias="Coordinates",
        description="Latitude, longitude pair",
    )
    min_price: int = Field(0, ge=0, alias="MinPrice")
    max_price: int = Field(0, ge=0, alias="MaxPrice")
    facilities: List[str] = Field(default_factory=list, alias="Facilities")
    built: int = Field(0, ge=0, alias="Built")

    @field_validator("coordinates")
    @classmethod
    def validate_coordinates(cls, v):
        lat, lng = v
        if not -90 <= lat <= 90:
            raise ValueError("Latitude must be between -90 and 90")
        if not -180 <= lng <= 180:
            raise ValueError("Longitude must be between -180 and 180")
        return v

    @model_validator(mode="after")
    def validate_price_range(self):
        """MinPrice may not exceed MaxPrice when both are set."""
        if self.min_price and self.max_price and self.min_price > self.max_price:
            raise ValueError("MinPrice cannot be greater than MaxPrice")
        return self

    def to_document(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)


class PropertyCreatedResponse(BaseModel):
    property_id: str


class ImageUploadResponse(BaseModel):
    """Schema for a successful image attachment."""

    message: str = Field(..., examples=["Image uploaded successfully"])
    url: str = Field(..., description="Public URL of the hosted image")
