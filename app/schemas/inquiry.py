"""
Pydantic schemas for inquiry requests and responses.
"""

from pydantic import BaseModel, Field
from typing import Any, Dict


class InquiryCreate(BaseModel):
    user_id: str = Field(..., min_length=1)
    property_id: str = Field(..., min_length=1)
    message: str = Field(..., min_length=1, max_length=5000)

    def to_document(self) -> Dict[str, Any]:
        return self.model_dump()


class InquiryCreatedResponse(BaseModel):
    inquiry_id: str
