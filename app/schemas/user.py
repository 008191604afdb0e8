"""
Pydantic schemas for user requests and responses.
"""

from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional

from app.models.user import UserRole


class UserCreate(BaseModel):
    """
    Schema for creating a new user.
    The email is checked for a valid format but stored exactly as submitted,
    so the case-sensitive existence check finds it again.
    """

    model_config = ConfigDict(
        use_enum_values=True,
        json_schema_extra={
            "example": {
                "name": "Jane Doe",
                "email": "jane@example.com",
                "phone": "+971500000000",
                "role": "user",
            }
        },
    )

    name: str = Field("", max_length=255)
    email: str
    password: Optional[str] = Field(None, min_length=8, max_length=128)
    phone: str = Field("", max_length=32)
    role: UserRole = UserRole.USER

    @field_validator("email")
    @classmethod
    def validate_email_format(cls, v):
        """Validate email format using email-validator, without normalizing it."""
        try:
            validate_email(v, check_deliverability=False)
        except EmailNotValidError as e:
            raise ValueError(f"Invalid email format: {e}")
        return v


class UserCreatedResponse(BaseModel):
    user_id: str


class UserExistsResponse(BaseModel):
    exists: bool
