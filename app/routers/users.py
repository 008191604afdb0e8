"""
User API endpoints: listing, creation and email existence check.
"""

from fastapi import APIRouter, Depends, Query
from typing import List, Optional

from app.models.user import User
from app.schemas.user import UserCreate, UserCreatedResponse, UserExistsResponse
from app.services.user import UserService
from app.utils.dependencies import get_user_service


router = APIRouter(tags=["Users"])


@router.get("/users", response_model=List[User], summary="List all users")
async def list_users(
    user_service: UserService = Depends(get_user_service)
) -> List[User]:
    return await user_service.list_users()


@router.get(
    "/check/user",
    response_model=UserExistsResponse,
    summary="Check whether a user exists",
    description="Exact, case-sensitive match on email. Only reports existence, never user details.",
)
async def check_user(
    email: Optional[str] = Query(None, description="Email address to look up"),
    user_service: UserService = Depends(get_user_service)
) -> UserExistsResponse:
    exists = await user_service.user_exists(email)
    return UserExistsResponse(exists=exists)


@router.post("/add/user", response_model=UserCreatedResponse, summary="Create new user")
async def create_user(
    user_data: UserCreate,
    user_service: UserService = Depends(get_user_service)
) -> UserCreatedResponse:
    user_id = await user_service.create_user(user_data)
    return UserCreatedResponse(user_id=user_id)
