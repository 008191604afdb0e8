"""
Listing API endpoints.
"""

from fastapi import APIRouter, Depends
from typing import List

from app.models.listing import Listing
from app.schemas.listing import ListingCreate, ListingCreatedResponse
from app.services.listing import ListingService
from app.utils.dependencies import get_listing_service


router = APIRouter(tags=["Listings"])


@router.get("/listings", response_model=List[Listing], summary="List all listings")
async def list_listings(
    listing_service: ListingService = Depends(get_listing_service)
) -> List[Listing]:
    return await listing_service.list_listings()


@router.post(
    "/add/listing",
    response_model=ListingCreatedResponse,
    summary="Create new listing",
    description="Create a listing for an existing property. Fails with 400 if property_id is malformed or unknown.",
)
async def create_listing(
    listing_data: ListingCreate,
    listing_service: ListingService = Depends(get_listing_service)
) -> ListingCreatedResponse:
    listing_id = await listing_service.create_listing(listing_data)
    return ListingCreatedResponse(listing_id=listing_id)
