"""
Property API endpoints: listing, creation and image attachment.
"""

from fastapi import APIRouter, Depends, File, Path, UploadFile, status
from typing import List

from app.models.property import Property
from app.schemas.property import PropertyCreate, PropertyCreatedResponse, ImageUploadResponse
from app.services.property import PropertyService
from app.utils.dependencies import get_property_image_service, get_property_service


router = APIRouter(tags=["Properties"])


@router.get(
    "/properties",
    response_model=List[Property],
    status_code=status.HTTP_200_OK,
    summary="List all properties",
)
async def list_properties(
    property_service: PropertyService = Depends(get_property_service)
) -> List[Property]:
    """Get every stored property, unpaginated."""
    return await property_service.list_properties()


@router.post(
    "/add/property",
    response_model=PropertyCreatedResponse,
    summary="Create new property",
    description="Create a property. Its image list starts empty and its creation time is set by the server.",
)
async def create_property(
    property_data: PropertyCreate,
    property_service: PropertyService = Depends(get_property_service)
) -> PropertyCreatedResponse:
    property_id = await property_service.create_property(property_data)
    return PropertyCreatedResponse(property_id=property_id)


@router.post(
    "/properties/{property_id}/images",
    response_model=ImageUploadResponse,
    summary="Attach an image to a property",
    description="Upload an image (form field 'image', up to 10MiB) and append its hosted URL to the property's images.",
)
async def upload_property_image(
    property_id: str = Path(..., description="Property identifier"),
    image: UploadFile = File(..., description="Image file to upload"),
    property_service: PropertyService = Depends(get_property_image_service)
) -> ImageUploadResponse:
    """
    Upload a single image for a property.

    Raises:
        InvalidIdentifierError: If property_id is malformed
        FileSizeExceededError: If the file is larger than the upload limit
        PropertyNotFoundError: If the property does not exist
        ImageHostingError: If the image host fails
    """
    try:
        url = await property_service.attach_image(property_id, image)
    finally:
        await image.close()

    return ImageUploadResponse(message="Image uploaded successfully", url=url)
