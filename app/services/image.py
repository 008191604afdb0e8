"""
Image hosting service.
Streams uploaded property images to Cloudinary and returns their public URL.
"""

import asyncio
from typing import Any, BinaryIO, Dict, Optional

import cloudinary.uploader
from cloudinary.exceptions import Error as CloudinaryError

from app.config import Settings
from app.utils.exceptions import ImageHostingError
import logging

logger = logging.getLogger(__name__)


class ImageHost:
    """Interface of the image hosting collaborator."""

    async def upload(self, file: BinaryIO, filename: Optional[str] = None) -> str:
        raise NotImplementedError


class CloudinaryImageHost(ImageHost):
    """
    Cloudinary-backed image host.
    Credentials are passed per call, so no process-wide SDK configuration is touched.
    """

    def __init__(
        self,
        cloud_name: Optional[str],
        api_key: Optional[str],
        api_secret: Optional[str],
        folder: Optional[str] = None,
    ):
        self.cloud_name = cloud_name
        self.api_key = api_key
        self.api_secret = api_secret
        self.folder = folder

    @classmethod
    def from_settings(cls, settings: Settings) -> "CloudinaryImageHost":
        if not settings.image_hosting_configured:
            logger.warning("Cloudinary credentials are not configured; image uploads will fail")
        return cls(
            settings.cloudinary_cloud_name,
            settings.cloudinary_api_key,
            settings.cloudinary_api_secret,
            folder=settings.cloudinary_folder,
        )

    @property
    def configured(self) -> bool:
        return all([self.cloud_name, self.api_key, self.api_secret])

    def _upload_options(self) -> Dict[str, Any]:
        options: Dict[str, Any] = {
            "cloud_name": self.cloud_name,
            "api_key": self.api_key,
            "api_secret": self.api_secret,
            "resource_type": "image",
            "secure": True,
        }
        if self.folder:
            options["folder"] = self.folder
        return options

    async def upload(self, file: BinaryIO, filename: Optional[str] = None) -> str:
        """
        Upload an image stream.

        Args:
            file: Readable binary stream positioned at the start of the image
            filename: Original filename, for logging only

        Returns:
            Secure public URL of the hosted image. May be empty if the host returned none.

        Raises:
            ImageHostingError: If the host is not configured or the upload fails
        """
        if not self.configured:
            raise ImageHostingError("Failed to initialize image host: missing credentials")

        try:
            result = await asyncio.to_thread(cloudinary.uploader.upload, file, **self._upload_options())
        except CloudinaryError as e:
            logger.error(f"Cloudinary upload of {filename} failed: {e}")
            raise ImageHostingError(f"Failed to upload image: {e}") from e

        logger.info(f"Upload result for {filename}: public_id={result.get('public_id')}")
        return result.get("secure_url") or ""
