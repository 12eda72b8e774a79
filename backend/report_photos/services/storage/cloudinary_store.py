# backend/report_photos/services/storage/cloudinary_store.py
import io
import logging
import re
from dataclasses import dataclass
from typing import Optional

import cloudinary
import cloudinary.uploader
from cloudinary.exceptions import Error as CloudinaryError

from report_photos.config import Settings, get_settings

logger = logging.getLogger(__name__)

# https://res.cloudinary.com/{cloud_name}/image/upload/{version}/{public_id}.{format}
PUBLIC_ID_RE = re.compile(r"/upload/(?:v\d+/)?(.+?)(?:\.[^.]+)?$")


class ImageStoreError(Exception):
    pass


@dataclass
class UploadResult:
    public_id: str
    secure_url: str
    url: str
    format: str
    bytes: int
    width: Optional[int] = None
    height: Optional[int] = None


def extract_public_id(url: str) -> Optional[str]:
    m = PUBLIC_ID_RE.search(url or "")
    return m.group(1) if m else None


class CloudinaryStore:
    """Thin wrapper over the Cloudinary upload API."""

    def __init__(self, settings: Settings):
        cloudinary.config(
            cloud_name=settings.cloudinary_cloud_name,
            api_key=settings.cloudinary_api_key,
            api_secret=settings.cloudinary_api_secret,
            secure=True,
        )

    def upload(
        self,
        data: bytes,
        folder: str = "reports",
        resource_type: str = "image",
        transformation: Optional[list[dict]] = None,
    ) -> UploadResult:
        try:
            result = cloudinary.uploader.upload(
                io.BytesIO(data),
                folder=folder,
                resource_type=resource_type,
                transformation=transformation,
            )
        except CloudinaryError as e:
            raise ImageStoreError(f"Cloudinary upload failed: {e}") from e
        if not result:
            raise ImageStoreError("Upload failed: No result returned")

        logger.info("Uploaded %s (%s bytes) to folder %s", result.get("public_id"), result.get("bytes"), folder)
        return UploadResult(
            public_id=result["public_id"],
            secure_url=result["secure_url"],
            url=result["url"],
            format=result.get("format", ""),
            bytes=result.get("bytes", len(data)),
            width=result.get("width"),
            height=result.get("height"),
        )

    def delete(self, public_id: str) -> None:
        try:
            result = cloudinary.uploader.destroy(public_id)
        except CloudinaryError as e:
            raise ImageStoreError(f"Cloudinary delete failed: {e}") from e
        # "not found" も成功扱い（既に消えている）
        logger.info("Deleted %s from Cloudinary: %s", public_id, (result or {}).get("result"))


_store: Optional[CloudinaryStore] = None


def get_image_store() -> CloudinaryStore:
    # SDK 設定は一度だけ
    global _store
    if _store is None:
        _store = CloudinaryStore(get_settings())
    return _store
