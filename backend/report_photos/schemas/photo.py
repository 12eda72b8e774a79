# backend/report_photos/schemas/photo.py
from pydantic import Field
from typing import Optional

from .commons import CamelModel

MAX_PHOTO_BYTES = 5 * 1024 * 1024  # 5MB
ALLOWED_PHOTO_TYPES = {"image/jpeg", "image/jpg", "image/png", "image/webp"}


class PhotoOut(CamelModel):
    id: str
    url: str
    caption: Optional[str] = None
    created_at: str = Field(alias="createdAt")
