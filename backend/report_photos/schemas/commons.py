# backend/report_photos/schemas/commons.py
from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict


def to_iso(value: datetime) -> str:
    # SQLite は tz を保持しないため naive は UTC とみなす
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.isoformat()


class CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class ErrorDetail(BaseModel):
    code: str
    message: str
    requestId: Optional[str] = None


class ErrorOut(BaseModel):
    error: ErrorDetail
