# backend/report_photos/schemas/report.py
from pydantic import BaseModel, Field

from .commons import CamelModel
from .photo import PhotoOut


class ReportIn(BaseModel):
    title: str = Field(min_length=1)


class ReportOut(CamelModel):
    id: str
    title: str
    created_at: str = Field(alias="createdAt")


class ReportDetailOut(ReportOut):
    photos: list[PhotoOut] = []
