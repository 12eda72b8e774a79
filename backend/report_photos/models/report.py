# backend/report_photos/models/report.py
from sqlalchemy import String, Column, DateTime
from sqlalchemy.orm import relationship
from .base import Base, new_id, utcnow

class Report(Base):
    __tablename__ = "reports"
    id = Column(String(36), primary_key=True, default=new_id)
    title = Column(String, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    photos = relationship("ReportPhoto", order_by="ReportPhoto.created_at", lazy="selectin")
