# backend/report_photos/models/photo.py
from sqlalchemy import String, Column, ForeignKey, DateTime
from .base import Base, new_id, utcnow

class ReportPhoto(Base):
    __tablename__ = "report_photos"
    id = Column(String(36), primary_key=True, default=new_id)
    report_id = Column(String(36), ForeignKey("reports.id", ondelete="CASCADE"), nullable=False, index=True)
    url = Column(String, nullable=False)  # Cloudinary secure_url（旧データはローカルURL）
    caption = Column(String, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
