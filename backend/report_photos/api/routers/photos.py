import logging
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, Response, UploadFile
from sqlalchemy.orm import Session

from report_photos.db import get_db
from report_photos.errors import ApiError, not_found, validation_error
from report_photos.models.photo import ReportPhoto
from report_photos.models.report import Report
from report_photos.schemas.commons import ErrorOut, to_iso
from report_photos.schemas.photo import ALLOWED_PHOTO_TYPES, MAX_PHOTO_BYTES, PhotoOut
from report_photos.services.storage.cloudinary_store import (
    CloudinaryStore,
    extract_public_id,
    get_image_store,
)

logger = logging.getLogger(__name__)

router = APIRouter()

# 品質・フォーマットは Cloudinary 側で自動最適化
UPLOAD_TRANSFORMATION = [
    {"quality": "auto"},
    {"fetch_format": "auto"},
]


def photo_out(p: ReportPhoto) -> PhotoOut:
    return PhotoOut(id=p.id, url=p.url, caption=p.caption, created_at=to_iso(p.created_at))


@router.post(
    "/reports/{report_id}/photos",
    status_code=201,
    responses={400: {"model": ErrorOut}, 404: {"model": ErrorOut}, 500: {"model": ErrorOut}},
)
def upload_photo(
    report_id: str,
    file: Optional[UploadFile] = File(None),
    caption: Optional[str] = Form(None),
    db: Session = Depends(get_db),
    store: CloudinaryStore = Depends(get_image_store),
) -> PhotoOut:
    if db.get(Report, report_id) is None:
        raise not_found("Report not found")

    try:
        if file is None:
            raise validation_error("No file uploaded")

        if not file.content_type or file.content_type not in ALLOWED_PHOTO_TYPES:
            raise validation_error("Invalid file type. Only JPEG, PNG, and WebP images are allowed.")

        data = file.file.read()
        if len(data) > MAX_PHOTO_BYTES:
            raise validation_error("File too large. Maximum size is 5MB.")

        uploaded = store.upload(
            data,
            folder=f"reports/{report_id}",
            resource_type="image",
            transformation=UPLOAD_TRANSFORMATION,
        )

        photo = ReportPhoto(report_id=report_id, url=uploaded.secure_url, caption=caption)
        db.add(photo)
        db.commit()
        db.refresh(photo)
    except ApiError:
        raise
    except Exception:
        db.rollback()
        logger.exception("Failed to upload photo for report %s", report_id)
        raise ApiError(500, "Failed to upload photo", "UPLOAD_FAILED")

    logger.info("Photo %s uploaded for report %s", photo.id, report_id)
    return photo_out(photo)


@router.delete(
    "/photos/{photo_id}",
    status_code=204,
    responses={404: {"model": ErrorOut}, 500: {"model": ErrorOut}},
)
def delete_photo(
    photo_id: str,
    db: Session = Depends(get_db),
    store: CloudinaryStore = Depends(get_image_store),
):
    try:
        photo = db.get(ReportPhoto, photo_id)
        if photo is None:
            raise not_found("Photo not found")

        public_id = extract_public_id(photo.url)
        if public_id:
            try:
                store.delete(public_id)
            except Exception:
                # リモート削除の失敗は致命的ではない（DB 側は削除を続行）
                logger.warning("Failed to delete file from Cloudinary: %s", public_id, exc_info=True)
        else:
            # 移行期間中の旧ローカルURL
            logger.warning("Photo %s has non-Cloudinary URL, skipping Cloudinary deletion", photo_id)

        db.delete(photo)
        db.commit()
    except ApiError:
        raise
    except Exception:
        db.rollback()
        logger.exception("Failed to delete photo %s", photo_id)
        raise ApiError(500, "Failed to delete photo", "DELETE_FAILED")

    return Response(status_code=204)
