from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from report_photos.db import get_db
from report_photos.errors import not_found
from report_photos.models.report import Report
from report_photos.schemas.commons import to_iso
from report_photos.schemas.report import ReportIn, ReportOut, ReportDetailOut
from report_photos.api.routers.photos import photo_out

router = APIRouter()


@router.get("")
@router.get("/")
def list_reports(db: Session = Depends(get_db)) -> list[ReportOut]:
    rows = db.query(Report).order_by(Report.created_at.asc()).all()
    return [ReportOut(id=r.id, title=r.title, created_at=to_iso(r.created_at)) for r in rows]


@router.post("", status_code=201)
@router.post("/", status_code=201)
def create_report(payload: ReportIn, db: Session = Depends(get_db)) -> ReportOut:
    obj = Report(title=payload.title)
    db.add(obj)
    db.commit()
    db.refresh(obj)
    return ReportOut(id=obj.id, title=obj.title, created_at=to_iso(obj.created_at))


@router.get("/{report_id}")
def get_report(report_id: str, db: Session = Depends(get_db)) -> ReportDetailOut:
    r = db.get(Report, report_id)
    if not r:
        raise not_found("Report not found")
    return ReportDetailOut(
        id=r.id,
        title=r.title,
        created_at=to_iso(r.created_at),
        photos=[photo_out(p) for p in r.photos],
    )
