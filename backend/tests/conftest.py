import os

os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from report_photos.db import get_db
from report_photos.main import app
from report_photos.models.base import Base
from report_photos.models.report import Report
from report_photos.services.storage.cloudinary_store import (
    ImageStoreError,
    UploadResult,
    get_image_store,
)


class FakeStore:
    def __init__(self):
        self.uploads = []
        self.deletes = []
        self.fail_upload = False
        self.fail_delete = False

    def upload(self, data, folder="reports", resource_type="image", transformation=None):
        self.uploads.append({"data": data, "folder": folder, "resource_type": resource_type, "transformation": transformation})
        if self.fail_upload:
            raise ImageStoreError("boom")
        public_id = f"{folder}/img{len(self.uploads)}"
        return UploadResult(
            public_id=public_id,
            secure_url=f"https://res.cloudinary.com/demo/image/upload/v1700000000/{public_id}.jpg",
            url=f"http://res.cloudinary.com/demo/image/upload/v1700000000/{public_id}.jpg",
            format="jpg",
            bytes=len(data),
        )

    def delete(self, public_id):
        self.deletes.append(public_id)
        if self.fail_delete:
            raise ImageStoreError("remote down")


@pytest.fixture
def session_factory():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    import report_photos.models.photo  # noqa: F401
    Base.metadata.create_all(bind=engine)
    yield sessionmaker(autocommit=False, autoflush=False, bind=engine)
    engine.dispose()


@pytest.fixture
def db(session_factory):
    s = session_factory()
    try:
        yield s
    finally:
        s.close()


@pytest.fixture
def store():
    return FakeStore()


@pytest.fixture
def client(session_factory, store):
    def _get_db():
        s = session_factory()
        try:
            yield s
        finally:
            s.close()

    app.dependency_overrides[get_db] = _get_db
    app.dependency_overrides[get_image_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def report(db):
    r = Report(title="Site visit")
    db.add(r)
    db.commit()
    db.refresh(r)
    return r
