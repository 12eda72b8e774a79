from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from pathlib import Path

from report_photos.config import get_settings
# モデル定義側の Base（report_photos.models.base）を利用してメタデータを統一
from report_photos.models.base import Base


def default_sqlite_path() -> Path:
    # backend/report_photos/db.py → ../../.. = <repo root>
    repo_root = Path(__file__).resolve().parents[2]
    return repo_root / "data" / "app.db"


# 1) DATABASE_URL が指定されていれば優先（例: postgresql+psycopg://...）
# 2) それ以外は SQLite を使用
_database_url_env = get_settings().database_url
if _database_url_env:
    SQLALCHEMY_DATABASE_URL = _database_url_env
    _is_sqlite = SQLALCHEMY_DATABASE_URL.startswith("sqlite")
else:
    db_path = default_sqlite_path()
    db_path.parent.mkdir(parents=True, exist_ok=True)
    SQLALCHEMY_DATABASE_URL = f"sqlite:///{db_path}"
    _is_sqlite = True

_connect_args = {"check_same_thread": False} if _is_sqlite else {}

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args=_connect_args,
)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db() -> None:
    # 各モデルモジュールを明示 import してメタデータ登録を確実化
    import report_photos.models.report  # noqa: F401
    import report_photos.models.photo  # noqa: F401
    Base.metadata.create_all(bind=engine)


def get_db():
    db: Session = SessionLocal()
    try:
        yield db
    finally:
        db.close()
