import logging
from contextvars import ContextVar

# リクエスト単位のID（ミドルウェアで設定）
request_id_var: ContextVar[str] = ContextVar("request_id", default="-")

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] [%(request_id)s] %(message)s"


class RequestIdFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        # extra={"request_id": ...} で明示された値を優先
        if not hasattr(record, "request_id"):
            record.request_id = request_id_var.get()
        return True


def setup_logging(level: str = "INFO") -> None:
    root = logging.getLogger()
    # 二重登録を避ける（reload / テストで複数回呼ばれる）
    for h in root.handlers:
        if getattr(h, "_report_photos", False):
            root.setLevel(level.upper())
            return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler.addFilter(RequestIdFilter())
    handler._report_photos = True  # type: ignore[attr-defined]
    root.addHandler(handler)
    root.setLevel(level.upper())
