import logging
import uuid

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from report_photos.api.routers import photos, reports
from report_photos.config import get_settings
from report_photos.db import init_db
from report_photos.errors import register_error_handlers
from report_photos.logging_config import request_id_var, setup_logging

settings = get_settings()
setup_logging(settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(title="Report Photos API", version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["X-Request-ID"],
)


@app.middleware("http")
async def request_id_middleware(request: Request, call_next):
    # クライアント指定の X-Request-ID があれば引き継ぐ
    rid = request.headers.get("X-Request-ID") or uuid.uuid4().hex
    request.state.request_id = rid
    token = request_id_var.set(rid)
    try:
        response = await call_next(request)
    finally:
        request_id_var.reset(token)
    response.headers["X-Request-ID"] = rid
    return response


register_error_handlers(app)


@app.get("/health")
def health():
    return {"ok": True}


# 初回起動時にDBスキーマを作成
@app.on_event("startup")
def on_startup():
    init_db()
    logger.info("Database initialised")

app.include_router(reports.router, prefix="/reports", tags=["reports"])
app.include_router(photos.router,                     tags=["photos"])
