import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Error surfaced to the caller as ``{"error": {code, message, requestId}}``."""

    def __init__(self, status_code: int, message: str, code: str):
        super().__init__(message)
        self.status_code = status_code
        self.message = message
        self.code = code


def not_found(message: str) -> ApiError:
    return ApiError(404, message, "NOT_FOUND")


def validation_error(message: str) -> ApiError:
    return ApiError(400, message, "VALIDATION_ERROR")


def error_body(request: Request, code: str, message: str) -> dict:
    return {
        "error": {
            "code": code,
            "message": message,
            "requestId": getattr(request.state, "request_id", None),
        }
    }


def _error_response(request: Request, status_code: int, code: str, message: str) -> JSONResponse:
    headers = {}
    rid = getattr(request.state, "request_id", None)
    if rid:
        headers["X-Request-ID"] = rid
    return JSONResponse(status_code=status_code, content=error_body(request, code, message), headers=headers)


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    return _error_response(request, exc.status_code, exc.code, exc.message)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # 先頭のエラーだけ返す（pydantic の詳細は出さない）
    errs = exc.errors()
    if errs:
        first = errs[0]
        loc = ".".join(str(p) for p in first.get("loc", ()) if p != "body")
        message = f"{loc}: {first.get('msg')}" if loc else str(first.get("msg"))
    else:
        message = "Invalid request"
    return _error_response(request, 400, "VALIDATION_ERROR", message)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    code = {400: "VALIDATION_ERROR", 404: "NOT_FOUND"}.get(exc.status_code, "HTTP_ERROR")
    return _error_response(request, exc.status_code, code, str(exc.detail))


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    # ServerErrorMiddleware 内ではミドルウェアの ContextVar は既にリセット済み
    logger.exception(
        "Unhandled error on %s %s",
        request.method,
        request.url.path,
        extra={"request_id": getattr(request.state, "request_id", "-")},
    )
    return _error_response(request, 500, "INTERNAL_ERROR", "Internal server error")


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
