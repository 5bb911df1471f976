import logging
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse

from utils.errors import AppError

logger = logging.getLogger(__name__)

def _now_iso():
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")

def add_error_handlers(app: FastAPI):
    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        # pesan singkat untuk browser, sama seperti respons teks di halaman lain
        return PlainTextResponse(exc.message, status_code=exc.status_code)

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=exc)
        return JSONResponse(
            status_code=500,
            content={
                "error": {"code": "INTERNAL_ERROR", "message": str(exc)},
                "generated_at": _now_iso(),
                "latency_ms": 0,
            },
        )
