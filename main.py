from pathlib import Path
import logging

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from config.settings import settings
from database.db import check_connection

# ✅ middleware
from middlewares.timing import TimingMiddleware
from middlewares.error_handler import add_error_handlers

# ✅ router
from routers import students
from services.upload_service import ensure_upload_dir

BASE_DIR = Path(__file__).resolve().parent

logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.APP_TITLE,
    description=settings.APP_DESCRIPTION,
    version=settings.APP_VERSION,
)

# ✅ header X-Latency-Ms di setiap respons
app.add_middleware(TimingMiddleware)

# ✅ error handler global (404 teks untuk data yang tidak ada, 500 JSON untuk sisanya)
add_error_handlers(app)

# ✅ route halaman mahasiswa (tanpa prefix, sesuai URL form)
app.include_router(students.router)

# ✅ file statis: stylesheet dan foto hasil upload
app.mount("/static", StaticFiles(directory=BASE_DIR / "static"), name="static")
app.mount("/uploads", StaticFiles(directory=settings.UPLOAD_DIR, check_dir=False), name="uploads")


# ✅ health check
@app.get("/health")
def health_check():
    return {"status": "ok", "message": "API is running"}


def configure_logging() -> None:
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    # log debug parser multipart terlalu ramai
    logging.getLogger("multipart").setLevel(logging.WARNING)
    logging.getLogger("python_multipart").setLevel(logging.WARNING)


@app.on_event("startup")
def _startup():
    configure_logging()
    ensure_upload_dir()
    try:
        check_connection()
    except Exception:
        logger.exception("Gagal koneksi ke database")
        raise
    logger.info("Koneksi ke database berhasil")


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host="0.0.0.0", port=3000)
