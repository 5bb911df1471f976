"""
services/upload_service.py

Penanganan upload foto mahasiswa:
  1) whitelist ekstensi (.jpg .jpeg .png .gif)
  2) nama file unik dari uuid4, ekstensi asli dipertahankan
  3) simpan ke UPLOAD_DIR, dikembalikan sebagai path publik /uploads/<nama>
"""

import logging
import shutil
import uuid
from pathlib import Path
from typing import Optional

from fastapi import UploadFile

from config.settings import settings
from utils.errors import UploadRejectedError

logger = logging.getLogger(__name__)

ALLOWED_EXTENSIONS = {".jpg", ".jpeg", ".png", ".gif"}
PUBLIC_PREFIX = "/uploads"


def upload_dir() -> Path:
    return Path(settings.UPLOAD_DIR)


def ensure_upload_dir() -> Path:
    """Membuat folder upload bila belum ada."""
    path = upload_dir()
    if not path.exists():
        path.mkdir(parents=True, exist_ok=True)
        logger.info(f"Folder upload dibuat otomatis: {path}")
    return path


def has_file(foto: Optional[UploadFile]) -> bool:
    # browser tetap mengirim part kosong (filename="") bila tidak ada file yang dipilih
    return foto is not None and bool(foto.filename)


def validate_extension(filename: str) -> str:
    """Mengembalikan ekstensi (huruf kecil) atau melempar UploadRejectedError."""
    ext = Path(filename).suffix.lower()
    if ext not in ALLOWED_EXTENSIONS:
        raise UploadRejectedError(filename)
    return ext


def generate_filename(original_name: str) -> str:
    return f"{uuid.uuid4().hex}{Path(original_name).suffix.lower()}"


def save_photo(foto: UploadFile) -> str:
    """Validasi lalu tulis file ke disk. Return: path publik untuk kolom `foto`."""
    validate_extension(foto.filename)
    name = generate_filename(foto.filename)
    dest = ensure_upload_dir() / name
    with dest.open("wb") as out:
        shutil.copyfileobj(foto.file, out)
    logger.info(f"Foto disimpan: {foto.filename} -> {dest}")
    return f"{PUBLIC_PREFIX}/{name}"


def remove_photo(public_path: Optional[str]) -> None:
    """Menghapus file hasil save_photo (dipakai saat insert gagal)."""
    if not public_path or not public_path.startswith(PUBLIC_PREFIX + "/"):
        return
    target = upload_dir() / public_path[len(PUBLIC_PREFIX) + 1:]
    try:
        target.unlink()
    except FileNotFoundError:
        logger.warning(f"Foto sudah tidak ada: {target}")
