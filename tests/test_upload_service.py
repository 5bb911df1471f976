import io

import pytest
from fastapi import UploadFile

from services import upload_service
from utils.errors import UploadRejectedError


@pytest.mark.parametrize("name", ["a.jpg", "a.jpeg", "a.png", "a.gif", "FOTO.JPG", "x.y.Png"])
def test_allowed_extensions(name):
    assert upload_service.validate_extension(name) in upload_service.ALLOWED_EXTENSIONS


@pytest.mark.parametrize("name", ["a.exe", "a.bmp", "a.jpgx", "jpg", "a.png.php", ""])
def test_rejected_extensions(name):
    with pytest.raises(UploadRejectedError) as exc:
        upload_service.validate_extension(name)
    assert exc.value.status_code == 400
    assert exc.value.message == "Format file tidak diizinkan!"
    assert exc.value.filename == name


def test_generated_names_are_unique_and_keep_extension():
    names = {upload_service.generate_filename("Foto Saya.JPEG") for _ in range(50)}
    assert len(names) == 50
    assert all(n.endswith(".jpeg") for n in names)
    assert all(" " not in n for n in names)


def test_has_file():
    assert not upload_service.has_file(None)
    assert not upload_service.has_file(UploadFile(file=io.BytesIO(b""), filename=""))
    assert upload_service.has_file(UploadFile(file=io.BytesIO(b"x"), filename="a.png"))


def test_ensure_upload_dir_creates_folder(upload_dir):
    assert not upload_dir.exists()
    assert upload_service.ensure_upload_dir() == upload_dir
    assert upload_dir.is_dir()
    # pemanggilan kedua tidak error
    upload_service.ensure_upload_dir()


def test_save_and_remove_photo(upload_dir):
    foto = UploadFile(file=io.BytesIO(b"GIF89a..."), filename="kucing.gif")

    public_path = upload_service.save_photo(foto)

    assert public_path.startswith("/uploads/")
    stored = upload_dir / public_path.rsplit("/", 1)[1]
    assert stored.read_bytes() == b"GIF89a..."

    upload_service.remove_photo(public_path)
    assert not stored.exists()
    # file yang sudah hilang atau path kosong diabaikan
    upload_service.remove_photo(public_path)
    upload_service.remove_photo(None)


def test_save_photo_rejects_before_writing(upload_dir):
    foto = UploadFile(file=io.BytesIO(b"#!/bin/sh"), filename="run.sh")
    with pytest.raises(UploadRejectedError):
        upload_service.save_photo(foto)
    assert not upload_dir.exists()
