"""
Fixture test: SQLite in-memory menggantikan MySQL, folder upload di tmp_path.
"""
import os

# ✅ variabel wajib Settings harus ada sebelum modul aplikasi di-import
os.environ.setdefault("DB_USER", "test")
os.environ.setdefault("DB_PASSWORD", "test")
os.environ.setdefault("DB_HOST", "localhost")
os.environ.setdefault("DB_NAME", "test_kampus")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from config.settings import settings
from database.db import Base, get_db
from main import app
from models.students import Student as StudentModel

test_engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


@pytest.fixture()
def db_session():
    """Skema baru untuk setiap test."""
    Base.metadata.create_all(bind=test_engine)
    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture()
def upload_dir(tmp_path, monkeypatch):
    path = tmp_path / "uploads"
    monkeypatch.setattr(settings, "UPLOAD_DIR", str(path))
    # mount /uploads dibuat saat import; arahkan juga ke folder test
    uploads = next(r for r in app.routes if getattr(r, "name", None) == "uploads")
    monkeypatch.setattr(uploads.app, "directory", path)
    monkeypatch.setattr(uploads.app, "all_directories", [path])
    return path


@pytest.fixture()
def client(db_session, upload_dir):
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    # tanpa `with`: event startup (cek koneksi MySQL) tidak dijalankan
    yield TestClient(app, follow_redirects=False)
    app.dependency_overrides.clear()


@pytest.fixture()
def make_student(db_session):
    def _make(**overrides):
        values = {
            "nama_lengkap": "Budi Santoso",
            "nim": "2021001",
            "fakultas": "Teknik",
            "jurusan": "Teknik Elektro",
            "prodi": "Teknik Informatika",
            "tahun_masuk": "2021",
            "foto": None,
        }
        values.update(overrides)
        student = StudentModel(**values)
        db_session.add(student)
        db_session.commit()
        db_session.refresh(student)
        return student

    return _make
