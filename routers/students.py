import logging
from pathlib import Path
from typing import Annotated, Optional

from fastapi import APIRouter, Depends, File, Form, Request, UploadFile
from fastapi.responses import PlainTextResponse, RedirectResponse
from fastapi.templating import Jinja2Templates
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from database.db import get_db
from dependencies.forms import student_form
from dependencies.params import student_id_param
from schemas.students import Student as StudentSchema, StudentCreate
from services import student_service, upload_service
from utils.errors import UploadRejectedError

router = APIRouter(tags=["Data Mahasiswa"])

logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"
templates = Jinja2Templates(directory=str(TEMPLATE_DIR))

PhotoField = Annotated[Optional[UploadFile], File()]

# id bukan angka -> 404 teks, sama dengan id yang tidak ada
DetailId = Annotated[int, Depends(student_id_param())]
RecordId = Annotated[int, Depends(student_id_param("Data tidak ditemukan"))]


def _redirect_to_list() -> RedirectResponse:
    # 303: browser melanjutkan dengan GET /list setelah POST
    return RedirectResponse(url="/list", status_code=303)


# ==========================================================
# [Tahap 1] Halaman utama & pencarian
# ==========================================================

# ✅ [PAGE] form pencarian NIM
@router.get("/")
def index(request: Request):
    return templates.TemplateResponse(request, "index.html", {"error": None})


# ✅ [SEARCH] cari mahasiswa berdasarkan NIM
@router.post("/cari")
def search_student(
    request: Request,
    nim: Annotated[Optional[str], Form()] = None,
    db: Session = Depends(get_db),
):
    results = student_service.find_by_nim(db, nim)
    if not results:
        return templates.TemplateResponse(
            request, "index.html", {"error": "Mahasiswa tidak ditemukan!", "nim": nim}
        )
    return templates.TemplateResponse(
        request, "detail.html", {"mahasiswa": StudentSchema.model_validate(results[0])}
    )


# ==========================================================
# [Tahap 2] Daftar & detail
# ==========================================================

# ✅ [READ] semua mahasiswa
@router.get("/list")
def list_students(request: Request, db: Session = Depends(get_db)):
    rows = student_service.list_students(db)
    return templates.TemplateResponse(
        request, "list.html", {"data": [StudentSchema.model_validate(r) for r in rows]}
    )


# ✅ [READ] detail mahasiswa berdasarkan ID
@router.get("/detail/{student_id}")
def detail_student(request: Request, student_id: DetailId, db: Session = Depends(get_db)):
    student = student_service.get_student(db, student_id)
    return templates.TemplateResponse(
        request, "detail.html", {"mahasiswa": StudentSchema.model_validate(student)}
    )


# ==========================================================
# [Tahap 3] Tambah
# ==========================================================

# ✅ [PAGE] form tambah
@router.get("/tambah")
def create_form(request: Request):
    return templates.TemplateResponse(request, "tambah.html", {"error": None})


# ✅ [CREATE] proses tambah mahasiswa (multipart, field `foto`)
@router.post("/tambah")
def create_student(
    request: Request,
    data: StudentCreate = Depends(student_form),
    foto: PhotoField = None,
    db: Session = Depends(get_db),
):
    foto_path = None
    if upload_service.has_file(foto):
        try:
            foto_path = upload_service.save_photo(foto)
        except UploadRejectedError as e:
            logger.warning(f"Upload ditolak: {e.filename}")
            return templates.TemplateResponse(
                request, "tambah.html", {"error": e.message, "form": data},
                status_code=e.status_code,
            )

    try:
        student_service.create_student(db, data, foto_path)
    except SQLAlchemyError as e:
        db.rollback()
        upload_service.remove_photo(foto_path)
        logger.error(f"Gagal menambahkan mahasiswa: {e}")
        return PlainTextResponse("Terjadi kesalahan saat menambah data", status_code=500)

    return _redirect_to_list()


# ==========================================================
# [Tahap 4] Edit / update / hapus
# ==========================================================

# ✅ [PAGE] form edit
@router.get("/edit/{student_id}")
def edit_form(request: Request, student_id: RecordId, db: Session = Depends(get_db)):
    student = student_service.get_student(db, student_id, "Data tidak ditemukan")
    return templates.TemplateResponse(
        request, "edit.html", {"mahasiswa": StudentSchema.model_validate(student), "error": None}
    )


# ✅ [UPDATE] proses update (foto boleh diunggah ulang)
@router.post("/update/{student_id}")
def update_student(
    request: Request,
    student_id: RecordId,
    data: StudentCreate = Depends(student_form),
    foto: PhotoField = None,
    db: Session = Depends(get_db),
):
    # cek dulu agar file tidak tersimpan untuk id yang tidak ada
    current = student_service.get_student(db, student_id, "Data tidak ditemukan")

    foto_path = None
    if upload_service.has_file(foto):
        try:
            foto_path = upload_service.save_photo(foto)
        except UploadRejectedError as e:
            logger.warning(f"Upload ditolak: {e.filename}")
            return templates.TemplateResponse(
                request, "edit.html",
                {"mahasiswa": StudentSchema.model_validate(current), "error": e.message},
                status_code=e.status_code,
            )

    try:
        student_service.update_student(db, student_id, data, foto_path)
    except SQLAlchemyError as e:
        db.rollback()
        upload_service.remove_photo(foto_path)
        logger.error(f"Gagal memperbarui mahasiswa id={student_id}: {e}")
        raise

    return _redirect_to_list()


# ✅ [DELETE] hapus mahasiswa
@router.get("/hapus/{student_id}")
def delete_student(student_id: RecordId, db: Session = Depends(get_db)):
    student_service.delete_student(db, student_id)
    return _redirect_to_list()
