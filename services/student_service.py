import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from models.students import Student as StudentModel
from schemas.students import StudentCreate
from utils.errors import StudentNotFoundError

logger = logging.getLogger(__name__)


# ==========================================================
# [1] Pencarian / pembacaan
# ==========================================================

def find_by_nim(db: Session, nim: Optional[str]) -> List[StudentModel]:
    """Pencocokan persis pada kolom nim."""
    if not nim:
        return []
    return db.query(StudentModel).filter(StudentModel.nim == nim).all()


def get_student(db: Session, student_id: int, message: str = "Mahasiswa tidak ditemukan") -> StudentModel:
    student = db.query(StudentModel).filter(StudentModel.id == student_id).first()
    if student is None:
        raise StudentNotFoundError(student_id, message)
    return student


def list_students(db: Session) -> List[StudentModel]:
    # tanpa filter, tanpa paging, urutan bawaan engine
    return db.query(StudentModel).all()


# ==========================================================
# [2] Perubahan data
# ==========================================================

def create_student(db: Session, data: StudentCreate, foto: Optional[str] = None) -> StudentModel:
    student = StudentModel(foto=foto, **data.model_dump())
    db.add(student)
    db.commit()
    db.refresh(student)
    logger.info(f"Data mahasiswa {student.nama_lengkap} berhasil ditambahkan (id={student.id})")
    return student


def update_student(db: Session, student_id: int, data: StudentCreate, foto: Optional[str] = None) -> StudentModel:
    """Foto hanya diganti bila `foto` diberikan; selain itu path lama dipertahankan."""
    student = get_student(db, student_id, "Data tidak ditemukan")

    for key, value in data.model_dump().items():
        setattr(student, key, value)
    if foto:
        student.foto = foto

    db.commit()
    db.refresh(student)
    logger.info(f"Data mahasiswa {student.nama_lengkap} berhasil diperbarui (id={student_id})")
    return student


def delete_student(db: Session, student_id: int) -> None:
    student = get_student(db, student_id, "Data tidak ditemukan")
    db.delete(student)
    db.commit()
    logger.info(f"Data mahasiswa ID {student_id} berhasil dihapus")
