from pydantic import BaseModel, ConfigDict
from typing import Optional

# ✅ input dari form tambah/edit
class StudentCreate(BaseModel):
    nama_lengkap: Optional[str] = None       # nama lengkap
    nim: Optional[str] = None                # NIM
    fakultas: Optional[str] = None           # fakultas
    jurusan: Optional[str] = None            # jurusan
    prodi: Optional[str] = None              # program studi
    tahun_masuk: Optional[str] = None        # tahun masuk

# ✅ output untuk view (detail, list, edit)
class Student(StudentCreate):
    id: int
    foto: Optional[str] = None               # path publik foto

    model_config = ConfigDict(from_attributes=True)
