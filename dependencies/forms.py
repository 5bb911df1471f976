from typing import Annotated, Optional

from fastapi import Form

from schemas.students import StudentCreate

FormField = Annotated[Optional[str], Form()]

def student_form(
    nama_lengkap: FormField = None,
    nim: FormField = None,
    fakultas: FormField = None,
    jurusan: FormField = None,
    prodi: FormField = None,
    tahun_masuk: FormField = None,
) -> StudentCreate:
    # enam field teks dari form tambah/edit (urlencoded maupun multipart)
    return StudentCreate(
        nama_lengkap=nama_lengkap,
        nim=nim,
        fakultas=fakultas,
        jurusan=jurusan,
        prodi=prodi,
        tahun_masuk=tahun_masuk,
    )
