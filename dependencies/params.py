from utils.errors import StudentNotFoundError


def student_id_param(message: str = "Mahasiswa tidak ditemukan"):
    """
    Dependency untuk path param {student_id}.
    id yang bukan angka diperlakukan sama dengan id yang tidak ada (404 teks),
    bukan 422 JSON dari validasi FastAPI.
    """
    def _convert(student_id: str) -> int:
        try:
            return int(student_id)
        except ValueError:
            raise StudentNotFoundError(student_id, message)

    return _convert
