"""
utils/errors.py

Error bertipe yang dilempar oleh service dan dipetakan ke respons HTTP oleh
middlewares/error_handler.py.
"""

from typing import Optional, Union


class AppError(Exception):
    status_code = 500

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class StudentNotFoundError(AppError):
    """Baris data_mahasiswa dengan id tersebut tidak ada."""
    status_code = 404

    def __init__(self, student_id: Union[int, str], message: str = "Mahasiswa tidak ditemukan"):
        super().__init__(message)
        self.student_id = student_id


class UploadRejectedError(AppError):
    """File upload ditolak (ekstensi di luar whitelist)."""
    status_code = 400

    def __init__(self, filename: str, message: str = "Format file tidak diizinkan!"):
        super().__init__(message)
        self.filename = filename
