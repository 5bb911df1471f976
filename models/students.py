from sqlalchemy import Column, Integer, String
from database.db import Base

class Student(Base):
    __tablename__ = "data_mahasiswa"  # tabel data mahasiswa

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)  # ID unik (Primary Key)
    foto = Column(String(255), nullable=True)                   # path publik foto, mis. /uploads/<nama>
    nama_lengkap = Column(String(150))                          # nama lengkap
    nim = Column(String(30), index=True)                        # nomor induk mahasiswa (tidak unik)
    fakultas = Column(String(100))                              # fakultas
    jurusan = Column(String(100))                               # jurusan
    prodi = Column(String(100))                                 # program studi
    tahun_masuk = Column(String(10))                            # tahun masuk, disimpan apa adanya
