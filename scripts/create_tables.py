from sqlalchemy.engine import Engine

from database.db import Base, engine as default_engine
from models.students import Student  # noqa: F401  ✅ mendaftarkan tabel data_mahasiswa ke Base.metadata


def create_tables(engine: Engine = default_engine) -> list:
    """Membuat tabel yang belum ada. Return: nama tabel yang terdaftar di metadata."""
    Base.metadata.create_all(bind=engine)
    return sorted(Base.metadata.tables)


if __name__ == "__main__":
    tables = create_tables()
    print(f"✅ Tabel siap: {', '.join(tables)}")
