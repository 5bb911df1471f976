from sqlalchemy import create_engine, text          # SQLAlchemy engine + raw SQL
from sqlalchemy.orm import declarative_base, sessionmaker

from config.settings import settings               # ✅ pengaturan dari .env

# ✅ engine dengan pool koneksi; pre_ping membuang koneksi MySQL yang sudah putus
engine = create_engine(settings.DATABASE_URL, pool_pre_ping=True)

# ✅ pabrik session: satu session per request
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# ✅ Base untuk semua model (gaya Declarative)
Base = declarative_base()


def get_db():
    """Dependency FastAPI: membuka session untuk satu request lalu menutupnya."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def check_connection() -> None:
    """Menjalankan SELECT 1; error dari driver diteruskan ke pemanggil."""
    with engine.connect() as conn:
        conn.execute(text("SELECT 1"))
