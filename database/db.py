from sqlalchemy import create_engine               # SQLAlchemy engine factory
from sqlalchemy.orm import declarative_base, sessionmaker

from config.settings import settings               # ✅ env-driven settings

# ✅ SQLite needs check_same_thread off because FastAPI serves sync routes from a threadpool
connect_args = {"check_same_thread": False} if settings.DATABASE_URL.startswith("sqlite") else {}

engine = create_engine(settings.DATABASE_URL, connect_args=connect_args)

# ✅ session factory used by every request
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# ✅ declarative Base shared by all models
Base = declarative_base()


def init_db(bind=None):
    """Create all tables (idempotent)."""
    # models must be imported so their tables are registered on Base.metadata
    from models import calculations, examiners, patterns, subjects  # noqa: F401

    Base.metadata.create_all(bind=bind or engine)
