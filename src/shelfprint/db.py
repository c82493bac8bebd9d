from __future__ import annotations
import os
from pathlib import Path
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from .models import Base

# ---------------------------------------------------------------------------
# Database Path
# ---------------------------------------------------------------------------
# Default: ~/.shelfprint/shelfprint.db
# Override via DATABASE_URL env if needed (e.g., for tests).
# ---------------------------------------------------------------------------

DATA_DIR = Path(os.getenv("SHELFPRINT_DATA_DIR", Path.home() / ".shelfprint"))
DB_PATH = DATA_DIR / "shelfprint.db"


def _default_url() -> str:
    DATA_DIR.mkdir(parents=True, exist_ok=True)
    return f"sqlite:///{DB_PATH.as_posix()}"


# DATABASE_URL is the URL of the database
DATABASE_URL = os.getenv("DATABASE_URL") or _default_url()

# engine is the database engine
engine = create_engine(
    DATABASE_URL,
    echo=False,
    future=True,
    connect_args={"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {},
)

# SessionLocal is a factory for creating new database sessions
SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
    expire_on_commit=False,
)

def init_db() -> None:
    """Create all tables defined in models.py (idempotent)."""
    Base.metadata.create_all(bind=engine)
