# /portal/db/database.py

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from ..core.config import settings
# Registers every model on Base.metadata before the first session is opened.
from .base import Base

DATABASE_URL = settings.DATABASE_URL

# The 'check_same_thread' argument is only needed for SQLite.
engine_args = {"connect_args": {"check_same_thread": False}} if DATABASE_URL.startswith("sqlite") else {}
engine = create_engine(DATABASE_URL, **engine_args)

# Each instance of this class is a database session.
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db() -> None:
    """Create every registered table that does not exist yet."""
    Base.metadata.create_all(bind=engine)


# Dependency to get a DB session. Used by the routers through get_db_service.
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
