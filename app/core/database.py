from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from app.core.config import settings


def _engine_options(url: str) -> dict:
    """
    Per-dialect engine options.

    Every storage call is bounded by DB_TIMEOUT_SECONDS: PostgreSQL enforces it
    server side through statement_timeout, SQLite through its busy timeout.
    """
    timeout = settings.DB_TIMEOUT_SECONDS

    if url.startswith("sqlite"):
        return {
            "connect_args": {"check_same_thread": False, "timeout": timeout},
        }

    return {
        "connect_args": {
            "connect_timeout": timeout,
            "options": f"-c statement_timeout={timeout * 1000}",
        },
        "pool_pre_ping": True,  # Verify connections before using them
        "pool_size": settings.DB_POOL_SIZE,
        "max_overflow": settings.DB_MAX_OVERFLOW,
        "pool_timeout": timeout,  # Wait at most this long for a pooled connection
    }


# Create SQLAlchemy engine
engine = create_engine(settings.DATABASE_URL, **_engine_options(settings.DATABASE_URL))

# Create SessionLocal class
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Create Base class for models
Base = declarative_base()


def get_db():
    """
    Dependency function to get database session.
    Used in FastAPI endpoints with Depends(get_db)
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db():
    """
    Initialize database.

    Tables are created by Alembic ("alembic upgrade head"); this only makes
    sure every model is imported and registered on Base.metadata.
    """
    from app.models import alumni, job, user, file  # noqa: F401
