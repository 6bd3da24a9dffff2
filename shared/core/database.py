from datetime import datetime, timezone
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker, declarative_base
from shared.core.config import PROPERTY_DATABASE_URL, settings

Base = declarative_base()


def utcnow() -> datetime:
    """Python-side timestamp default; keeps sub-second precision on SQLite."""
    return datetime.now(timezone.utc)


def build_engine(url: str):
    if url.startswith("sqlite"):
        engine = create_engine(
            url,
            echo=settings.SQL_ECHO,
            connect_args={"check_same_thread": False}
        )

        # SQLite ships with FK enforcement off; cascade deletes depend on it
        @event.listens_for(engine, "connect")
        def _enable_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

        return engine

    return create_engine(
        url,
        echo=settings.SQL_ECHO,
        pool_pre_ping=True,
        pool_recycle=300,
        pool_size=settings.DB_POOL_SIZE,          # max idle connections
        max_overflow=settings.DB_MAX_OVERFLOW,    # max temporary extra connections
        pool_timeout=30       # wait time before failing
    )


property_engine = build_engine(PROPERTY_DATABASE_URL)
PropertySessionLocal = sessionmaker(
    autocommit=False, autoflush=False, bind=property_engine)


# Dependency
def get_property_db():
    db = PropertySessionLocal()
    try:
        yield db
    finally:
        db.close()
