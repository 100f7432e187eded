from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, declarative_base

from config.settings import settings


def build_engine(url: str, echo: bool = False) -> Engine:
    """Create an engine for the given URL, with SQLite pragmas when applicable."""
    is_sqlite = url.startswith('sqlite')
    connect_args = {'check_same_thread': False} if is_sqlite else {}

    new_engine = create_engine(
        url,
        connect_args=connect_args,
        echo=echo,
        pool_pre_ping=True,  # Verify connections are alive before using
        pool_recycle=3600  # Recycle connections after 1 hour to prevent stale connections
    )

    if is_sqlite:
        @event.listens_for(new_engine, "connect")
        def set_sqlite_pragma(dbapi_conn, connection_record):
            cursor = dbapi_conn.cursor()
            cursor.execute("PRAGMA busy_timeout=5000")  # Wait up to 5s for locks instead of failing immediately
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return new_engine


engine = build_engine(settings.database_url, echo=settings.sql_echo)

SessionLocal = sessionmaker(bind=engine)
Base = declarative_base()

def get_db():
    """Dependency for FastAPI routes"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
