# norte_api/db.py
"""Database engine and session utilities.

The engine is built from an explicit `Settings` object by the application
bootstrap (`norte_api.main.create_app`) and kept on `app.state`; request
handlers get a session through the `get_db` dependency.
"""
from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base

from .config import Settings

Base = declarative_base()


def normalize_database_url(url: str) -> str:
    # SQLAlchemy 2.x doesn't accept 'postgres://'
    if url.startswith("postgres://"):
        return url.replace("postgres://", "postgresql+psycopg2://", 1)
    if url.startswith("postgresql://"):
        return url.replace("postgresql://", "postgresql+psycopg2://", 1)
    return url


def create_db_engine(settings: Settings):
    if not settings.DATABASE_URL:
        raise RuntimeError("DATABASE_URL not set")
    url = normalize_database_url(settings.DATABASE_URL)

    if url.startswith("sqlite"):
        # handlers run in a threadpool, connections move between threads
        return create_engine(url, connect_args={"check_same_thread": False})

    connect_args = {
        "connect_timeout": settings.DB_CONNECT_TIMEOUT,
        "options": f"-c statement_timeout={settings.DB_STATEMENT_TIMEOUT_MS}",
    }
    if settings.is_production:
        connect_args["sslmode"] = "require"

    # tuned pool settings for cloud DB
    return create_engine(
        url,
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=settings.DB_MAX_OVERFLOW,
        pool_pre_ping=True,
        pool_timeout=30,
        connect_args=connect_args,
    )


def create_session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db(request: Request):
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()
