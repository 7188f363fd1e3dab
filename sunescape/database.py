"""
Database connection and session.

Schema source of truth: sunescape.models. On startup, Base.metadata.create_all(bind=engine)
creates every collection (settings, reservations, reservation_guests, reservation_notes,
groceries, todos, invites, invite_responses, join_requests, profiles).

SQLite URLs get a shared StaticPool so an in-memory database is visible to every
session, including the ones opened by outbox jobs after a response is sent.
"""
from sqlalchemy import create_engine
from sqlalchemy.ext.declarative import declarative_base
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from sunescape.config import get_settings


class MissingDatabaseConfig(RuntimeError):
    pass


def _build_engine(url: str):
    if not url:
        raise MissingDatabaseConfig("Missing database config. Set DATABASE_URL in .env and restart.")
    if url.startswith("sqlite"):
        return create_engine(
            url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    return create_engine(url, pool_pre_ping=True)


settings = get_settings()
engine = _build_engine(settings.database_url)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
