"""
AP Physics C Study Backend: Database Engine
SQLAlchemy setup. Works with SQLite (dev) and PostgreSQL (prod).
"""

import logging

from sqlalchemy import create_engine, event, inspect, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, DeclarativeBase
from sqlalchemy.pool import StaticPool

from physics_tutor.config import DATABASE_URL, RESET_DATABASE

logger = logging.getLogger(__name__)


# ─── Engine Setup ────────────────────────────────────────────────────────────

def make_engine(url: str) -> Engine:
    """Build an engine with the per-dialect settings this app relies on."""
    if url.startswith("sqlite"):
        # SQLite needs special handling for concurrent access
        engine = create_engine(
            url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
            echo=False,
        )

        # WAL for concurrent reads; foreign keys so parent references hold
        @event.listens_for(engine, "connect")
        def _set_sqlite_pragma(dbapi_connection, _connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA journal_mode=WAL")
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

        return engine

    # PostgreSQL: standard pooled connection
    return create_engine(
        url,
        pool_size=10,
        max_overflow=20,
        pool_pre_ping=True,  # Test connections before use
        echo=False,
    )


engine = make_engine(DATABASE_URL)


# ─── Session Factory ─────────────────────────────────────────────────────────

SessionLocal = sessionmaker(
    bind=engine,
    autocommit=False,
    autoflush=False,
    expire_on_commit=False,
)


class Base(DeclarativeBase):
    """Base class for all ORM models."""
    pass


# ─── Dependencies ────────────────────────────────────────────────────────────

def get_db():
    """FastAPI dependency: yields a database session, auto-closes."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_session_factory():
    """FastAPI dependency: the factory for work that outlives the request
    (streamed replies, background tasks)."""
    return SessionLocal


# ─── Schema ──────────────────────────────────────────────────────────────────

def run_migrations(bind: Engine = None):
    """Add missing columns to existing tables. Safe to run multiple times (idempotent)."""
    bind = bind or engine
    inspector = inspect(bind)

    # Use TEXT for JSON on SQLite, JSONB for PostgreSQL
    json_type = "TEXT" if bind.dialect.name == "sqlite" else "JSONB"

    # Column migrations, keyed by table
    migrations = {
        "resources": {
            "source": "ALTER TABLE resources ADD COLUMN source VARCHAR(50)",
            "image_url": "ALTER TABLE resources ADD COLUMN image_url VARCHAR(500)",
        },
        "messages": {
            "suggested_resource_ids": f"ALTER TABLE messages ADD COLUMN suggested_resource_ids {json_type}",
        },
    }

    table_names = set(inspector.get_table_names())
    with bind.begin() as conn:
        for table, columns in migrations.items():
            if table not in table_names:
                continue  # Will be created by create_all
            existing_columns = {col["name"] for col in inspector.get_columns(table)}
            for col_name, sql in columns.items():
                if col_name not in existing_columns:
                    conn.execute(text(sql))
                    logger.info(f"Migration: added column '{col_name}' to {table} table")


def init_db(bind: Engine = None):
    """Create all tables. Called once at startup."""
    # Models must be registered on Base.metadata before create_all
    import physics_tutor.models  # noqa: F401

    bind = bind or engine
    if RESET_DATABASE:
        logger.warning("RESET_DATABASE=true, dropping all tables!")
        Base.metadata.drop_all(bind=bind)

    Base.metadata.create_all(bind=bind)
    run_migrations(bind)
