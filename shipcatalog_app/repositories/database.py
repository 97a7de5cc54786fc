"""
SQLAlchemy database setup for the ship catalog.
"""

from __future__ import annotations

import logging
from pathlib import Path

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, DeclarativeBase

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """Base declarative class for ORM models."""

    pass


def init_database(db_path: Path) -> sessionmaker:
    """
    Initialize the SQLite database, create tables, and return a session factory.

    This must be called once at startup (done in main.py).
    """
    # Import ORM models so their metadata is registered on Base
    from .ship_repository import ShipORM  # noqa: F401

    engine = create_engine(f"sqlite:///{db_path}", future=True, echo=False)
    Base.metadata.create_all(bind=engine)
    logger.info("Database ready at %s", db_path)

    return sessionmaker(
        bind=engine,
        autoflush=False,
        autocommit=False,
        future=True,
    )
