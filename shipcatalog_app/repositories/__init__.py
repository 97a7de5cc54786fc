"""
Repository layer for persistence (SQLite via SQLAlchemy).
"""

from .database import Base, init_database
from .ship_repository import ShipRepository

__all__ = [
    "Base",
    "init_database",
    "ShipRepository",
]
