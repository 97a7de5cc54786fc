"""
Domain models for the ship catalog.

These are pure Python/domain classes, separate from ORM mappings.
"""

from shipcatalog_app.models.ship import Ship

__all__ = [
    "Ship",
]
