from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator, List, Optional

from sqlalchemy import CheckConstraint, Float, Integer, select
from sqlalchemy.orm import Mapped, mapped_column, Session

from .database import Base
from ..models import Ship

logger = logging.getLogger(__name__)

# SQLite INTEGER is a signed 64-bit value
_SQLITE_MIN_ID = -(2**63)
_SQLITE_MAX_ID = 2**63 - 1


class ShipORM(Base):
    __tablename__ = "ships"
    __table_args__ = (CheckConstraint("tonnage > 0", name="ck_ships_tonnage_positive"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    tonnage: Mapped[float] = mapped_column(Float, nullable=False)


def _to_domain(obj: ShipORM) -> Ship:
    return Ship(id=obj.id, tonnage=obj.tonnage)


class ShipRepository:
    """Repository for ship rows.

    Writes are only flushed; committing is left to ``transaction()`` so that
    several saves can succeed or fail together.
    """

    def __init__(self, db: Session) -> None:
        self._db = db

    @contextmanager
    def transaction(self) -> Iterator[None]:
        """Commit the session on a clean exit; roll back if the block or the commit raises."""
        try:
            yield
            self._db.commit()
        except Exception:
            logger.warning("Rolling back ship transaction")
            self._db.rollback()
            raise

    def save(self, ship: Ship) -> Ship:
        obj = ShipORM(tonnage=ship.tonnage)
        self._db.add(obj)
        self._db.flush()
        return _to_domain(obj)

    def find_by_id(self, ship_id: int) -> Optional[Ship]:
        if not _SQLITE_MIN_ID <= ship_id <= _SQLITE_MAX_ID:
            return None
        obj = self._db.get(ShipORM, ship_id)
        if not obj:
            return None
        return _to_domain(obj)

    def find_all(self) -> List[Ship]:
        rows = self._db.scalars(select(ShipORM).order_by(ShipORM.id)).all()
        return [_to_domain(obj) for obj in rows]
