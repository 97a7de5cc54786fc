"""
Business logic for the ship catalog.

``add_batch`` runs every save of one call inside a single repository
transaction, so a ship with invalid tonnage rolls back the ships saved
before it in the same batch.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from shipcatalog_app.config.limits import MIN_TONNAGE_T
from shipcatalog_app.models import Ship
from shipcatalog_app.repositories.ship_repository import ShipRepository

logger = logging.getLogger(__name__)


class InvalidTonnageError(Exception):
    """Raised when a ship in a batch has non-positive tonnage."""

    def __init__(self, tonnage: float, index: int) -> None:
        self.tonnage = tonnage
        self.index = index
        self.message = (
            f"Ship at position {index} has tonnage {tonnage}; "
            f"tonnage must be greater than {MIN_TONNAGE_T}."
        )
        super().__init__(self.message)


class ShipCatalog:
    """Validates and persists ships, and reads them back."""

    def __init__(self, repo: ShipRepository) -> None:
        self._repo = repo

    def add_batch(self, ships: Iterable[Ship]) -> List[Ship]:
        persisted: List[Ship] = []
        with self._repo.transaction():
            for index, ship in enumerate(ships):
                if not ship.tonnage > MIN_TONNAGE_T:
                    logger.warning("Rejecting batch: ship %d has tonnage %s", index, ship.tonnage)
                    raise InvalidTonnageError(ship.tonnage, index)
                persisted.append(self._repo.save(ship))
        logger.info("Persisted batch of %d ship(s)", len(persisted))
        return persisted

    def list_all(self) -> List[Ship]:
        return self._repo.find_all()

    def get_by_id(self, ship_id: int) -> Optional[Ship]:
        return self._repo.find_by_id(ship_id)
