from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class Ship:
    id: int | None = None
    tonnage: float = 0.0
