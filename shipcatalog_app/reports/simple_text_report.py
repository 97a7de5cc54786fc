"""
Simple text-based report builder for the ship catalog.
"""

from __future__ import annotations

from typing import Sequence

from shipcatalog_app.models import Ship


def format_ship_line(ship: Ship) -> str:
    return f"Ship #{ship.id}: {ship.tonnage:.1f} t"


def build_fleet_summary_text(ships: Sequence[Ship]) -> str:
    if not ships:
        return "No ships in catalog."
    lines: list[str] = [format_ship_line(ship) for ship in ships]
    lines.append("")
    lines.append(f"Ships: {len(ships)}")
    lines.append(f"Total tonnage: {sum(ship.tonnage for ship in ships):.1f} t")
    return "\n".join(lines)
