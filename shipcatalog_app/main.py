"""
Command-line entry point for the ship catalog.

Sets up settings, logging and the SQLite database, then runs one
catalog operation per invocation.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from shipcatalog_app.config.settings import Settings, init_logging
from shipcatalog_app.models import Ship
from shipcatalog_app.reports import build_fleet_summary_text, format_ship_line
from shipcatalog_app.repositories.database import init_database
from shipcatalog_app.repositories.ship_repository import ShipRepository
from shipcatalog_app.services.ship_service import InvalidTonnageError, ShipCatalog


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="shipcatalog", description="Manage the ship catalog.")
    parser.add_argument("--data-dir", type=Path, default=None, help="Directory holding the catalog database.")
    commands = parser.add_subparsers(dest="command", required=True)

    add = commands.add_parser("add", help="Add a batch of ships; nothing is stored if any tonnage is invalid.")
    add.add_argument("tonnages", nargs="+", type=float, metavar="TONNAGE")

    commands.add_parser("list", help="List every ship in the catalog.")

    get = commands.add_parser("get", help="Show one ship by id.")
    get.add_argument("ship_id", type=int, metavar="ID")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Bootstraps the catalog and runs the requested command."""
    args = parse_args(sys.argv[1:] if argv is None else argv)

    settings = Settings.default(args.data_dir)
    init_logging(settings)
    session_factory = init_database(settings.db_path)

    with session_factory() as db:
        catalog = ShipCatalog(ShipRepository(db))

        if args.command == "add":
            try:
                ships = catalog.add_batch([Ship(tonnage=t) for t in args.tonnages])
            except InvalidTonnageError as exc:
                print(f"add failed: {exc.message}", file=sys.stderr)
                return 1
            for ship in ships:
                print(format_ship_line(ship))
            return 0

        if args.command == "list":
            print(build_fleet_summary_text(catalog.list_all()))
            return 0

        ship = catalog.get_by_id(args.ship_id)
        if ship is None:
            print(f"Ship {args.ship_id} not found", file=sys.stderr)
            return 1
        print(format_ship_line(ship))
        return 0


if __name__ == "__main__":
    sys.exit(main())
