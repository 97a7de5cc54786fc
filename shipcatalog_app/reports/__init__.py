"""
Reporting utilities for the ship catalog.
"""

from shipcatalog_app.reports.simple_text_report import build_fleet_summary_text, format_ship_line

__all__ = [
    "build_fleet_summary_text",
    "format_ship_line",
]
