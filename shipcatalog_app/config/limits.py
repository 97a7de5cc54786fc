"""
Validation limits for ships entering the catalog.
"""

from __future__ import annotations

# Tonnage must be strictly greater than this value (t); a ship with no tonnage would sink
MIN_TONNAGE_T = 0.0
