"""Sample room records used by the ``python -m renovation`` report."""

from __future__ import annotations

SAMPLE_ROOM_DATA = """
Laundry Room; 8 4 1.95 Laminate
Kitchen; 20 12 3.87 Tile
Storage Room; 16 16 4.39 Birch Wood
"""
