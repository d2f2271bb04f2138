"""Bundled sample data for the renovation package."""

from renovation.data.sample import SAMPLE_ROOM_DATA

__all__ = [
    "SAMPLE_ROOM_DATA",
]
