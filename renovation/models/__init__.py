"""Domain models for the renovation package."""

from renovation.models.enums import NumberPolicy
from renovation.models.flooring import Flooring, FlooringBuilder
from renovation.models.house import House, HouseBuilder
from renovation.models.room import DimensionSet, Room, RoomBuilder

__all__ = [
    "DimensionSet",
    "Flooring",
    "FlooringBuilder",
    "House",
    "HouseBuilder",
    "NumberPolicy",
    "Room",
    "RoomBuilder",
]
