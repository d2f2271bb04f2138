"""Room renovation: flooring cost estimates for the rooms of a house.

Usage::

    from renovation import RoomBuilder, HouseBuilder, upgrade_flooring

    kitchen = (
        RoomBuilder()
        .with_name("Kitchen")
        .with_dimensions(20, 12)
        .with_flooring("Tile", 3.87)
        .build()
    )
    house = HouseBuilder().with_room(kitchen).build()
    renovated = upgrade_flooring(house)
"""

from renovation.aggregation import (
    MinMax,
    discount_flooring,
    discounted_costs,
    minmax,
    total_cost,
)
from renovation.config import RenovationSettings, load_settings
from renovation.exceptions import BuildError, RecordParseError, RenovationError
from renovation.factory import build_house, build_sample_house
from renovation.models.enums import NumberPolicy
from renovation.models.flooring import Flooring, FlooringBuilder
from renovation.models.house import House, HouseBuilder
from renovation.models.room import DimensionSet, Room, RoomBuilder
from renovation.parsing import parse_room_record, parse_rooms
from renovation.report import RenovationReport, create_report, render_report
from renovation.services.upgrade import upgrade_flooring

__all__ = [
    "BuildError",
    "DimensionSet",
    "Flooring",
    "FlooringBuilder",
    "House",
    "HouseBuilder",
    "MinMax",
    "NumberPolicy",
    "RecordParseError",
    "RenovationError",
    "RenovationReport",
    "RenovationSettings",
    "Room",
    "RoomBuilder",
    "build_house",
    "build_sample_house",
    "create_report",
    "discount_flooring",
    "discounted_costs",
    "load_settings",
    "minmax",
    "parse_room_record",
    "parse_rooms",
    "render_report",
    "total_cost",
    "upgrade_flooring",
]
