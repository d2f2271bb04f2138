"""Derive a renovated house by replacing every room's flooring.

The derived house is fully independent of the original: each room is
cloned before its flooring is replaced, and the new ``HouseBuilder``
copies the clones again on build. Because room equality ignores flooring,
the renovated house still compares equal to the original; only
``flooring_cost()`` (or a direct look at ``room.flooring``) tells them apart.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from renovation.models.house import HouseBuilder

if TYPE_CHECKING:
    from renovation.models.house import House
    from renovation.models.room import Room

logger = logging.getLogger(__name__)

UPGRADE_FLOORING_NAME = "Stone Bricks"
UPGRADE_UNIT_COST = 12.97
UPGRADE_HOUSE_NAME = "After Stone Bricks"


def upgrade_flooring(
    original: House,
    type_name: str = UPGRADE_FLOORING_NAME,
    unit_cost: float = UPGRADE_UNIT_COST,
    name: str = UPGRADE_HOUSE_NAME,
) -> House:
    """Return a new house whose rooms all use the given flooring.

    Args:
        original: House to renovate. It is not modified.
        type_name: Flooring type applied to every room.
        unit_cost: Cost per unit area of the new flooring.
        name: Name of the renovated house.
    """
    updated_rooms: list[Room] = []
    for room in original:
        updated_room = room.clone()
        updated_room.set_flooring(type_name, unit_cost)
        updated_rooms.append(updated_room)

    house = HouseBuilder().with_name(name).with_rooms(updated_rooms).build()
    logger.info(
        "Upgraded %d rooms of %r to %s at %.2f per unit",
        len(house),
        original.name,
        type_name,
        unit_cost,
    )
    return house
