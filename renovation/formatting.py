"""Formatting helpers for room and house output.

Dimensions and areas are shown with one decimal, money with two, each
right-aligned in a fixed-width column so that room blocks line up.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from renovation.models.house import House
    from renovation.models.room import Room


def format_cost(amount: float) -> str:
    """Format a cost with two decimals and no currency symbol (e.g. '56.16')."""
    return f"{amount:.2f}"


def _measure_line(label: str, value: float) -> str:
    return f"  {label:<6}: {value:>8.1f}"


def format_room(room: Room) -> str:
    """Render a room as a multi-line block.

    Example::

        Room (Laundry Room)
          Length:      8.0
          Width :      4.0
          Area  :     32.0

          Flooring  : Laminate
          Unit Cost : $     1.95
          Total Cost: $    62.40
    """
    lines = [
        f"Room ({room.name})",
        _measure_line("Length", room.dimensions.length),
        _measure_line("Width", room.dimensions.width),
        _measure_line("Area", room.area()),
        "",
        f"  Flooring  : {room.flooring.type_name}",
        f"  Unit Cost : $ {room.flooring.unit_cost:>8.2f}",
        f"  Total Cost: $ {room.flooring_cost():>8.2f}",
    ]
    return "\n".join(lines) + "\n"


def format_house(house: House) -> str:
    """Render a house header followed by each room block."""
    blocks = [f"House ({house.name})\n"]
    blocks.extend(format_room(room) for room in house)
    return "\n".join(blocks)
