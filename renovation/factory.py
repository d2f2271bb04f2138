"""Factory functions for assembling houses from room records."""

from __future__ import annotations

from typing import TYPE_CHECKING

from renovation.config import RenovationSettings
from renovation.data.sample import SAMPLE_ROOM_DATA
from renovation.models.house import HouseBuilder
from renovation.parsing import parse_rooms

if TYPE_CHECKING:
    from renovation.models.house import House


def build_house(
    text: str,
    settings: RenovationSettings | None = None,
    name: str | None = None,
) -> House:
    """Parse room records and assemble them into a house.

    Args:
        text: Room records, one per line (see ``renovation.parsing``).
        settings: Parsing policy and default house name. Defaults are used
            when omitted.
        name: Optional house name; falls back to ``settings.default_house_name``.

    Raises:
        RecordParseError: If a line cannot be parsed.
        BuildError: If a parsed record is missing a required field.
    """
    settings = settings or RenovationSettings()
    builders = parse_rooms(
        text,
        fallback=settings.number_fallback,
        policy=settings.number_policy,
    )
    rooms = [builder.build() for builder in builders]

    house_builder = HouseBuilder().with_rooms(rooms)
    if name is not None:
        house_builder = house_builder.with_name(name)
    return house_builder.build(default_name=settings.default_house_name)


def build_sample_house(settings: RenovationSettings | None = None) -> House:
    """Build the bundled three-room sample house.

    Example::

        from renovation import build_sample_house

        house = build_sample_house()
        print(house)
    """
    return build_house(SAMPLE_ROOM_DATA, settings)
