"""House model: an ordered collection of rooms, plus its builder."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field

from renovation.models.room import Room

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

logger = logging.getLogger(__name__)

DEFAULT_HOUSE_NAME = "Generic"


class House(BaseModel):
    """A named house owning its rooms in insertion order.

    Iterating a house yields its rooms. Two houses are equal when their room
    sequences are pairwise equal under the ``Room`` equality contract; the
    house name is not compared.
    """

    name: str = DEFAULT_HOUSE_NAME
    rooms: list[Room] = Field(default_factory=list)

    def __iter__(self) -> Iterator[Room]:  # type: ignore[override]
        return iter(self.rooms)

    def __len__(self) -> int:
        return len(self.rooms)

    def __getitem__(self, index: int) -> Room:
        return self.rooms[index]

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, House):
            return NotImplemented
        return self.rooms == other.rooms

    @property
    def total_area(self) -> float:
        """Sum of all room areas."""
        return sum(room.area() for room in self.rooms)

    def __str__(self) -> str:
        from renovation.formatting import format_house

        return format_house(self)


class HouseBuilder(BaseModel):
    """Accumulates a house name and rooms.

    Building never fails: an unset name falls back to ``default_name``.
    Rooms are deep-copied on ``build()`` so the house shares nothing with
    the caller's room objects.
    """

    model_config = ConfigDict(frozen=True)

    name: str | None = None
    rooms: tuple[Room, ...] = ()

    def with_name(self, name: str) -> HouseBuilder:
        return self.model_copy(update={"name": name})

    def with_room(self, room: Room) -> HouseBuilder:
        return self.model_copy(update={"rooms": (*self.rooms, room)})

    def with_rooms(self, rooms: Iterable[Room]) -> HouseBuilder:
        return self.model_copy(update={"rooms": (*self.rooms, *rooms)})

    def build(self, default_name: str = DEFAULT_HOUSE_NAME) -> House:
        name = self.name if self.name is not None else default_name
        house = House(name=name, rooms=[room.clone() for room in self.rooms])
        logger.debug("Built house %r with %d rooms", house.name, len(house))
        return house
