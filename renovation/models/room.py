"""Room domain models: dimensions, the room value itself, and its builder.

Two separate APIs shape a room:

* ``RoomBuilder`` accumulates optional fields and validates them once in
  ``build()``. This is the only way to construct a checked ``Room``.
* ``Room.with_*`` / ``Room.set_flooring`` update an existing room in place.
  They perform no validation.

Room equality and ordering are NARROW: two rooms compare by ``(name, area)``
only. Flooring and the individual length/width values are ignored, so a
2x3 room and a 6x1 room with the same name are equal. Compare fields
directly when a full structural comparison is needed.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from renovation.exceptions import BuildError
from renovation.models.flooring import BLANK_NAME_MESSAGE, Flooring, FlooringBuilder


class DimensionSet(BaseModel):
    """Length and width of a rectangular room."""

    model_config = ConfigDict(frozen=True)

    length: float = 1.0
    width: float = 1.0

    @classmethod
    def new(cls, length: float, width: float) -> DimensionSet:
        return cls(length=length, width=width)

    @classmethod
    def from_pair(cls, dims: tuple[float, float]) -> DimensionSet:
        return cls(length=dims[0], width=dims[1])


class Room(BaseModel):
    """A named room with dimensions and a flooring type."""

    name: str = "Generic"
    dimensions: DimensionSet = Field(default_factory=DimensionSet)
    flooring: Flooring = Field(default_factory=Flooring)

    def area(self) -> float:
        """Area of flooring for the room."""
        return self.dimensions.width * self.dimensions.length

    def flooring_cost(self) -> float:
        """Flooring cost based on ``area()`` and the flooring unit cost."""
        return self.area() * self.flooring.unit_cost

    # -- update API ---------------------------------------------------------

    def with_name(self, name: str) -> Room:
        self.name = name
        return self

    def with_dimensions(self, length: float, width: float) -> Room:
        self.dimensions = DimensionSet(length=length, width=width)
        return self

    def with_flooring(self, type_name: str, unit_cost: float) -> Room:
        self.set_flooring(type_name, unit_cost)
        return self

    def set_flooring(self, type_name: str, unit_cost: float) -> None:
        """Replace the flooring in place."""
        self.flooring = Flooring(type_name=type_name, unit_cost=unit_cost)

    def clone(self) -> Room:
        """Return an independent copy sharing no state with this room."""
        return self.model_copy(deep=True)

    # -- comparison ---------------------------------------------------------

    def sort_key(self) -> tuple[str, float]:
        """The ``(name, area)`` key used for equality and ordering."""
        return (self.name, self.area())

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Room):
            return NotImplemented
        return self.sort_key() == other.sort_key()

    def __lt__(self, other: Room) -> bool:
        if not isinstance(other, Room):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def __le__(self, other: Room) -> bool:
        if not isinstance(other, Room):
            return NotImplemented
        return self.sort_key() <= other.sort_key()

    def __gt__(self, other: Room) -> bool:
        if not isinstance(other, Room):
            return NotImplemented
        return self.sort_key() > other.sort_key()

    def __ge__(self, other: Room) -> bool:
        if not isinstance(other, Room):
            return NotImplemented
        return self.sort_key() >= other.sort_key()

    def __str__(self) -> str:
        from renovation.formatting import format_room

        return format_room(self)


class RoomBuilder(BaseModel):
    """Accumulates room fields and validates them into a ``Room``.

    Dimensions are set as a pair. Flooring is held as a ``FlooringBuilder``
    and validated by it, so a blank flooring name fails the room build.
    Every ``with_*`` call returns a new builder.

    Example::

        room = (
            RoomBuilder()
            .with_name("Kitchen")
            .with_dimensions(20, 12)
            .with_flooring("Tile", 3.87)
            .build()
        )
    """

    model_config = ConfigDict(frozen=True)

    name: str | None = None
    length: float | None = None
    width: float | None = None
    flooring: FlooringBuilder | None = None

    def with_name(self, name: str) -> RoomBuilder:
        return self.model_copy(update={"name": name})

    def with_dimensions(self, length: float, width: float) -> RoomBuilder:
        return self.model_copy(update={"length": length, "width": width})

    def with_flooring(self, type_name: str, unit_cost: float) -> RoomBuilder:
        return self.with_flooring_builder(
            FlooringBuilder().with_name(type_name).with_unit_cost(unit_cost)
        )

    def with_flooring_type(self, flooring: Flooring) -> RoomBuilder:
        return self.with_flooring(flooring.type_name, flooring.unit_cost)

    def with_flooring_builder(self, flooring: FlooringBuilder) -> RoomBuilder:
        return self.model_copy(update={"flooring": flooring})

    def missing_fields(self) -> list[str]:
        """Names of required fields that have not been supplied."""
        missing: list[str] = []
        if self.name is None or not self.name.strip():
            missing.append("name")
        if self.length is None or self.width is None:
            missing.append("dimensions")
        if self.flooring is None or self.flooring.missing_fields():
            missing.append("flooring")
        return missing

    def problems(self) -> list[str]:
        """Human-readable description of each missing field."""
        messages: list[str] = []
        for field in self.missing_fields():
            if field == "flooring" and self.flooring is not None:
                messages.extend(
                    f"Flooring: {problem}" for problem in self.flooring.problems()
                )
            else:
                messages.append(_MISSING_MESSAGES[field])
        return messages

    def build(self) -> Room:
        """Validate the accumulated fields and produce a ``Room``.

        Raises:
            BuildError: Listing every required field that is missing,
                including a flooring with a blank name.
        """
        missing = self.missing_fields()
        if missing or self.flooring is None:
            raise BuildError("; ".join(self.problems()), missing)

        return Room(
            name=self.name,
            dimensions=DimensionSet(length=self.length, width=self.width),
            flooring=self.flooring.build(),
        )


_MISSING_MESSAGES: dict[str, str] = {
    "name": BLANK_NAME_MESSAGE,
    "dimensions": "Dimensions must be set",
    "flooring": "Flooring must be set",
}
