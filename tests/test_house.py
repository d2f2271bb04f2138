"""Tests for House and HouseBuilder."""

from __future__ import annotations

from renovation.models import DimensionSet, Flooring, House, HouseBuilder, Room


def _room(name: str, length: float, width: float, unit_cost: float = 2.0) -> Room:
    return Room(
        name=name,
        dimensions=DimensionSet.new(length, width),
        flooring=Flooring(type_name="Laminate", unit_cost=unit_cost),
    )


class TestHouseBuilder:
    def test_default_name(self) -> None:
        house = HouseBuilder().build()
        assert house.name == "Generic"
        assert len(house) == 0

    def test_custom_default_name(self) -> None:
        assert HouseBuilder().build(default_name="Cottage").name == "Cottage"

    def test_explicit_name_wins_over_default(self) -> None:
        house = HouseBuilder().with_name("Farmhouse").build(default_name="Cottage")
        assert house.name == "Farmhouse"

    def test_with_room_and_with_rooms_append_in_order(self) -> None:
        house = (
            HouseBuilder()
            .with_room(_room("Kitchen", 20, 12))
            .with_rooms([_room("Den", 3, 4), _room("Attic", 5, 5)])
            .build()
        )
        assert [room.name for room in house] == ["Kitchen", "Den", "Attic"]

    def test_build_copies_rooms(self) -> None:
        room = _room("Kitchen", 20, 12)
        house = HouseBuilder().with_room(room).build()
        room.set_flooring("Carpet", 99.0)
        room.with_name("Changed")
        assert house[0].name == "Kitchen"
        assert house[0].flooring.type_name == "Laminate"
        assert house[0] is not room

    def test_builder_is_not_aliased(self) -> None:
        base = HouseBuilder().with_room(_room("Kitchen", 20, 12))
        bigger = base.with_room(_room("Den", 3, 4))
        assert len(base.build()) == 1
        assert len(bigger.build()) == 2


class TestHouse:
    def test_iteration_in_insertion_order(self) -> None:
        rooms = [_room("C", 1, 1), _room("A", 2, 2), _room("B", 3, 3)]
        house = House(rooms=rooms)
        assert [room.name for room in house] == ["C", "A", "B"]

    def test_len_and_indexing(self) -> None:
        house = House(rooms=[_room("A", 1, 1), _room("B", 2, 2)])
        assert len(house) == 2
        assert house[1].name == "B"

    def test_total_area(self) -> None:
        house = House(rooms=[_room("A", 2, 3), _room("B", 4, 5)])
        assert house.total_area == 26.0

    def test_equality_ignores_house_name(self) -> None:
        first = House(name="Before", rooms=[_room("A", 2, 3)])
        second = House(name="After", rooms=[_room("A", 6, 1, unit_cost=50.0)])
        assert first == second

    def test_unequal_room_count(self) -> None:
        first = House(rooms=[_room("A", 2, 3)])
        second = House(rooms=[_room("A", 2, 3), _room("B", 1, 1)])
        assert first != second

    def test_not_equal_to_other_types(self) -> None:
        assert House() != []
