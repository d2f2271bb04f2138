"""Cost aggregation over sequences of rooms.

All helpers are pure: they read rooms and never modify them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Generic, TypeVar

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from renovation.models.room import Room

T = TypeVar("T")

DISCOUNT_RATE = 0.90


@dataclass(frozen=True)
class MinMax(Generic[T]):
    """Smallest and largest element of a non-empty sequence."""

    minimum: T
    maximum: T


def discount_flooring(room: Room, rate: float = DISCOUNT_RATE) -> float:
    """Flooring cost of ``room`` after applying the discount ``rate``."""
    return rate * room.flooring_cost()


def discounted_costs(rooms: Iterable[Room], rate: float = DISCOUNT_RATE) -> list[float]:
    """Discounted flooring cost of every room, in iteration order."""
    return [discount_flooring(room, rate) for room in rooms]


def total_cost(costs: Iterable[float]) -> float:
    return sum(costs, 0.0)


def minmax(
    values: Iterable[T],
    key: Callable[[T], float] | None = None,
) -> MinMax[T] | None:
    """Find the minimum and maximum of ``values``.

    Ties resolve to the first element encountered, for both the minimum
    and the maximum. Returns None when ``values`` is empty.
    """
    items = list(values)
    if not items:
        return None
    return MinMax(minimum=min(items, key=key), maximum=max(items, key=key))  # type: ignore[type-var]
