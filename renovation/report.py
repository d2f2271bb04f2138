"""Renovation report: compare a house with its upgraded copy and price it.

The report prints the original house, checks the original against the
upgraded copy (by value and by identity), prints both houses, then lists
the discounted flooring cost of each upgraded room with the total and
the cheapest and most expensive room when there are at least two.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel

from renovation.aggregation import discounted_costs, minmax, total_cost
from renovation.config import RenovationSettings
from renovation.formatting import format_cost
from renovation.models.house import House  # noqa: TCH001 (pydantic resolves at runtime)
from renovation.services.upgrade import upgrade_flooring


class RenovationReport(BaseModel):
    """Everything the renovation report prints."""

    original: House
    upgraded: House
    costs: list[float]
    total: float
    minimum: float | None = None
    maximum: float | None = None

    @property
    def houses_equal(self) -> bool:
        return self.original == self.upgraded

    @property
    def same_instance(self) -> bool:
        return self.original is self.upgraded

    def to_summary_dict(self) -> dict[str, Any]:
        """Flat summary with formatted costs."""
        return {
            "original_name": self.original.name,
            "upgraded_name": self.upgraded.name,
            "num_rooms": len(self.upgraded),
            "total_area_formatted": f"{self.upgraded.total_area:.1f}",
            "costs_formatted": [format_cost(c) for c in self.costs],
            "total_formatted": format_cost(self.total),
            "minimum_formatted": (
                format_cost(self.minimum) if self.minimum is not None else None
            ),
            "maximum_formatted": (
                format_cost(self.maximum) if self.maximum is not None else None
            ),
        }


def create_report(
    house: House,
    settings: RenovationSettings | None = None,
) -> RenovationReport:
    """Upgrade ``house`` and price the result with the configured discount."""
    settings = settings or RenovationSettings()
    upgraded = upgrade_flooring(
        house,
        type_name=settings.upgrade_flooring_name,
        unit_cost=settings.upgrade_unit_cost,
        name=settings.upgrade_house_name,
    )
    costs = discounted_costs(upgraded, settings.discount_rate)
    extremes = minmax(costs)

    return RenovationReport(
        original=house,
        upgraded=upgraded,
        costs=costs,
        total=total_cost(costs),
        minimum=extremes.minimum if extremes is not None else None,
        maximum=extremes.maximum if extremes is not None else None,
    )


def render_report(report: RenovationReport) -> str:
    """Render the report as plain text, ending with a blank line."""
    lines = [
        str(report.original),
        f"house == duplicate_house -> {report.houses_equal}",
        f"house is duplicate_house -> {report.same_instance}",
        str(report.original),
        str(report.upgraded),
    ]
    lines.extend(format_cost(cost) for cost in report.costs)
    lines.append(f"Total: {format_cost(report.total)}")
    # Extremes need at least two costs.
    if (
        len(report.costs) >= 2
        and report.minimum is not None
        and report.maximum is not None
    ):
        lines.append(f"Min  : {format_cost(report.minimum)}")
        lines.append(f"Max  : {format_cost(report.maximum)}")
    lines.append("")
    return "\n".join(lines) + "\n"
