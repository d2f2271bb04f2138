"""Flooring value type and its validating builder."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from renovation.exceptions import BuildError

BLANK_NAME_MESSAGE = "Name can not be blank"


class Flooring(BaseModel):
    """A named floor covering with a cost per unit of area."""

    model_config = ConfigDict(frozen=True)

    type_name: str = "Generic"
    unit_cost: float = 1.0


class FlooringBuilder(BaseModel):
    """Accumulates flooring fields and validates them into a ``Flooring``.

    Each ``with_*`` call returns a new builder, leaving the receiver untouched.
    """

    model_config = ConfigDict(frozen=True)

    type_name: str | None = None
    unit_cost: float | None = None

    def with_name(self, type_name: str) -> FlooringBuilder:
        return self.model_copy(update={"type_name": type_name})

    def with_unit_cost(self, unit_cost: float) -> FlooringBuilder:
        return self.model_copy(update={"unit_cost": unit_cost})

    def missing_fields(self) -> list[str]:
        """Names of required fields that have not been supplied."""
        missing: list[str] = []
        if self.type_name is None or not self.type_name.strip():
            missing.append("type_name")
        if self.unit_cost is None:
            missing.append("unit_cost")
        return missing

    def problems(self) -> list[str]:
        """Human-readable description of each missing field."""
        return [_MISSING_MESSAGES[field] for field in self.missing_fields()]

    def build(self) -> Flooring:
        """Build the flooring.

        Raises:
            BuildError: If the name is unset or blank, or the unit cost is unset.
        """
        missing = self.missing_fields()
        if missing:
            raise BuildError("; ".join(self.problems()), missing)

        return Flooring(type_name=self.type_name, unit_cost=self.unit_cost)


_MISSING_MESSAGES: dict[str, str] = {
    "type_name": BLANK_NAME_MESSAGE,
    "unit_cost": "Unit cost must be set",
}
