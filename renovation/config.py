"""Runtime settings for the renovation report.

Defaults reproduce the sample renovation. Each value can be overridden
through a ``RENOVATION_*`` environment variable; the ``python -m renovation``
entry point loads a ``.env`` file first so local overrides can live there.
"""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING, Literal

from pydantic import BaseModel, Field, field_validator

from renovation.models.enums import NumberPolicy

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = logging.getLogger(__name__)

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

_ENV_PREFIX = "RENOVATION_"

# Setting name -> environment variable (without prefix)
_ENV_NAMES: dict[str, str] = {
    "discount_rate": "DISCOUNT_RATE",
    "default_house_name": "DEFAULT_HOUSE_NAME",
    "upgrade_flooring_name": "UPGRADE_FLOORING",
    "upgrade_unit_cost": "UPGRADE_UNIT_COST",
    "upgrade_house_name": "UPGRADE_HOUSE_NAME",
    "number_policy": "NUMBER_POLICY",
    "number_fallback": "NUMBER_FALLBACK",
    "log_level": "LOG_LEVEL",
}


class RenovationSettings(BaseModel):
    """Tunable values used when building and reporting on a house."""

    discount_rate: float = Field(default=0.90, ge=0)
    default_house_name: str = "Generic"
    upgrade_flooring_name: str = "Stone Bricks"
    upgrade_unit_cost: float = 12.97
    upgrade_house_name: str = "After Stone Bricks"
    number_policy: NumberPolicy = NumberPolicy.LENIENT
    number_fallback: float = 1.0
    log_level: LogLevel = "WARNING"

    @field_validator("log_level", mode="before")
    @classmethod
    def log_level_upper(cls, v: object) -> object:
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> RenovationSettings:
        """Build settings from ``RENOVATION_*`` variables.

        Unset variables keep their defaults. Malformed values raise
        ``pydantic.ValidationError``.
        """
        env = os.environ if environ is None else environ
        overrides: dict[str, str] = {}
        for field_name, env_name in _ENV_NAMES.items():
            value = env.get(_ENV_PREFIX + env_name)
            if value:
                overrides[field_name] = value.strip()
        if overrides:
            logger.debug("Settings overridden from environment: %s", sorted(overrides))
        return cls.model_validate(overrides)


def load_settings() -> RenovationSettings:
    """Load settings from the current process environment."""
    return RenovationSettings.from_env()
