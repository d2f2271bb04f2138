"""Enums for the renovation domain models."""

from enum import StrEnum


class NumberPolicy(StrEnum):
    """How numeric tokens that fail to parse are handled."""

    LENIENT = "lenient"
    STRICT = "strict"
