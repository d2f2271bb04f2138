"""Parser for plain-text room records.

One room per line::

    <room name>; <length> <width> <unit_cost> <flooring name words...>

The name is everything before the first ``;``. After it, the first three
whitespace-separated tokens are numbers and the remaining tokens are joined
with single spaces to form the flooring name, which may contain spaces
("Birch Wood").

Numeric tokens that fail to parse are replaced with a fallback value under
``NumberPolicy.LENIENT`` (the default), so slightly malformed sample data
still produces a house. ``NumberPolicy.STRICT`` raises instead.
"""

from __future__ import annotations

import logging

from renovation.exceptions import RecordParseError
from renovation.models.enums import NumberPolicy
from renovation.models.flooring import FlooringBuilder
from renovation.models.room import RoomBuilder

logger = logging.getLogger(__name__)

NUMBER_FALLBACK = 1.0

_NUMERIC_FIELDS = ("length", "width", "unit_cost")


def parse_number(
    token: str,
    fallback: float = NUMBER_FALLBACK,
    policy: NumberPolicy = NumberPolicy.LENIENT,
) -> float:
    """Parse ``token`` as a float, applying ``policy`` on failure.

    Raises:
        ValueError: If the token is not a number and ``policy`` is STRICT.
    """
    try:
        return float(token)
    except ValueError:
        if policy is NumberPolicy.STRICT:
            raise
        logger.warning("Could not parse %r as a number, using %s", token, fallback)
        return fallback


def parse_room_record(
    line: str,
    *,
    line_number: int | None = None,
    fallback: float = NUMBER_FALLBACK,
    policy: NumberPolicy = NumberPolicy.LENIENT,
) -> RoomBuilder:
    """Parse one record into a fully populated ``RoomBuilder``.

    Raises:
        RecordParseError: If the line has no ``;`` separator, has fewer than
            three tokens after it, or (under STRICT) a token is not numeric.
    """
    name, sep, rest = line.partition(";")
    if not sep:
        raise RecordParseError("missing ';' after room name", line_number, line)

    tokens = rest.split()
    if len(tokens) < len(_NUMERIC_FIELDS):
        msg = (
            f"expected length, width and unit cost after ';', "
            f"got {len(tokens)} token(s)"
        )
        raise RecordParseError(msg, line_number, line)

    numbers: list[float] = []
    for field, token in zip(_NUMERIC_FIELDS, tokens, strict=False):
        try:
            numbers.append(parse_number(token, fallback, policy))
        except ValueError as exc:
            msg = f"{field} {token!r} is not a number"
            raise RecordParseError(msg, line_number, line) from exc
    length, width, unit_cost = numbers

    flooring = (
        FlooringBuilder()
        .with_name(" ".join(tokens[len(_NUMERIC_FIELDS):]))
        .with_unit_cost(unit_cost)
    )

    return (
        RoomBuilder()
        .with_name(name.strip())
        .with_dimensions(length, width)
        .with_flooring_builder(flooring)
    )


def parse_rooms(
    text: str,
    *,
    fallback: float = NUMBER_FALLBACK,
    policy: NumberPolicy = NumberPolicy.LENIENT,
) -> list[RoomBuilder]:
    """Parse every non-blank line of ``text`` into a ``RoomBuilder``."""
    builders: list[RoomBuilder] = []
    for line_number, line in enumerate(text.splitlines(), start=1):
        if not line.strip():
            continue
        builders.append(
            parse_room_record(
                line, line_number=line_number, fallback=fallback, policy=policy
            )
        )
    logger.debug("Parsed %d room records", len(builders))
    return builders
