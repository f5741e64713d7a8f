"""Readers for the comma-separated location and distance files."""

from __future__ import annotations

import re
from typing import Iterable

from path_finder.models import Distance, Location

_U64_PATTERN = re.compile(r"\+?[0-9]+")
_U64_LIMIT = 2**64


class ParseError(ValueError):
    """Raised when a line of an input file cannot be understood."""


def _parse_u64(text: str) -> int | None:
    if not _U64_PATTERN.fullmatch(text):
        return None
    value = int(text)
    return value if value < _U64_LIMIT else None


def _fields(line: str, names: tuple[str, ...]) -> list[str]:
    parts = line.split(",")
    if len(parts) < len(names):
        raise ParseError(f"Missing {names[len(parts)]}")
    return [part.strip() for part in parts[: len(names)]]


def _data_lines(lines: Iterable[str]) -> Iterable[str]:
    iterator = iter(lines)
    next(iterator, None)  # header
    for line in iterator:
        yield line.removesuffix("\n").removesuffix("\r")


def parse_location_line(line: str) -> Location:
    """Parse ``location,id,code,parking`` where parking is ``1`` or ``0``."""
    location, id_, code, parking = _fields(line, ("location", "id", "code", "parking"))
    if parking == "1":
        has_parking = True
    elif parking == "0":
        has_parking = False
    else:
        raise ParseError("Invalid parking value")
    return Location(id=id_, code=code, parking=has_parking, location=location)


def parse_locations(lines: Iterable[str]) -> list[Location]:
    """Parse every line after the header into a location."""
    return [parse_location_line(line) for line in _data_lines(lines)]


def parse_distance_line(line: str) -> tuple[str, str, Distance]:
    """Parse ``code1,code2,driving,walking``; an unreadable driving time means none."""
    code1, code2, driving_text, walking_text = _fields(
        line,
        ("first location code", "second location code", "driving time", "walking time"),
    )
    walking = _parse_u64(walking_text)
    if walking is None:
        raise ParseError(f"Invalid walking time: {walking_text!r}")
    return code1, code2, Distance(walking=walking, driving=_parse_u64(driving_text))


def parse_distances(lines: Iterable[str]) -> list[tuple[str, str, Distance]]:
    """Parse every line after the header into a pair of codes and a distance."""
    return [parse_distance_line(line) for line in _data_lines(lines)]