"""Domain records for places and the distances between them."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Distance:
    """Travel time between two locations.

    Walking time is always known; driving time is ``None`` when no road
    connection exists.
    """

    walking: int
    driving: int | None = None


@dataclass(frozen=True)
class Location:
    """A named place with an identifier, a short code and parking availability."""

    id: str
    code: str
    parking: bool
    location: str