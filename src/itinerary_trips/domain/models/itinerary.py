"""Itinerary domain model."""

from dataclasses import dataclass

from itinerary_trips.domain.models.segment import Segment


@dataclass(frozen=True)
class Itinerary:
    """Parsed itinerary: segments in input order plus the traveler's base location."""

    segments: list[Segment]
    base: str
