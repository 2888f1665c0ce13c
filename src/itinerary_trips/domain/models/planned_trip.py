"""Planned trip domain model."""

from dataclasses import dataclass

from itinerary_trips.domain.models.segment import Segment


@dataclass(frozen=True)
class PlannedTrip:
    """A trip as reported to the user."""

    segments: list[Segment]  # Non-empty, in start order
    stops: list[str]  # Locations for the trip headline, in scan order
