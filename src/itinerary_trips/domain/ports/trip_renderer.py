"""Trip renderer port."""

from typing import Protocol

from itinerary_trips.domain.models.planned_trip import PlannedTrip


class TripRenderer(Protocol):
    """Port for formatting planned trips for display."""

    def render(self, trip: PlannedTrip) -> list[str]:
        """Render one trip as output lines, including its trailing blank line."""
        ...
