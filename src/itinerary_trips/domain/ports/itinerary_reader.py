"""Itinerary reader port."""

from typing import Protocol

from itinerary_trips.domain.models.itinerary import Itinerary


class ItineraryReader(Protocol):
    """Port for turning raw itinerary text into domain models."""

    def parse(self, content: str) -> Itinerary:
        """Parse itinerary text.

        Args:
            content: Raw itinerary text.

        Returns:
            Itinerary with segments in input order and the base location.

        Raises:
            ItineraryParseError: If a segment line is malformed or no base is given.
        """
        ...
