"""Itinerary source port."""

from typing import Protocol


class ItinerarySource(Protocol):
    """Port for retrieving raw itinerary text."""

    def load(self) -> str:
        """Return the full itinerary content.

        Raises:
            ItineraryLoadError: If the content cannot be read.
        """
        ...
