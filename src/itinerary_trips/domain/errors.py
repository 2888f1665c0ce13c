"""Exceptions raised while loading and parsing itineraries.

The planning core itself never raises; every failure happens before it runs.
"""

from itinerary_trips.domain.models.error_details import ParseErrorDetails


class ItineraryError(Exception):
    """Base class for itinerary failures."""


class ItineraryLoadError(ItineraryError):
    """The itinerary source could not be read."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Can't read {path}: {reason}")
        self.path = path
        self.reason = reason


class ItineraryParseError(ItineraryError):
    """The itinerary text does not match the expected format."""

    def __init__(self, details: ParseErrorDetails) -> None:
        super().__init__(details.describe())
        self.details = details
