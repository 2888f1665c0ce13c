"""Text output adapters."""

from itinerary_trips.adapters.text.text_trip_renderer import TextTripRenderer

__all__ = ["TextTripRenderer"]
