"""Ports (interfaces) for the ports-and-adapters architecture."""

from itinerary_trips.domain.ports.itinerary_reader import ItineraryReader
from itinerary_trips.domain.ports.itinerary_source import ItinerarySource
from itinerary_trips.domain.ports.trip_renderer import TripRenderer

__all__ = [
    "ItineraryReader",
    "ItinerarySource",
    "TripRenderer",
]
