"""Plain-text itinerary file adapters."""

from itinerary_trips.adapters.itinerary_file.file_loader import FileItineraryLoader
from itinerary_trips.adapters.itinerary_file.itinerary_parser import ItineraryParser

__all__ = ["FileItineraryLoader", "ItineraryParser"]
