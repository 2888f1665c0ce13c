"""Domain layer - core business models, ports and errors."""

from itinerary_trips.domain.errors import (
    ItineraryError,
    ItineraryLoadError,
    ItineraryParseError,
)
from itinerary_trips.domain.models import (
    HotelSegment,
    Itinerary,
    PlannedTrip,
    Segment,
    SegmentMode,
    TransitSegment,
)
from itinerary_trips.domain.ports import (
    ItineraryReader,
    ItinerarySource,
    TripRenderer,
)

__all__ = [
    "HotelSegment",
    "Itinerary",
    "ItineraryError",
    "ItineraryLoadError",
    "ItineraryParseError",
    "ItineraryReader",
    "ItinerarySource",
    "PlannedTrip",
    "Segment",
    "SegmentMode",
    "TransitSegment",
    "TripRenderer",
]
