"""Domain models for itinerary trips."""

from itinerary_trips.domain.models.error_details import ParseErrorDetails
from itinerary_trips.domain.models.itinerary import Itinerary
from itinerary_trips.domain.models.planned_trip import PlannedTrip
from itinerary_trips.domain.models.segment import (
    HotelSegment,
    Segment,
    SegmentMode,
    TransitSegment,
)

__all__ = [
    "HotelSegment",
    "Itinerary",
    "ParseErrorDetails",
    "PlannedTrip",
    "Segment",
    "SegmentMode",
    "TransitSegment",
]
