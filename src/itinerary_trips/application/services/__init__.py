"""Application services (use cases) for trip planning."""

from itinerary_trips.application.services.trip_planning_service import (
    TripPlanningService,
    extract_stops,
    group_trips,
    sort_segments,
)

__all__ = [
    "TripPlanningService",
    "extract_stops",
    "group_trips",
    "sort_segments",
]
