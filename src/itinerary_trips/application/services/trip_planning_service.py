"""Trip planning service."""

import logging
from datetime import timedelta

from itinerary_trips.domain.models.itinerary import Itinerary
from itinerary_trips.domain.models.planned_trip import PlannedTrip
from itinerary_trips.domain.models.segment import HotelSegment, Segment

logger = logging.getLogger(__name__)

ONE_DAY = timedelta(days=1)


def sort_segments(segments: list[Segment]) -> list[Segment]:
    """Order segments by start instant. Equal instants keep their input order."""
    return sorted(segments, key=lambda segment: segment.start_datetime)


def _starts_from_base(segment: Segment, base: str) -> bool:
    return segment.origin is not None and segment.origin == base


def _continues_trip(last: Segment, segment: Segment) -> bool:
    """Check whether ``segment`` can follow ``last`` within the same trip.

    Location continuity is enough, and so is a gap shorter than one day, even
    between unrelated locations.
    """
    if segment.where is not None and segment.where == last.destination:
        return True
    if last.where is not None and last.where == segment.origin:
        return True
    if last.destination is not None and last.destination == segment.origin:
        return True
    return last.end_datetime + ONE_DAY > segment.start_datetime


def group_trips(segments: list[Segment], base: str) -> list[list[Segment]]:
    """Partition sorted segments into trips.

    A segment departing from ``base`` always opens a new trip. Otherwise it joins
    the current trip when it continues from the trip's last segment.

    Args:
        segments: Segments sorted by start instant.
        base: The traveler's home location.

    Returns:
        Non-empty trips whose concatenation equals ``segments``.
    """
    trips: list[list[Segment]] = []
    current: list[Segment] = []

    for segment in segments:
        if not current:
            current = [segment]
            continue

        last = current[-1]
        if _starts_from_base(segment, base):
            logger.debug(f"New trip: {segment.mode.value} departs from base {base}")
        elif _continues_trip(last, segment):
            current.append(segment)
            continue
        else:
            logger.debug(
                f"New trip: {segment.mode.value} at {segment.start_datetime} breaks continuity"
            )

        trips.append(current)
        current = [segment]

    if current:
        trips.append(current)
    return trips


def extract_stops(trip: list[Segment], base: str) -> list[str]:
    """Compute the locations to report in a trip's headline.

    Hotel stays are always reported. A transit leg that leaves more than a day
    after the previous leg ended reports its origin. The trip's final destination
    is appended unless the trip ends in a hotel or back at ``base``.
    """
    stops: list[str] = []
    for index, segment in enumerate(trip):
        if isinstance(segment, HotelSegment):
            stops.append(segment.where)
            continue
        if index > 0 and trip[index - 1].end_datetime + ONE_DAY < segment.start_datetime:
            stops.append(segment.origin)

    if trip:
        last_destination = trip[-1].destination
        if last_destination is not None and last_destination != base:
            stops.append(last_destination)
    return stops


class TripPlanningService:
    """Service for turning an itinerary into planned trips."""

    def plan(self, itinerary: Itinerary) -> list[PlannedTrip]:
        """Sort, group and summarize the itinerary's segments.

        Args:
            itinerary: Parsed itinerary.

        Returns:
            Planned trips in chronological order. Empty when the itinerary has no segments.
        """
        ordered = sort_segments(itinerary.segments)
        trips = group_trips(ordered, itinerary.base)
        planned = [
            PlannedTrip(segments=trip, stops=extract_stops(trip, itinerary.base)) for trip in trips
        ]
        logger.info(
            f"Grouped {len(ordered)} segment(s) into {len(planned)} trip(s) "
            f"(base: {itinerary.base})"
        )
        return planned
