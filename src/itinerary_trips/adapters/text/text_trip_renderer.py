"""Plain-text renderer for planned trips."""

from itinerary_trips.adapters.config.app_config import AppConfig
from itinerary_trips.domain.models.planned_trip import PlannedTrip
from itinerary_trips.domain.models.segment import HotelSegment, Segment
from itinerary_trips.domain.ports.trip_renderer import TripRenderer

DATE_FORMAT = "%Y-%m-%d"
TIME_FORMAT = "%H:%M"


class TextTripRenderer(TripRenderer):
    """Renders trips as a header line, one line per segment and a blank separator."""

    def __init__(self, config: AppConfig) -> None:
        """Initialize the renderer.

        Args:
            config: Application configuration with trip label and stop separator.
        """
        self.config = config

    def render(self, trip: PlannedTrip) -> list[str]:
        """Render one trip."""
        lines = [self.format_header(trip.stops)]
        lines.extend(self.format_segment(segment) for segment in trip.segments)
        lines.append("")
        return lines

    def render_all(self, trips: list[PlannedTrip]) -> list[str]:
        """Render all trips in order."""
        lines: list[str] = []
        for trip in trips:
            lines.extend(self.render(trip))
        return lines

    def format_header(self, stops: list[str]) -> str:
        """Format the headline, e.g. 'TRIP to BCN, MAD'."""
        return f"{self.config.trip_label} {self.config.stop_separator.join(stops)}"

    def format_segment(self, segment: Segment) -> str:
        """Format a single segment line."""
        start_date = segment.start_date.strftime(DATE_FORMAT)
        if isinstance(segment, HotelSegment):
            end_date = segment.end_date.strftime(DATE_FORMAT)
            return f"{segment.mode.value} at {segment.where} on {start_date} to {end_date}"
        return (
            f"{segment.mode.value} from {segment.origin} to {segment.destination} "
            f"at {start_date} {segment.start_time.strftime(TIME_FORMAT)} "
            f"to {segment.end_time.strftime(TIME_FORMAT)}"
        )
