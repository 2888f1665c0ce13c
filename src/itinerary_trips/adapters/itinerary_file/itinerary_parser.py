"""Parser for plain-text itinerary files.

Example input::

    BASED: SVQ

    RESERVATION
    SEGMENT: Flight SVQ 2023-03-02 06:40 -> BCN 09:10

    RESERVATION
    SEGMENT: Hotel BCN 2023-01-05 -> 2023-01-10
"""

import logging
import re
from datetime import date, datetime, time

from itinerary_trips.domain.errors import ItineraryParseError
from itinerary_trips.domain.models.error_details import ParseErrorDetails
from itinerary_trips.domain.models.itinerary import Itinerary
from itinerary_trips.domain.models.segment import (
    HotelSegment,
    Segment,
    SegmentMode,
    TransitSegment,
)

logger = logging.getLogger(__name__)

BASE_MARKER = "BASED"
SEGMENT_MARKER = "SEGMENT"
FIELD_SEPARATOR = ": "
TIME_FORMAT = "%H:%M"
DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}")
TIME_PATTERN = re.compile(r"\d{2}:\d{2}")

TRANSIT_MODES = {
    SegmentMode.FLIGHT.value: SegmentMode.FLIGHT,
    SegmentMode.TRAIN.value: SegmentMode.TRAIN,
}


class ItineraryParser:
    """Parses itinerary text into an Itinerary."""

    def parse(self, content: str) -> Itinerary:
        """Parse itinerary text.

        Args:
            content: Raw itinerary text.

        Returns:
            Itinerary with segments in input order.

        Raises:
            ItineraryParseError: If no base line exists or a segment line is malformed.
        """
        lines = content.splitlines()
        base = self._parse_base(lines)

        segments: list[Segment] = []
        for line_number, raw_line in enumerate(lines, start=1):
            line = raw_line.strip()
            if line.split(FIELD_SEPARATOR, 1)[0] != SEGMENT_MARKER:
                continue
            segments.append(self._parse_segment(line, line_number))

        logger.info(f"Parsed {len(segments)} segment(s), base: {base}")
        return Itinerary(segments=segments, base=base)

    @staticmethod
    def _parse_base(lines: list[str]) -> str:
        """Extract the base location from the first line mentioning BASED."""
        for line_number, line in enumerate(lines, start=1):
            if BASE_MARKER not in line:
                continue
            base = line.split(FIELD_SEPARATOR)[-1].strip()
            if not base:
                raise ItineraryParseError(
                    ParseErrorDetails(
                        line_number=line_number, line=line, reason="Base location is empty"
                    )
                )
            return base

        raise ItineraryParseError(ParseErrorDetails(reason=f"No {BASE_MARKER} line found"))

    @staticmethod
    def _parse_segment(line: str, line_number: int) -> Segment:
        """Parse one SEGMENT line into a hotel or transit segment."""

        def fail(reason: str) -> ItineraryParseError:
            return ItineraryParseError(
                ParseErrorDetails(line_number=line_number, line=line, reason=reason)
            )

        tokens = line.split()
        match tokens:
            case [_, "Hotel", where, start_date, "->", end_date]:
                try:
                    return HotelSegment(
                        where=where,
                        start_date=ItineraryParser._parse_date(start_date),
                        end_date=ItineraryParser._parse_date(end_date),
                    )
                except ValueError as e:
                    raise fail(str(e)) from e
            case [_, mode, origin, start_date, start_time, "->", destination, end_time] if (
                mode in TRANSIT_MODES
            ):
                try:
                    return TransitSegment(
                        mode=TRANSIT_MODES[mode],
                        origin=origin,
                        destination=destination,
                        start_date=ItineraryParser._parse_date(start_date),
                        start_time=ItineraryParser._parse_time(start_time),
                        end_time=ItineraryParser._parse_time(end_time),
                    )
                except ValueError as e:
                    raise fail(str(e)) from e
            case _:
                raise fail("Unrecognized segment format")

    @staticmethod
    def _parse_date(value: str) -> date:
        error = f"Invalid date '{value}', expected YYYY-MM-DD"
        # fromisoformat also accepts basic and week dates
        if not DATE_PATTERN.fullmatch(value):
            raise ValueError(error)
        try:
            return date.fromisoformat(value)
        except ValueError as e:
            raise ValueError(error) from e

    @staticmethod
    def _parse_time(value: str) -> time:
        error = f"Invalid time '{value}', expected HH:MM"
        if not TIME_PATTERN.fullmatch(value):
            raise ValueError(error)
        try:
            return datetime.strptime(value, TIME_FORMAT).time()
        except ValueError as e:
            raise ValueError(error) from e
