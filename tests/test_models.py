"""Tests for domain models."""

from dataclasses import FrozenInstanceError
from datetime import UTC, date, datetime, time

import pytest
from pydantic import ValidationError

from itinerary_trips.domain.errors import ItineraryLoadError, ItineraryParseError
from itinerary_trips.domain.models import (
    HotelSegment,
    ParseErrorDetails,
    SegmentMode,
    TransitSegment,
)


def test_hotel_segment_creation() -> None:
    """Given hotel data, when creating a HotelSegment, then fields and instants are set correctly."""
    stay = HotelSegment(where="BCN", start_date=date(2023, 1, 5), end_date=date(2023, 1, 10))

    assert stay.mode is SegmentMode.HOTEL
    assert stay.where == "BCN"
    assert stay.origin is None
    assert stay.destination is None
    assert stay.start_datetime == datetime(2023, 1, 5, 23, 59, 59, tzinfo=UTC)
    assert stay.end_datetime == datetime(2023, 1, 10, 23, 59, 59, tzinfo=UTC)


def test_transit_segment_creation() -> None:
    """Given flight data, when creating a TransitSegment, then fields and instants are set correctly."""
    leg = TransitSegment(
        mode=SegmentMode.FLIGHT,
        origin="SVQ",
        destination="BCN",
        start_date=date(2023, 3, 2),
        start_time=time(6, 40),
        end_time=time(9, 10),
    )

    assert leg.where is None
    assert leg.origin == "SVQ"
    assert leg.destination == "BCN"
    assert leg.start_datetime == datetime(2023, 3, 2, 6, 40, tzinfo=UTC)
    assert leg.end_datetime == datetime(2023, 3, 2, 9, 10, tzinfo=UTC)


def test_transit_segment_overnight_stays_on_start_date() -> None:
    """Given an end time earlier than the start time, when computing instants, then no day is added."""
    leg = TransitSegment(
        mode=SegmentMode.TRAIN,
        origin="MAD",
        destination="PAR",
        start_date=date(2023, 3, 2),
        start_time=time(22, 0),
        end_time=time(7, 30),
    )

    assert leg.end_datetime == datetime(2023, 3, 2, 7, 30, tzinfo=UTC)
    assert leg.end_datetime < leg.start_datetime


def test_transit_segment_rejects_hotel_mode() -> None:
    """Given the HOTEL mode, when creating a TransitSegment, then ValueError is raised."""
    with pytest.raises(ValueError, match="FLIGHT or TRAIN"):
        TransitSegment(
            mode=SegmentMode.HOTEL,
            origin="SVQ",
            destination="BCN",
            start_date=date(2023, 3, 2),
            start_time=time(6, 40),
            end_time=time(9, 10),
        )


def test_segments_are_frozen() -> None:
    """Given a segment, when trying to modify it, then raises FrozenInstanceError."""
    stay = HotelSegment(where="BCN", start_date=date(2023, 1, 5), end_date=date(2023, 1, 10))

    with pytest.raises(FrozenInstanceError):
        stay.where = "MAD"  # type: ignore[misc]


def test_parse_error_details_describe() -> None:
    """Given details with a line, when describing, then line number and text are included."""
    details = ParseErrorDetails(line_number=3, line="SEGMENT: Boat", reason="Unrecognized")

    assert details.describe() == "line 3: Unrecognized ('SEGMENT: Boat')"
    assert ParseErrorDetails(reason="No BASED line found").describe() == "No BASED line found"


def test_parse_error_details_is_frozen() -> None:
    """Given parse error details, when trying to modify them, then ValidationError is raised."""
    details = ParseErrorDetails(reason="broken")

    with pytest.raises(ValidationError):
        details.reason = "other"  # type: ignore[misc]


def test_errors_carry_context() -> None:
    """Given itinerary errors, when formatting them, then their context is preserved."""
    load_error = ItineraryLoadError("input.txt", "No such file")
    parse_error = ItineraryParseError(ParseErrorDetails(reason="No BASED line found"))

    assert str(load_error) == "Can't read input.txt: No such file"
    assert load_error.path == "input.txt"
    assert str(parse_error) == "No BASED line found"
    assert parse_error.details.reason == "No BASED line found"
