"""Segment domain model."""

from dataclasses import dataclass
from datetime import UTC, date, datetime, time
from enum import Enum

# Hotel nights are anchored to the last second of the day.
END_OF_DAY = time(23, 59, 59)


class SegmentMode(Enum):
    """Kind of travel leg."""

    HOTEL = "Hotel"
    FLIGHT = "Flight"
    TRAIN = "Train"


@dataclass(frozen=True)
class HotelSegment:
    """A hotel stay at a single location."""

    where: str
    start_date: date
    end_date: date

    @property
    def mode(self) -> SegmentMode:
        """Hotel stays always have the HOTEL mode."""
        return SegmentMode.HOTEL

    @property
    def origin(self) -> None:
        """Hotel stays have no origin."""
        return None

    @property
    def destination(self) -> None:
        """Hotel stays have no destination."""
        return None

    @property
    def start_datetime(self) -> datetime:
        return datetime.combine(self.start_date, END_OF_DAY, tzinfo=UTC)

    @property
    def end_datetime(self) -> datetime:
        return datetime.combine(self.end_date, END_OF_DAY, tzinfo=UTC)


@dataclass(frozen=True)
class TransitSegment:
    """A flight or train ride between two locations on a single day.

    Both times belong to ``start_date``. A leg whose ``end_time`` is earlier than
    its ``start_time`` is kept as-is and is not rolled over to the next day.
    """

    mode: SegmentMode  # FLIGHT or TRAIN
    origin: str
    destination: str
    start_date: date
    start_time: time
    end_time: time

    def __post_init__(self) -> None:
        if self.mode is SegmentMode.HOTEL:
            raise ValueError("TransitSegment mode must be FLIGHT or TRAIN")

    @property
    def where(self) -> None:
        """Transit legs have no single location."""
        return None

    @property
    def start_datetime(self) -> datetime:
        return datetime.combine(self.start_date, self.start_time, tzinfo=UTC)

    @property
    def end_datetime(self) -> datetime:
        return datetime.combine(self.start_date, self.end_time, tzinfo=UTC)


Segment = HotelSegment | TransitSegment
