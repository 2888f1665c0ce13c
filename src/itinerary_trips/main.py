"""Pipeline wiring: load, parse, plan and print trips."""

import logging
import sys
from typing import TextIO

from itinerary_trips.adapters.config import AppConfig
from itinerary_trips.adapters.itinerary_file import FileItineraryLoader, ItineraryParser
from itinerary_trips.adapters.text import TextTripRenderer
from itinerary_trips.application.services import TripPlanningService
from itinerary_trips.domain.errors import ItineraryError
from itinerary_trips.domain.models import Itinerary, PlannedTrip
from itinerary_trips.domain.ports import ItineraryReader, ItinerarySource

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    """Configure root logging to stderr."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
        force=True,
    )


def plan_trips(
    source: ItinerarySource, reader: ItineraryReader, base_override: str | None = None
) -> list[PlannedTrip]:
    """Load, parse and plan an itinerary.

    Args:
        source: Where the raw itinerary text comes from.
        reader: Parser for the raw text.
        base_override: Base location replacing the one declared in the itinerary.

    Raises:
        ItineraryLoadError: If the itinerary cannot be read.
        ItineraryParseError: If the itinerary is malformed.
    """
    itinerary = reader.parse(source.load())
    if base_override:
        logger.info(f"Overriding base {itinerary.base} with {base_override}")
        itinerary = Itinerary(segments=itinerary.segments, base=base_override)
    return TripPlanningService().plan(itinerary)


def run(config: AppConfig, out: TextIO | None = None) -> int:
    """Run the whole pipeline and print the trips.

    Returns:
        Process exit code: 0 on success, 1 when the itinerary cannot be loaded or parsed.
    """
    out = out or sys.stdout
    try:
        trips = plan_trips(
            FileItineraryLoader(config.input_file), ItineraryParser(), config.base_override
        )
    except ItineraryError as e:
        logger.error(str(e))
        return 1

    for line in TextTripRenderer(config).render_all(trips):
        print(line, file=out)
    return 0
