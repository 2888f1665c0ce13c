"""Allow running with ``python -m itinerary_trips``."""

import sys

from itinerary_trips.cli import main

sys.exit(main())
