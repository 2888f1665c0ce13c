"""File-backed itinerary source."""

import logging
from pathlib import Path

from itinerary_trips.domain.errors import ItineraryLoadError

logger = logging.getLogger(__name__)


class FileItineraryLoader:
    """Reads itinerary text from a file on disk."""

    def __init__(self, path: str | Path, encoding: str = "utf-8") -> None:
        """Initialize the loader.

        Args:
            path: Path to the itinerary file.
            encoding: Text encoding of the file.
        """
        self._path = Path(path)
        self._encoding = encoding

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> str:
        """Read the whole file.

        Raises:
            ItineraryLoadError: If the file is missing, unreadable or not valid text.
        """
        try:
            content = self._path.read_text(encoding=self._encoding)
        except (OSError, UnicodeDecodeError) as e:
            raise ItineraryLoadError(str(self._path), str(e)) from e

        logger.debug(f"Read {len(content)} character(s) from {self._path}")
        return content
