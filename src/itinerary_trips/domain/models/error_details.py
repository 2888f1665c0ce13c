"""Error details domain model."""

from pydantic import BaseModel, ConfigDict


class ParseErrorDetails(BaseModel):
    """Details about an itinerary parse failure, including the offending line if any."""

    model_config = ConfigDict(frozen=True)

    line_number: int | None = None
    line: str | None = None
    reason: str

    def describe(self) -> str:
        """Return a single-line human readable description."""
        if self.line_number is None:
            return self.reason
        return f"line {self.line_number}: {self.reason} ({self.line!r})"
