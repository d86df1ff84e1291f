"""Wall-clock adapter."""

from dataclasses import dataclass
from datetime import datetime
from zoneinfo import ZoneInfo

from habit_tracker.services.stats import Clock


@dataclass
class ZoneClock(Clock):
    """Reads the current time in a timezone as a naive local datetime."""

    timezone_name: str = "UTC"

    def now(self) -> datetime:
        """Return local wall-clock time without tzinfo."""
        return datetime.now(tz=ZoneInfo(self.timezone_name)).replace(tzinfo=None)
