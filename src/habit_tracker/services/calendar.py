"""Calendar helpers and week/month bucketing of entries."""

from collections.abc import Callable, Iterable
from datetime import date, datetime, time, timedelta

from habit_tracker.domain.entries import Entry

DECEMBER = 12
_END_OF_DAY = time(23, 59, 59, 999000)


def parse_entry_date(value: str) -> date:
    """Parse a ``YYYY-MM-DD`` string as a local calendar date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def start_of_week(day: date) -> date:
    """Return the Monday of the week containing ``day``."""
    return day - timedelta(days=day.weekday())


def end_of_week(day: date) -> datetime:
    """Return the last instant of the Sunday closing the week of ``day``."""
    return datetime.combine(start_of_week(day) + timedelta(days=6), _END_OF_DAY)


def week_key(day: date) -> str:
    """Return the ISO date of the week's Monday."""
    return start_of_week(day).isoformat()


def month_key(day: date) -> str:
    """Return the ``YYYY-MM`` key of the month containing ``day``."""
    return f"{day.year}-{day.month:02d}"


def month_bounds(day: date) -> tuple[date, date]:
    """Return the first and last calendar day of the month containing ``day``."""
    first = day.replace(day=1)
    if first.month == DECEMBER:
        following = first.replace(year=first.year + 1, month=1)
    else:
        following = first.replace(month=first.month + 1)
    return first, following - timedelta(days=1)


def index_by_week(entries: Iterable[Entry]) -> dict[str, tuple[Entry, ...]]:
    """Group entries by the Monday-start week they fall in."""
    return _index(entries, week_key)


def index_by_month(entries: Iterable[Entry]) -> dict[str, tuple[Entry, ...]]:
    """Group entries by calendar month."""
    return _index(entries, month_key)


def _index(
    entries: Iterable[Entry], key_for: Callable[[date], str]
) -> dict[str, tuple[Entry, ...]]:
    buckets: dict[str, list[Entry]] = {}
    for entry in entries:
        key = key_for(parse_entry_date(entry.date))
        buckets.setdefault(key, []).append(entry)
    return {key: tuple(bucket) for key, bucket in buckets.items()}
