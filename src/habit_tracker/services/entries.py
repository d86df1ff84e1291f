"""Daily entry service with write-path validation."""

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from habit_tracker.domain.entries import Entry
from habit_tracker.domain.errors import EntryNotFoundError, EntryValidationError
from habit_tracker.services.calendar import parse_entry_date

MIN_IMPROVE_LENGTH = 3
_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_GRATITUDE_SPLIT = re.compile(r"[\n,]")

_logger = logging.getLogger(__name__)


class EntryRepository(Protocol):
    """Persistence interface for daily entries."""

    def list_entries(self, user_id: UUID, limit: int | None = None) -> list[Entry]:
        """Return entries newest first, optionally limited."""

    def get_entry(self, user_id: UUID, date: str) -> Entry | None:
        """Return the entry for a date, if present."""

    def upsert_entry(self, user_id: UUID, entry: Entry) -> None:
        """Create or replace the entry for its date."""

    def delete_entry(self, user_id: UUID, date: str) -> None:
        """Delete the entry for a date."""


def parse_gratitude(raw: str | list[str]) -> tuple[str, ...]:
    """Split gratitude text on newlines and commas, dropping blanks."""
    chunks = _GRATITUDE_SPLIT.split(raw) if isinstance(raw, str) else raw
    return tuple(chunk.strip() for chunk in chunks if chunk and chunk.strip())


def clean_habit_ids(habit_ids: Iterable[str]) -> frozenset[str]:
    """Strip habit ids and drop blank ones."""
    return frozenset(habit_id.strip() for habit_id in habit_ids if habit_id.strip())


def validate_entry(entry: Entry) -> Entry:
    """Return a trimmed copy of the entry or raise on invalid input."""
    if not _DATE_PATTERN.match(entry.date):
        raise EntryValidationError(f"Date must be YYYY-MM-DD, got {entry.date!r}")
    try:
        parse_entry_date(entry.date)
    except ValueError as exc:
        raise EntryValidationError(f"Invalid calendar date {entry.date!r}") from exc
    improve = entry.improve.strip()
    if len(improve) < MIN_IMPROVE_LENGTH:
        raise EntryValidationError(
            f"Improvement note needs at least {MIN_IMPROVE_LENGTH} characters"
        )
    gratitude = parse_gratitude(list(entry.gratitude))
    if not gratitude:
        raise EntryValidationError("At least one gratitude is required")
    return Entry(
        date=entry.date,
        improve=improve,
        gratitude=gratitude,
        habits_completed=clean_habit_ids(entry.habits_completed),
        bookkeeping=entry.bookkeeping,
    )


@dataclass
class EntryService:
    """Application service for recording and removing daily entries."""

    repository: EntryRepository
    default_limit: int = 365

    def list_entries(self, user_id: UUID, limit: int | None = None) -> list[Entry]:
        """Return the most recent entries."""
        if limit is None:
            limit = self.default_limit
        if limit < 1:
            raise EntryValidationError(f"Limit must be positive, got {limit}")
        return self.repository.list_entries(user_id, limit)

    def save_entry(self, user_id: UUID, entry: Entry) -> Entry:
        """Validate and store an entry, replacing any entry on the same date."""
        cleaned = validate_entry(entry)
        self.repository.upsert_entry(user_id, cleaned)
        _logger.info(
            "Entry saved: user_id=%s date=%s habits=%s",
            user_id,
            cleaned.date,
            len(cleaned.habits_completed),
        )
        return cleaned

    def delete_entry(self, user_id: UUID, date: str) -> None:
        """Delete the entry for a date."""
        if self.repository.get_entry(user_id, date) is None:
            raise EntryNotFoundError(f"No entry for {date}")
        self.repository.delete_entry(user_id, date)
        _logger.info("Entry deleted: user_id=%s date=%s", user_id, date)
