"""Supabase repository for daily entries."""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from supabase import Client

from habit_tracker.domain.entries import Entry
from habit_tracker.services.entries import EntryRepository

_COLUMNS = "date, improve, gratitude, habits_completed, bookkeeping"
PAGE_SIZE = 1000


@dataclass
class SupabaseEntryRepository(EntryRepository):
    """Supabase implementation for entry persistence."""

    client: Client
    page_size: int = PAGE_SIZE

    def list_entries(self, user_id: UUID, limit: int | None = None) -> list[Entry]:
        """Return entries for a user, newest first.

        Without a limit every row is fetched, one page at a time.
        """
        if limit is not None:
            response = self._select_entries(user_id).limit(limit).execute()
            return [_parse_row(row) for row in response.data or []]
        entries: list[Entry] = []
        start = 0
        while True:
            response = (
                self._select_entries(user_id)
                .range(start, start + self.page_size - 1)
                .execute()
            )
            rows = response.data or []
            entries.extend(_parse_row(row) for row in rows)
            if len(rows) < self.page_size:
                return entries
            start += self.page_size

    def _select_entries(self, user_id: UUID):  # type: ignore[no-untyped-def]
        return (
            self.client.table("entries")
            .select(_COLUMNS)
            .eq("user_id", str(user_id))
            .order("date", desc=True)
        )

    def get_entry(self, user_id: UUID, date: str) -> Entry | None:
        """Return the entry stored for a date."""
        response = (
            self.client.table("entries")
            .select(_COLUMNS)
            .eq("user_id", str(user_id))
            .eq("date", date)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_row(response.data[0])

    def upsert_entry(self, user_id: UUID, entry: Entry) -> None:
        """Insert or replace the entry keyed by user and date."""
        self.client.table("entries").upsert(
            {
                "user_id": str(user_id),
                "date": entry.date,
                "improve": entry.improve,
                "gratitude": list(entry.gratitude),
                "habits_completed": sorted(entry.habits_completed),
                "bookkeeping": entry.bookkeeping,
                "updated_at": datetime.now(tz=UTC).isoformat(),
            },
            on_conflict="user_id,date",
        ).execute()

    def delete_entry(self, user_id: UUID, date: str) -> None:
        """Delete the entry for a date."""
        self.client.table("entries").delete().eq("user_id", str(user_id)).eq(
            "date", date
        ).execute()


def _parse_row(row: dict[str, object]) -> Entry:
    gratitude = row.get("gratitude") or []
    habits = row.get("habits_completed") or []
    return Entry(
        date=str(row["date"]),
        improve=str(row.get("improve") or ""),
        gratitude=tuple(str(item) for item in gratitude),
        habits_completed=frozenset(str(item) for item in habits),
        bookkeeping=bool(row.get("bookkeeping", False)),
    )
