"""Tests for Supabase adapter implementations."""

from dataclasses import dataclass, field
from uuid import uuid4

from habit_tracker.adapters.supabase_entry_repository import SupabaseEntryRepository
from habit_tracker.adapters.supabase_user_repository import SupabaseUserRepository
from habit_tracker.adapters.supabase_user_settings_repository import (
    SupabaseUserSettingsRepository,
)
from habit_tracker.domain.entries import Entry, Habit, UserSettings


@dataclass
class FakeResponse:
    data: list[dict[str, object]] | None


@dataclass
class FakeTable:
    name: str
    response_queue: dict[str, list[list[dict[str, object]]]] = field(
        default_factory=lambda: {
            "select": [],
            "insert": [],
            "update": [],
            "upsert": [],
            "delete": [],
        }
    )
    last_payload: object | None = None
    last_on_conflict: str | None = None
    last_filters: list[tuple[str, object]] = field(default_factory=list)
    last_limit: int | None = None
    ranges: list[tuple[int, int]] = field(default_factory=list)

    def queue(self, action: str, data: list[dict[str, object]]) -> None:
        self.response_queue[action].append(data)

    def select(self, *_args) -> "FakeTable":
        self._action = "select"
        return self

    def insert(self, payload) -> "FakeTable":  # type: ignore[no-untyped-def]
        self._action = "insert"
        self.last_payload = payload
        return self

    def update(self, payload) -> "FakeTable":  # type: ignore[no-untyped-def]
        self._action = "update"
        self.last_payload = payload
        return self

    def upsert(self, payload, on_conflict: str = "") -> "FakeTable":  # type: ignore[no-untyped-def]
        self._action = "upsert"
        self.last_payload = payload
        self.last_on_conflict = on_conflict
        return self

    def delete(self) -> "FakeTable":
        self._action = "delete"
        return self

    def eq(self, column: str, value) -> "FakeTable":  # type: ignore[no-untyped-def]
        self.last_filters.append((column, value))
        return self

    def limit(self, count: int) -> "FakeTable":
        self.last_limit = count
        return self

    def order(self, _column: str, desc: bool = False) -> "FakeTable":
        return self

    def range(self, start: int, end: int) -> "FakeTable":
        self.ranges.append((start, end))
        return self

    def execute(self) -> FakeResponse:
        action = getattr(self, "_action", "select")
        queue = self.response_queue.get(action, [])
        data = queue.pop(0) if queue else []
        return FakeResponse(data=data)


@dataclass
class FakeSupabaseClient:
    tables: dict[str, FakeTable] = field(default_factory=dict)

    def table(self, name: str) -> FakeTable:
        if name not in self.tables:
            self.tables[name] = FakeTable(name=name)
        return self.tables[name]


def test_supabase_user_repository_roundtrip() -> None:
    client = FakeSupabaseClient()
    users_table = client.table("users")
    user_id = str(uuid4())
    users_table.queue("insert", [{"id": user_id, "username": "ada"}])
    users_table.queue("select", [{"id": user_id, "username": "ada"}])

    repository = SupabaseUserRepository(client)
    created = repository.create_user("ada")
    fetched = repository.get_by_username("ada")

    assert str(created.id) == user_id
    assert fetched == created


def test_supabase_user_repository_missing_user() -> None:
    repository = SupabaseUserRepository(FakeSupabaseClient())

    assert repository.get_by_username("nobody") is None


def test_supabase_entry_repository_parses_legacy_rows() -> None:
    client = FakeSupabaseClient()
    table = client.table("entries")
    table.queue(
        "select",
        [
            {
                "date": "2024-05-21",
                "improve": "Less sugar",
                "gratitude": ["friends"],
                "habits_completed": ["walk", "read"],
                "bookkeeping": False,
            },
            {
                "date": "2024-05-20",
                "improve": "Call mom",
                "gratitude": ["sun"],
                "bookkeeping": True,
            },
        ],
    )

    repository = SupabaseEntryRepository(client)
    entries = repository.list_entries(uuid4(), limit=30)

    assert entries[0].habits_completed == frozenset({"walk", "read"})
    assert entries[1].habits_completed == frozenset()
    assert entries[1].bookkeeping is True
    assert table.last_limit == 30


def test_supabase_entry_repository_upsert_and_delete() -> None:
    client = FakeSupabaseClient()
    table = client.table("entries")
    user_id = uuid4()

    repository = SupabaseEntryRepository(client)
    repository.upsert_entry(
        user_id,
        Entry(
            date="2024-05-20",
            improve="Call mom",
            gratitude=("sun",),
            habits_completed=frozenset({"walk"}),
        ),
    )

    assert isinstance(table.last_payload, dict)
    assert table.last_payload["habits_completed"] == ["walk"]
    assert table.last_payload["gratitude"] == ["sun"]
    assert table.last_on_conflict == "user_id,date"

    repository.delete_entry(user_id, "2024-05-20")
    assert ("date", "2024-05-20") in table.last_filters
    assert repository.get_entry(user_id, "2024-05-20") is None


def test_supabase_user_settings_repository() -> None:
    client = FakeSupabaseClient()
    settings_table = client.table("user_settings")
    settings_table.queue(
        "select", [{"savings_ratio": 0.25, "habits": [{"id": "h1", "label": "Walk"}]}]
    )

    repository = SupabaseUserSettingsRepository(client)
    user_id = uuid4()

    assert repository.get_settings(user_id) == UserSettings(
        savings_ratio=0.25, habits=(Habit(id="h1", label="Walk"),)
    )
    assert repository.get_settings(user_id) is None

    repository.save_settings(user_id, UserSettings(savings_ratio=0.5))
    assert isinstance(settings_table.last_payload, dict)
    assert settings_table.last_payload["savings_ratio"] == 0.5
    assert settings_table.last_on_conflict == "user_id"


def _entry_row(day: str) -> dict[str, object]:
    return {
        "date": day,
        "improve": "Walk more",
        "gratitude": ["sun"],
        "habits_completed": ["walk"],
        "bookkeeping": False,
    }


def test_supabase_entry_repository_pages_full_history() -> None:
    client = FakeSupabaseClient()
    table = client.table("entries")
    table.queue("select", [_entry_row("2024-05-22"), _entry_row("2024-05-21")])
    table.queue("select", [_entry_row("2024-05-20")])

    repository = SupabaseEntryRepository(client, page_size=2)
    entries = repository.list_entries(uuid4())

    assert [entry.date for entry in entries] == [
        "2024-05-22",
        "2024-05-21",
        "2024-05-20",
    ]
    assert table.ranges == [(0, 1), (2, 3)]
    assert table.last_limit is None


def test_supabase_entry_repository_stops_after_full_final_page() -> None:
    client = FakeSupabaseClient()
    table = client.table("entries")
    table.queue("select", [_entry_row("2024-05-22"), _entry_row("2024-05-21")])

    repository = SupabaseEntryRepository(client, page_size=2)
    entries = repository.list_entries(uuid4())

    assert len(entries) == 2
    assert table.ranges == [(0, 1), (2, 3)]
