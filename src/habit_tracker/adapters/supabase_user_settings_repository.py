"""Supabase repository for user settings."""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from supabase import Client

from habit_tracker.domain.entries import Habit, UserSettings
from habit_tracker.services.user_settings import UserSettingsRepository


@dataclass
class SupabaseUserSettingsRepository(UserSettingsRepository):
    """Supabase implementation for user settings."""

    client: Client

    def get_settings(self, user_id: UUID) -> UserSettings | None:
        """Return the stored settings for a user."""
        response = (
            self.client.table("user_settings")
            .select("savings_ratio, habits")
            .eq("user_id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        row = response.data[0]
        habits = row.get("habits") or []
        return UserSettings(
            savings_ratio=float(row.get("savings_ratio") or 0.0),
            habits=tuple(
                Habit(id=str(habit["id"]), label=str(habit.get("label", "")))
                for habit in habits
            ),
        )

    def save_settings(self, user_id: UUID, settings: UserSettings) -> None:
        """Insert or replace the user's settings row."""
        self.client.table("user_settings").upsert(
            {
                "user_id": str(user_id),
                "savings_ratio": settings.savings_ratio,
                "habits": [
                    {"id": habit.id, "label": habit.label} for habit in settings.habits
                ],
                "updated_at": datetime.now(tz=UTC).isoformat(),
            },
            on_conflict="user_id",
        ).execute()
