"""Supabase-backed user repository."""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from supabase import Client

from habit_tracker.domain.models import UserRecord
from habit_tracker.services.users import UserRepository


@dataclass
class SupabaseUserRepository(UserRepository):
    """Supabase implementation for user persistence."""

    client: Client

    def get_by_username(self, username: str) -> UserRecord | None:
        """Return the user for a normalized username, if present."""
        response = (
            self.client.table("users")
            .select("id, username")
            .eq("username", username)
            .limit(1)
            .execute()
        )
        if response.data:
            row = response.data[0]
            return UserRecord(id=UUID(row["id"]), username=row["username"])
        return None

    def create_user(self, username: str) -> UserRecord:
        """Create a new user row and return it."""
        response = self.client.table("users").insert({"username": username}).execute()
        if not response.data:
            raise RuntimeError("Failed to create user in Supabase")
        row = response.data[0]
        return UserRecord(id=UUID(row["id"]), username=row["username"])

    def touch_last_active(self, user_id: UUID) -> None:
        """Update the last_active_at timestamp for a user."""
        self.client.table("users").update(
            {"last_active_at": datetime.now(tz=UTC).isoformat()}
        ).eq("id", str(user_id)).execute()
