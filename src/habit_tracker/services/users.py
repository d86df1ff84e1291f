"""User-related business logic."""

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from habit_tracker.domain.errors import InvalidUsernameError
from habit_tracker.domain.models import UserRecord, normalize_username


class UserRepository(Protocol):
    """Persistence interface for user data."""

    def get_by_username(self, username: str) -> UserRecord | None:
        """Return the user for a normalized username, if present."""

    def create_user(self, username: str) -> UserRecord:
        """Create and return a new user record."""

    def touch_last_active(self, user_id: UUID) -> None:
        """Update the last active timestamp for the user."""


@dataclass
class UserService:
    """Application service for user lifecycle actions."""

    repository: UserRepository

    def ensure_user(self, username: str) -> UserRecord:
        """Ensure a user exists for the username and return it."""
        normalized = normalize_username(username)
        if not normalized:
            raise InvalidUsernameError("Username must not be blank")
        existing = self.repository.get_by_username(normalized)
        if existing:
            self.repository.touch_last_active(existing.id)
            return existing
        return self.repository.create_user(normalized)
