"""User settings service."""

import logging
from dataclasses import dataclass, replace
from typing import Protocol
from uuid import UUID, uuid4

from habit_tracker.domain.entries import SAVINGS_RATIOS, Habit, UserSettings
from habit_tracker.domain.errors import HabitNotFoundError, SettingsValidationError

_logger = logging.getLogger(__name__)


class UserSettingsRepository(Protocol):
    """Persistence interface for user settings."""

    def get_settings(self, user_id: UUID) -> UserSettings | None:
        """Return the user's settings if stored."""

    def save_settings(self, user_id: UUID, settings: UserSettings) -> None:
        """Create or replace the user's settings."""


@dataclass
class UserSettingsService:
    """Service for user settings and the habit list."""

    repository: UserSettingsRepository

    def get_settings(self, user_id: UUID) -> UserSettings:
        """Return the user's settings, or defaults when unset."""
        return self.repository.get_settings(user_id) or UserSettings()

    def set_savings_ratio(self, user_id: UUID, savings_ratio: float) -> UserSettings:
        """Persist a new savings ratio."""
        if savings_ratio not in SAVINGS_RATIOS:
            raise SettingsValidationError(
                f"Savings ratio must be one of {SAVINGS_RATIOS}, got {savings_ratio}"
            )
        updated = replace(self.get_settings(user_id), savings_ratio=savings_ratio)
        self.repository.save_settings(user_id, updated)
        return updated

    def add_habit(self, user_id: UUID, label: str) -> Habit:
        """Append a habit to the user's list and return it."""
        cleaned = label.strip()
        if not cleaned:
            raise SettingsValidationError("Habit label must not be blank")
        habit = Habit(id=uuid4().hex, label=cleaned)
        current = self.get_settings(user_id)
        self.repository.save_settings(
            user_id, replace(current, habits=(*current.habits, habit))
        )
        _logger.info("Habit added: user_id=%s habit_id=%s", user_id, habit.id)
        return habit

    def remove_habit(self, user_id: UUID, habit_id: str) -> None:
        """Remove a habit; past entries keep referencing its id."""
        current = self.get_settings(user_id)
        remaining = tuple(habit for habit in current.habits if habit.id != habit_id)
        if len(remaining) == len(current.habits):
            raise HabitNotFoundError(f"Unknown habit {habit_id}")
        self.repository.save_settings(user_id, replace(current, habits=remaining))
        _logger.info("Habit removed: user_id=%s habit_id=%s", user_id, habit_id)
