"""Domain models for daily entries, habits and per-user settings."""

from dataclasses import dataclass, field

SAVINGS_RATIOS = (0.0, 0.25, 0.5)
UNKNOWN_HABIT_LABEL = "unknown habit"


@dataclass(frozen=True)
class Habit:
    """A user-defined tracked behavior."""

    id: str
    label: str


@dataclass(frozen=True)
class Entry:
    """One record per calendar day."""

    date: str
    improve: str
    gratitude: tuple[str, ...]
    habits_completed: frozenset[str] = field(default_factory=frozenset)
    bookkeeping: bool = False


@dataclass(frozen=True)
class UserSettings:
    """Per-user configuration."""

    savings_ratio: float = 0.0
    habits: tuple[Habit, ...] = ()

    def habit_label(self, habit_id: str) -> str:
        """Return the label for a habit id, or a placeholder for deleted ids."""
        for habit in self.habits:
            if habit.id == habit_id:
                return habit.label
        return UNKNOWN_HABIT_LABEL
