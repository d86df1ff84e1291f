"""Statistics service for habit entries."""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime
from typing import Protocol
from uuid import UUID

from habit_tracker.domain.entries import Entry, UserSettings
from habit_tracker.domain.stats import HabitCount, HabitStats
from habit_tracker.services.calendar import (
    index_by_month,
    index_by_week,
    month_key,
    week_key,
)
from habit_tracker.services.entries import EntryRepository
from habit_tracker.services.projection import (
    has_bonus_density,
    monthly_gain_rate,
    project_month_end,
)
from habit_tracker.services.rewards import (
    WEEKLY_REWARD_BASE,
    next_period_reward,
    total_points,
)
from habit_tracker.services.streaks import (
    count_habit_days,
    evaluate_period,
    interpersonal_unlock,
    is_habit_day,
    month_all_weeks_met,
    month_week_statuses,
)
from habit_tracker.services.user_settings import UserSettingsRepository

LEGACY_HABIT_ID = "bookkeeping"
LEGACY_HABIT_LABEL = "Bookkeeping"


class Clock(Protocol):
    """Source of the current local time."""

    def now(self) -> datetime:
        """Return the current naive local datetime."""


def compute_habit_stats(
    entries: Iterable[Entry], settings: UserSettings, now: datetime
) -> HabitStats:
    """Derive every displayed statistic from entries, settings and ``now``."""
    snapshot = tuple(entries)
    weeks = index_by_week(snapshot)
    months = index_by_month(snapshot)
    today = now.date()

    this_week_key = week_key(today)
    this_week = evaluate_period(weeks.get(this_week_key, ()))
    this_month_key = month_key(today)
    this_month_entries = months.get(this_month_key, ())

    month_weeks = month_week_statuses(weeks, now)
    all_weeks_met = month_all_weeks_met(month_weeks)

    points = total_points(weeks)
    bonus_days = count_habit_days(this_month_entries)
    bonus_density = has_bonus_density(bonus_days)
    gain_rate = monthly_gain_rate(settings.savings_ratio, bonus_density)

    return HabitStats(
        this_week_key=this_week_key,
        this_week_entries=this_week.entries,
        this_week_habit_days=this_week.habit_days,
        this_week_met=this_week.met,
        this_month_key=this_month_key,
        this_month_entries=len(this_month_entries),
        this_month_weeks=month_weeks,
        month_all_weeks_met=all_weeks_met,
        points_total=points,
        weekly_reward_base=WEEKLY_REWARD_BASE,
        next_period_reward=next_period_reward(all_weeks_met),
        interpersonal=interpersonal_unlock(snapshot, now),
        bonus_density_days=bonus_days,
        bonus_density_met=bonus_density,
        savings_ratio=settings.savings_ratio,
        monthly_gain_rate=gain_rate,
        projected_month_end=project_month_end(points, gain_rate),
        habit_breakdown=habit_breakdown(this_month_entries, settings),
    )


def completed_habit_ids(entry: Entry, settings: UserSettings) -> frozenset[str]:
    """Return the habit ids an entry credits.

    A legacy ``bookkeeping`` entry credits the first habit in the list.
    """
    if entry.habits_completed:
        return entry.habits_completed
    if entry.bookkeeping is True:
        if settings.habits:
            return frozenset({settings.habits[0].id})
        return frozenset({LEGACY_HABIT_ID})
    return frozenset()


def habit_breakdown(
    entries: Iterable[Entry], settings: UserSettings
) -> tuple[HabitCount, ...]:
    """Count completion days per habit, known habits first in list order."""
    counts: dict[str, int] = {habit.id: 0 for habit in settings.habits}
    for entry in entries:
        if not is_habit_day(entry):
            continue
        for habit_id in sorted(completed_habit_ids(entry, settings)):
            counts[habit_id] = counts.get(habit_id, 0) + 1
    return tuple(
        HabitCount(habit_id=habit_id, label=_label(habit_id, settings), days=days)
        for habit_id, days in counts.items()
    )


def _label(habit_id: str, settings: UserSettings) -> str:
    if habit_id == LEGACY_HABIT_ID and not settings.habits:
        return LEGACY_HABIT_LABEL
    return settings.habit_label(habit_id)


@dataclass
class StatsService:
    """Service for computing a user's habit statistics."""

    entry_repository: EntryRepository
    settings_repository: UserSettingsRepository
    clock: Clock

    def get_stats(self, user_id: UUID) -> HabitStats:
        """Return statistics for the user's full entry history."""
        entries = self.entry_repository.list_entries(user_id)
        settings = self.settings_repository.get_settings(user_id) or UserSettings()
        return compute_habit_stats(entries, settings, self.clock.now())
