"""Habit-day counting and threshold checks for weeks and months."""

from collections.abc import Iterable, Mapping
from datetime import datetime, timedelta

from habit_tracker.domain.entries import Entry
from habit_tracker.domain.stats import InterpersonalUnlock, PeriodStatus, WeekStatus
from habit_tracker.services.calendar import (
    end_of_week,
    index_by_week,
    month_bounds,
    parse_entry_date,
    start_of_week,
)

WEEKLY_HABIT_DAY_THRESHOLD = 3
UNLOCK_WINDOW_DAYS = 56
UNLOCK_WINDOW_WEEKS = 8
UNLOCK_REQUIRED_WEEKS = 6


def is_habit_day(entry: Entry) -> bool:
    """Return True when at least one habit was completed on the entry's day.

    Legacy entries carry a single ``bookkeeping`` flag instead of a habit set;
    the flag counts the same as a completed habit.
    """
    return bool(entry.habits_completed) or entry.bookkeeping is True


def count_habit_days(entries: Iterable[Entry]) -> int:
    """Return the number of entries that are habit days."""
    return sum(1 for entry in entries if is_habit_day(entry))


def evaluate_period(entries: Iterable[Entry]) -> PeriodStatus:
    """Return entry count, habit-day count and whether the weekly threshold is met."""
    snapshot = tuple(entries)
    habit_days = count_habit_days(snapshot)
    return PeriodStatus(
        entries=len(snapshot),
        habit_days=habit_days,
        met=habit_days >= WEEKLY_HABIT_DAY_THRESHOLD,
    )


def month_week_statuses(
    weeks: Mapping[str, tuple[Entry, ...]], now: datetime
) -> tuple[WeekStatus, ...]:
    """Return statuses for the fully elapsed weeks intersecting the month of ``now``.

    A week is included once its Sunday has ended; the current partial week
    is left out so it cannot fail the month early.
    """
    first, last = month_bounds(now.date())
    statuses = []
    cursor = start_of_week(first)
    while cursor <= last:
        if end_of_week(cursor) <= now:
            key = cursor.isoformat()
            period = evaluate_period(weeks.get(key, ()))
            statuses.append(
                WeekStatus(
                    week_key=key,
                    entries=period.entries,
                    habit_days=period.habit_days,
                    met=period.met,
                )
            )
        cursor += timedelta(days=7)
    return tuple(statuses)


def month_all_weeks_met(statuses: tuple[WeekStatus, ...]) -> bool:
    """Return True when at least one week elapsed and every elapsed week was met."""
    return bool(statuses) and all(status.met for status in statuses)


def interpersonal_unlock(entries: Iterable[Entry], now: datetime) -> InterpersonalUnlock:
    """Evaluate the rolling eight-week unlock over the last 56 days."""
    today = now.date()
    window_start = today - timedelta(days=UNLOCK_WINDOW_DAYS - 1)
    in_window = [
        entry
        for entry in entries
        if window_start <= parse_entry_date(entry.date) <= today
    ]
    weeks = index_by_week(in_window)
    met_weeks = sum(1 for bucket in weeks.values() if evaluate_period(bucket).met)
    return InterpersonalUnlock(
        met_weeks=met_weeks,
        observed_weeks=len(weeks),
        total_weeks=max(len(weeks), UNLOCK_WINDOW_WEEKS),
        unlocked=met_weeks >= UNLOCK_REQUIRED_WEEKS,
    )
