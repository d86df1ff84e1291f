"""Weekly reward points."""

from collections.abc import Mapping

from habit_tracker.domain.entries import Entry
from habit_tracker.services.streaks import evaluate_period

WEEKLY_REWARD_BASE = 10
UPGRADED_WEEKLY_REWARD = 12


def total_points(weeks: Mapping[str, tuple[Entry, ...]]) -> int:
    """Return points earned across the whole history.

    Every week that met the habit-day threshold earns the base reward once,
    however many extra habit days it holds.
    """
    met_weeks = sum(1 for bucket in weeks.values() if evaluate_period(bucket).met)
    return met_weeks * WEEKLY_REWARD_BASE


def next_period_reward(all_weeks_met: bool) -> int:
    """Return the weekly reward offered next month."""
    return UPGRADED_WEEKLY_REWARD if all_weeks_met else WEEKLY_REWARD_BASE
