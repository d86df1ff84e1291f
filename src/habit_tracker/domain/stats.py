"""Domain models for derived statistics."""

from dataclasses import dataclass


@dataclass(frozen=True)
class PeriodStatus:
    """Entry and habit-day counts for a week or month."""

    entries: int
    habit_days: int
    met: bool


@dataclass(frozen=True)
class WeekStatus:
    """Threshold status for one elapsed week of the current month."""

    week_key: str
    entries: int
    habit_days: int
    met: bool


@dataclass(frozen=True)
class InterpersonalUnlock:
    """Rolling eight-week unlock metrics."""

    met_weeks: int
    observed_weeks: int
    total_weeks: int
    unlocked: bool


@dataclass(frozen=True)
class HabitCount:
    """Days a habit was completed in the current month."""

    habit_id: str
    label: str
    days: int


@dataclass(frozen=True)
class HabitStats:
    """Every statistic derived from a user's entries and settings."""

    this_week_key: str
    this_week_entries: int
    this_week_habit_days: int
    this_week_met: bool
    this_month_key: str
    this_month_entries: int
    this_month_weeks: tuple[WeekStatus, ...]
    month_all_weeks_met: bool
    points_total: int
    weekly_reward_base: int
    next_period_reward: int
    interpersonal: InterpersonalUnlock
    bonus_density_days: int
    bonus_density_met: bool
    savings_ratio: float
    monthly_gain_rate: float
    projected_month_end: int
    habit_breakdown: tuple[HabitCount, ...]
