"""Month-end point projection."""

import math

BONUS_DENSITY_THRESHOLD = 12


def has_bonus_density(habit_days_this_month: int) -> bool:
    """Return True when the month holds enough habit days for the boosted rate."""
    if habit_days_this_month < 0:
        raise ValueError(f"Negative habit-day count: {habit_days_this_month}")
    return habit_days_this_month >= BONUS_DENSITY_THRESHOLD


def monthly_gain_rate(savings_ratio: float, bonus_density: bool) -> float:
    """Return the monthly gain rate for a savings ratio."""
    if savings_ratio == 0.5:  # noqa: PLR2004
        return 0.03
    if savings_ratio == 0.25:  # noqa: PLR2004
        return 0.04 if bonus_density else 0.01
    if savings_ratio == 0:
        return 0.0
    raise ValueError(f"Unsupported savings ratio: {savings_ratio!r}")


def project_month_end(total: int, gain_rate: float) -> int:
    """Return ``total`` grown by ``gain_rate``, rounded half up."""
    projected = total * (1 + gain_rate)
    if math.isnan(projected):
        raise ValueError("Projection is not a number")
    return math.floor(projected + 0.5)
