"""Pydantic models for API request payloads."""

from pydantic import BaseModel, Field


class EntryPayload(BaseModel):
    """Body for creating or replacing a day's entry."""

    improve: str
    gratitude: list[str] | str
    habits_completed: list[str] = Field(default_factory=list)
    bookkeeping: bool = False


class SavingsRatioPayload(BaseModel):
    """Body for changing the savings ratio."""

    savings_ratio: float


class HabitPayload(BaseModel):
    """Body for adding a habit."""

    label: str
