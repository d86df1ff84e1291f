"""Per-user API endpoints with simple token auth."""

from __future__ import annotations

from dataclasses import asdict
from typing import TYPE_CHECKING

from fastapi import (
    APIRouter,
    Depends,
    Header,
    HTTPException,
    Query,
    Request,
    status,
)

from habit_tracker.api.models import EntryPayload, HabitPayload, SavingsRatioPayload
from habit_tracker.domain.entries import Entry, UserSettings
from habit_tracker.domain.models import UserRecord  # noqa: TC001
from habit_tracker.services.entries import parse_gratitude
from habit_tracker.services.suggestions import suggest_next_step

if TYPE_CHECKING:
    from habit_tracker.containers import AppContainer


def _get_api_token(request: Request) -> str:
    container: AppContainer = request.app.state.container
    return container.settings.api_token


async def require_api_token(
    x_api_token: str | None = Header(default=None),
    api_token: str = Depends(_get_api_token),
) -> None:
    """Ensure requests include a valid API token."""
    if not x_api_token or x_api_token != api_token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)


router = APIRouter(
    prefix="/users/{username}",
    tags=["users"],
    dependencies=[Depends(require_api_token)],
)


def _container(request: Request) -> AppContainer:
    return request.app.state.container


def resolve_user(username: str, request: Request) -> UserRecord:
    """Return the user for the path username, creating it on first use."""
    return _container(request).user_service.ensure_user(username)


@router.get("/entries")
async def list_entries(
    request: Request,
    user: UserRecord = Depends(resolve_user),
    limit: int | None = Query(default=None, ge=1),
) -> dict[str, object]:
    """Return the user's entries, newest first."""
    entries = _container(request).entry_service.list_entries(user.id, limit)
    return {"entries": [_serialize_entry(entry) for entry in entries]}


@router.put("/entries/{date}")
async def save_entry(
    date: str,
    payload: EntryPayload,
    request: Request,
    user: UserRecord = Depends(resolve_user),
) -> dict[str, object]:
    """Create or replace the entry for a date."""
    entry = Entry(
        date=date,
        improve=payload.improve,
        gratitude=parse_gratitude(payload.gratitude),
        habits_completed=frozenset(payload.habits_completed),
        bookkeeping=payload.bookkeeping,
    )
    saved = _container(request).entry_service.save_entry(user.id, entry)
    return {
        "entry": _serialize_entry(saved),
        "suggestion": suggest_next_step(saved.improve),
    }


@router.delete("/entries/{date}")
async def delete_entry(
    date: str, request: Request, user: UserRecord = Depends(resolve_user)
) -> dict[str, str]:
    """Delete the entry for a date."""
    _container(request).entry_service.delete_entry(user.id, date)
    return {"status": "deleted"}


@router.get("/settings")
async def get_settings(
    request: Request, user: UserRecord = Depends(resolve_user)
) -> dict[str, object]:
    """Return the user's settings."""
    settings = _container(request).user_settings_service.get_settings(user.id)
    return _serialize_settings(settings)


@router.put("/settings/savings-ratio")
async def set_savings_ratio(
    payload: SavingsRatioPayload,
    request: Request,
    user: UserRecord = Depends(resolve_user),
) -> dict[str, object]:
    """Update the savings ratio."""
    settings = _container(request).user_settings_service.set_savings_ratio(
        user.id, payload.savings_ratio
    )
    return _serialize_settings(settings)


@router.post("/habits", status_code=status.HTTP_201_CREATED)
async def add_habit(
    payload: HabitPayload,
    request: Request,
    user: UserRecord = Depends(resolve_user),
) -> dict[str, str]:
    """Append a habit to the user's list."""
    habit = _container(request).user_settings_service.add_habit(
        user.id, payload.label
    )
    return {"id": habit.id, "label": habit.label}


@router.delete("/habits/{habit_id}")
async def remove_habit(
    habit_id: str, request: Request, user: UserRecord = Depends(resolve_user)
) -> dict[str, str]:
    """Remove a habit from the user's list."""
    _container(request).user_settings_service.remove_habit(user.id, habit_id)
    return {"status": "deleted"}


@router.get("/stats")
async def get_stats(
    request: Request, user: UserRecord = Depends(resolve_user)
) -> dict[str, object]:
    """Return every derived statistic for the user."""
    return asdict(_container(request).stats_service.get_stats(user.id))


def _serialize_entry(entry: Entry) -> dict[str, object]:
    return {
        "date": entry.date,
        "improve": entry.improve,
        "gratitude": list(entry.gratitude),
        "habits_completed": sorted(entry.habits_completed),
        "bookkeeping": entry.bookkeeping,
    }


def _serialize_settings(settings: UserSettings) -> dict[str, object]:
    return {
        "savings_ratio": settings.savings_ratio,
        "habits": [{"id": habit.id, "label": habit.label} for habit in settings.habits],
    }
