"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from habit_tracker.adapters.clock import ZoneClock
from habit_tracker.adapters.supabase_entry_repository import SupabaseEntryRepository
from habit_tracker.adapters.supabase_user_repository import SupabaseUserRepository
from habit_tracker.adapters.supabase_user_settings_repository import (
    SupabaseUserSettingsRepository,
)
from habit_tracker.config import Settings
from habit_tracker.services.entries import EntryService
from habit_tracker.services.stats import StatsService
from habit_tracker.services.user_settings import UserSettingsService
from habit_tracker.services.users import UserService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    user_service: UserService
    entry_service: EntryService
    user_settings_service: UserSettingsService
    stats_service: StatsService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    user_repository = SupabaseUserRepository(supabase_client)
    entry_repository = SupabaseEntryRepository(supabase_client)
    user_settings_repository = SupabaseUserSettingsRepository(supabase_client)
    stats_service = StatsService(
        entry_repository=entry_repository,
        settings_repository=user_settings_repository,
        clock=ZoneClock(resolved_settings.timezone),
    )
    return AppContainer(
        settings=resolved_settings,
        user_service=UserService(user_repository),
        entry_service=EntryService(
            entry_repository, default_limit=resolved_settings.entries_limit
        ),
        user_settings_service=UserSettingsService(user_settings_repository),
        stats_service=stats_service,
    )
