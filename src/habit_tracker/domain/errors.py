"""Domain exceptions."""


class HabitTrackerError(Exception):
    """Base class for habit tracker errors."""


class EntryValidationError(HabitTrackerError):
    """Raised when an entry fails write-path validation."""


class EntryNotFoundError(HabitTrackerError):
    """Raised when an entry does not exist for a date."""


class SettingsValidationError(HabitTrackerError):
    """Raised when a settings update is not allowed."""


class HabitNotFoundError(HabitTrackerError):
    """Raised when a habit id is not in the user's habit list."""


class InvalidUsernameError(HabitTrackerError):
    """Raised when a username normalizes to an empty string."""
