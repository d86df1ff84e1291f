"""Domain models for the habit tracker."""

import unicodedata
from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class UserRecord:
    """Represents a user stored in the database."""

    id: UUID
    username: str


def normalize_username(raw: str) -> str:
    """Normalize a display name into the key used to look users up."""
    normalized = unicodedata.normalize("NFKC", raw or "")
    return " ".join(normalized.split()).lower()
