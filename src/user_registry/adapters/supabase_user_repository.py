"""Supabase-backed user repository."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from user_registry.domain.models import UserRecord
from user_registry.services.users import UserRepository

_USER_COLUMNS = "id, name, email, created_at, updated_at"


@dataclass
class SupabaseUserRepository(UserRepository):
    """Supabase implementation for user persistence."""

    client: Client

    def create(self, name: str, email: str) -> UserRecord:
        """Insert a new user row and return it."""
        response = (
            self.client.table("users").insert({"name": name, "email": email}).execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create user in Supabase")
        return _row_to_user(response.data[0])

    def get_user(self, user_id: UUID) -> UserRecord | None:
        """Return the user row for an id, if present."""
        response = (
            self.client.table("users")
            .select(_USER_COLUMNS)
            .eq("id", str(user_id))
            .limit(1)
            .execute()
        )
        if response.data:
            return _row_to_user(response.data[0])
        return None


def _row_to_user(row: dict[str, object]) -> UserRecord:
    return UserRecord(
        id=UUID(str(row["id"])),
        name=str(row["name"]),
        email=str(row["email"]),
        created_at=_parse_timestamp(row.get("created_at")),
        updated_at=_parse_timestamp(row.get("updated_at")),
    )


def _parse_timestamp(value: object) -> datetime | None:
    if isinstance(value, str) and value:
        return datetime.fromisoformat(value)
    return None
