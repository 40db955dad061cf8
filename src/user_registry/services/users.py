"""User-related business logic."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from user_registry.domain.models import UserRecord

logger = logging.getLogger(__name__)


class UserRepository(Protocol):
    """Persistence interface for user data."""

    def create(self, name: str, email: str) -> UserRecord:
        """Create and return a new user record."""

    def get_user(self, user_id: UUID) -> UserRecord | None:
        """Return the user with the given id, if present."""


@dataclass
class UserService:
    """Application service for user lifecycle actions."""

    repository: UserRepository

    def create(self, name: str, email: str) -> UserRecord:
        """Create a user and return the stored record."""
        user = self.repository.create(name, email)
        logger.info("Created user %s", user.id)
        return user

    def get_user(self, user_id: UUID) -> UserRecord | None:
        """Return the user for an id, or None when it does not exist."""
        return self.repository.get_user(user_id)
