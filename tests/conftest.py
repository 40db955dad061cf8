"""Shared test fixtures."""

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID, uuid4

import pytest

from user_registry.api.users import UserController
from user_registry.config import Settings
from user_registry.containers import AppContainer
from user_registry.domain.models import UserRecord
from user_registry.services.users import UserRepository, UserService

FAKE_SERVICE_KEY = (
    "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9"
    ".eyJyb2xlIjoic2VydmljZV9yb2xlIn0"
    ".c2lnbmF0dXJl"
)


@dataclass
class InMemoryUserRepository(UserRepository):
    """In-memory user repository for tests."""

    users: dict[UUID, UserRecord] = field(default_factory=dict)

    def create(self, name: str, email: str) -> UserRecord:
        now = datetime.now(tz=UTC)
        user = UserRecord(
            id=uuid4(), name=name, email=email, created_at=now, updated_at=now
        )
        self.users[user.id] = user
        return user

    def get_user(self, user_id: UUID) -> UserRecord | None:
        return self.users.get(user_id)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key=FAKE_SERVICE_KEY,
    )


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def container(
    settings: Settings, user_repository: InMemoryUserRepository
) -> AppContainer:
    user_service = UserService(user_repository)
    return AppContainer(
        settings=settings,
        user_service=user_service,
        user_controller=UserController(user_service),
    )


@pytest.fixture
def registry_caplog(
    caplog: pytest.LogCaptureFixture,
) -> Iterator[pytest.LogCaptureFixture]:
    """Capture records from the package logger, which does not propagate."""
    logger = logging.getLogger("user_registry")
    caplog.set_level(logging.INFO, logger="user_registry")
    logger.addHandler(caplog.handler)
    yield caplog
    logger.removeHandler(caplog.handler)
