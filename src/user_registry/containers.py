"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from user_registry.adapters.supabase_user_repository import SupabaseUserRepository
from user_registry.api.users import UserController
from user_registry.config import Settings
from user_registry.services.users import UserService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    user_service: UserService
    user_controller: UserController


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    user_service = UserService(SupabaseUserRepository(supabase_client))
    return AppContainer(
        settings=resolved_settings,
        user_service=user_service,
        user_controller=UserController(user_service),
    )
