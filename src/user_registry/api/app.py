"""FastAPI application factory."""

from fastapi import FastAPI

from user_registry.api.error_handlers import register_error_handlers
from user_registry.api.users import router as users_router
from user_registry.app_logging import configure_logging
from user_registry.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()

    app = FastAPI(title="User Registry")
    app.state.container = container

    app.include_router(users_router)
    register_error_handlers(app)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
