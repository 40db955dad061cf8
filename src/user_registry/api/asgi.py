"""ASGI entrypoint for the user registry API."""

from user_registry.api.app import create_app
from user_registry.containers import build_container

app = create_app(build_container())
