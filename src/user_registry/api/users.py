"""User endpoints and the controller behind them."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from user_registry.api.user_models import RegisterUserRequest
from user_registry.services.users import UserService  # noqa: TC001

if TYPE_CHECKING:
    from user_registry.containers import AppContainer

logger = logging.getLogger(__name__)

INVALID_PARAMS = {"message": "Invalid Params"}

router = APIRouter(prefix="/users", tags=["users"])


@dataclass
class UserController:
    """Translates user requests into service calls and HTTP responses."""

    service: UserService

    def register(self, payload: object) -> JSONResponse:
        """Create a user from a decoded body holding ``name`` and ``email``.

        Anything other than an object with two non-empty string fields is
        rejected with 400 before the service is called.
        """
        try:
            params = RegisterUserRequest.model_validate(payload)
        except ValidationError as exc:
            return _invalid_params(exc)
        return self._create(params)

    def register_json(self, body: bytes) -> JSONResponse:
        """Create a user from a raw JSON request body."""
        try:
            params = RegisterUserRequest.model_validate_json(body)
        except ValidationError as exc:
            return _invalid_params(exc)
        return self._create(params)

    def get_user(self, user_id: UUID) -> JSONResponse:
        """Return the user for an id; ``data`` is null when none matches."""
        user = self.service.get_user(user_id)
        return JSONResponse(
            status_code=status.HTTP_200_OK,
            content=jsonable_encoder({"data": user}),
        )

    def _create(self, params: RegisterUserRequest) -> JSONResponse:
        user = self.service.create(params.name, params.email)
        return JSONResponse(
            status_code=status.HTTP_201_CREATED,
            content=jsonable_encoder({"data": user}),
        )


def _invalid_params(exc: ValidationError) -> JSONResponse:
    logger.warning(
        "Rejected registration: %s",
        ", ".join(error["type"] for error in exc.errors()),
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST, content=dict(INVALID_PARAMS)
    )


@router.post("")
async def register_user(request: Request) -> JSONResponse:
    """Create a user."""
    container: AppContainer = request.app.state.container
    return container.user_controller.register_json(await request.body())


@router.get("/{user_id}")
async def get_user(user_id: UUID, request: Request) -> JSONResponse:
    """Fetch a user by id."""
    container: AppContainer = request.app.state.container
    return container.user_controller.get_user(user_id)
