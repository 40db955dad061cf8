"""Request models for user endpoints."""

from pydantic import BaseModel, Field, StrictStr


class RegisterUserRequest(BaseModel):
    """Body accepted by user registration."""

    name: StrictStr = Field(min_length=1)
    email: StrictStr = Field(min_length=1)
