"""Pydantic request/response schemas for the Identity API."""

from __future__ import annotations

from pydantic import BaseModel, Field

# --- Request Schemas ---


class CredentialsRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "email": "john.doe@example.com",
                    "password": "password123",
                }
            ]
        }
    }

    # Optional so that missing fields surface as the domain's 400 message
    email: str | None = Field(None, max_length=254)
    password: str | None = Field(None, max_length=255)


# --- Response Schemas ---


class UserSummary(BaseModel):
    email: str


class AuthResponse(BaseModel):
    message: str
    token: str
    user: UserSummary
