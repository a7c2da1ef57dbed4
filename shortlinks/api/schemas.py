"""
API Request and Response Schemas

This module defines all Pydantic models for API requests and responses.
Separated from endpoints to keep concerns separated and enable reuse.

Design Principles:
- Request models: Define input validation, checked by FastAPI before the
  endpoint (and the database) is reached
- Response models: Define output structure
"""

import uuid
from typing import Union

from pydantic import BaseModel, ConfigDict, Field, StrictStr, field_validator

from shortlinks.core.validators import MAX_NAME_LENGTH, MAX_URL_LENGTH, is_valid_url


class LinkRequest(BaseModel):
    """Request body for creating or replacing a link."""
    name: StrictStr = Field(
        ...,
        min_length=1,
        max_length=MAX_NAME_LENGTH,
        pattern=r"^[^/]+$",  # one path segment, so GET /{name} can reach it
        description="Unique short name used in the redirect path"
    )
    url: StrictStr = Field(
        ...,
        min_length=1,
        max_length=MAX_URL_LENGTH,
        description="Absolute http(s) URL to redirect to"
    )

    @field_validator("url")
    @classmethod
    def check_url(cls, value: str) -> str:
        if not is_valid_url(value):
            raise ValueError("url must be a well-formed absolute http or https URL")
        return value


class LinkResponse(BaseModel):
    """A stored link."""
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID = Field(..., description="Identifier assigned at creation")
    name: str = Field(..., description="Unique short name")
    url: str = Field(..., description="Redirect target")


class ErrorResponse(BaseModel):
    """Body of every error response."""
    error: str = Field(..., description="HTTP reason phrase, e.g. 'Not Found'")
    message: Union[str, list[str]] = Field(..., description="Human-readable detail")
