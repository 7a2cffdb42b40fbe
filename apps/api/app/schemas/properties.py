"""Schemas for the property endpoints."""
from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PropertyCreate(BaseModel):
    """Incoming property payload.

    Numeric fields arrive as form text as often as JSON numbers, so text is
    accepted and parsed. Anything that does not parse is rejected rather than
    stored as a not-a-number value.
    """

    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")

    title: str = Field(min_length=1)
    location: str = Field(min_length=1)
    price: float = Field(ge=0, allow_inf_nan=False)
    status: str = Field(min_length=1)
    description: str | None = None
    type: str = Field(min_length=1)
    bedrooms: int | None = Field(default=None, ge=0)
    bathrooms: int | None = Field(default=None, ge=0)
    size: float | None = Field(default=None, ge=0, allow_inf_nan=False)

    @field_validator("price", "size", "bedrooms", "bathrooms", mode="before")
    @classmethod
    def _parse_numeric_text(cls, value: object) -> object:
        if isinstance(value, bool):
            raise ValueError("must be a number")
        if isinstance(value, str):
            value = value.strip()
            return value or None
        return value

    @field_validator("description", mode="before")
    @classmethod
    def _blank_description(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value


class PropertyRead(BaseModel):
    """Stored property as returned to clients."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    location: str
    price: float
    status: str
    description: str | None = None
    type: str
    bedrooms: int | None = None
    bathrooms: int | None = None
    size: float | None = None
    created_at: datetime = Field(serialization_alias="createdAt")


class FieldError(BaseModel):
    field: str
    message: str


class ErrorResponse(BaseModel):
    error: str
    detail: list[FieldError] | None = None
