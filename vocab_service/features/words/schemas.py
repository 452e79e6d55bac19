"""Pydantic schemas for dictionary entries."""

from __future__ import annotations

from datetime import UTC, datetime
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field


def _utcnow() -> datetime:
    return datetime.now(UTC)


class DictionaryEntry(BaseModel):
    """A word and its meaning as stored in the dictionary file."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(default_factory=lambda: uuid4().hex, description="Entry identifier")
    word: str = Field(..., min_length=1)
    meaning: str = Field(..., min_length=1)
    created_at: datetime = Field(default_factory=_utcnow, alias="createdAt")
    updated_at: datetime = Field(default_factory=_utcnow, alias="updatedAt")


class WordCreate(BaseModel):
    """Add-or-update request body.

    Both fields are optional here so the route can answer a missing value
    with 400 instead of a 422 validation error.
    """

    word: str | None = None
    meaning: str | None = None


class DictionaryResponse(BaseModel):
    """Mutation acknowledgement carrying the full dictionary after the change."""

    success: bool = True
    dictionary: list[DictionaryEntry] = Field(default_factory=list)
