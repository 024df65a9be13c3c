"""Data models for stored documents and search requests"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _as_utc(ts: Optional[datetime]) -> Optional[datetime]:
    """Naive timestamps are taken as UTC so stored and query times always compare."""
    if ts is not None and ts.tzinfo is None:
        return ts.replace(tzinfo=timezone.utc)
    return ts


class Author(BaseModel):
    """Identity reference attached to a document."""
    model_config = ConfigDict(frozen=True)

    id: str
    name: str


class Document(BaseModel):
    """A stored unit of content. id and created are assigned by the store on first save."""
    model_config = ConfigDict(frozen=True)

    id: Optional[str] = None
    title: str
    content: str
    author: Author
    created: Optional[datetime] = None      # ignored on save; kept from first insertion

    @field_validator("created")
    @classmethod
    def created_as_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        return _as_utc(value)


class SearchRequest(BaseModel):
    """Optional filters: AND across fields, OR within a list. None or [] means no constraint."""
    model_config = ConfigDict(frozen=True)

    title_prefixes: Optional[list[str]] = Field(default=None, description="Title starts with any of these")
    contains_contents: Optional[list[str]] = Field(default=None, description="Content contains any of these")
    author_ids: Optional[list[str]] = Field(default=None, description="Author id equals any of these")
    created_from: Optional[datetime] = Field(default=None, description="Exclusive lower bound on created")
    created_to: Optional[datetime] = Field(default=None, description="Exclusive upper bound on created")

    @field_validator("created_from", "created_to")
    @classmethod
    def bounds_as_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        return _as_utc(value)
