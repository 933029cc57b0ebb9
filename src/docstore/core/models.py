"""Document, author and search request models held by the in-memory store"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator

from docstore.core.utils.dates import as_utc


class Author(BaseModel):
    """Document author; ids are not required to be unique."""
    id: str
    name: Optional[str] = None


class Document(BaseModel):
    """A stored record. The store assigns `id` on save when it is missing or blank."""
    model_config = ConfigDict(validate_assignment=True)

    id: Optional[str] = None
    title: Optional[str] = None
    content: Optional[str] = None
    author: Optional[Author] = None
    created: Optional[datetime] = None   # naive values are taken as UTC

    @field_validator("created")
    @classmethod
    def created_as_utc(cls, v: Optional[datetime]) -> Optional[datetime]:
        return as_utc(v)


class SearchRequest(BaseModel):
    """Search filters; an absent or empty field places no constraint on that dimension."""
    title_prefixes:    Optional[list[str]] = None
    contains_contents: Optional[list[str]] = None
    author_ids:        Optional[list[str]] = None
    created_from:      Optional[datetime] = None   # inclusive
    created_to:        Optional[datetime] = None   # inclusive

    @field_validator("created_from", "created_to")
    @classmethod
    def bounds_as_utc(cls, v: Optional[datetime]) -> Optional[datetime]:
        return as_utc(v)
