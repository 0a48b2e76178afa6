"""
Pydantic schemas for blog posts.

A post is identified by an integer ``id`` that comes from the seed
data and is never reused.  ``url`` doubles as the slug lookup field.
``version`` is an optimistic concurrency token: the store bumps it on
every update and rejects updates that carry a stale value.
"""

from datetime import datetime
from typing import List

from pydantic import BaseModel, ConfigDict, Field


class PostBase(BaseModel):
    """Fields shared by seeded and stored posts."""

    id: int = Field(..., description="Stable post identifier")
    title: str = Field(..., description="Post title")
    summary: str = Field("", description="Short summary shown in listings")
    url: str = Field(..., description="Canonical URL; slug lookups match against it")
    date_published: datetime = Field(..., description="Local publication timestamp")


class PostCreate(PostBase):
    """Schema for a post read from the seed data file."""


class PostRead(PostBase):
    """Schema for reading a stored post."""

    version: int = Field(0, ge=0, description="Optimistic concurrency token")

    model_config = ConfigDict(from_attributes=True)


class PostsEnvelope(BaseModel):
    """Wrapper of the seed data document: ``{"posts": [...]}``."""

    posts: List[PostCreate]
