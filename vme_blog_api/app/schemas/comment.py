"""
Pydantic schema for comments owned by the external comments service.

Only ``id`` and ``postId`` are required; the remaining fields are
passed through when the service provides them.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class CommentRead(BaseModel):
    """Schema for a comment returned by ``GET /comments``."""

    id: int
    post_id: int = Field(..., alias="postId")
    name: Optional[str] = None
    email: Optional[str] = None
    body: Optional[str] = None

    model_config = ConfigDict(populate_by_name=True, extra="ignore")
