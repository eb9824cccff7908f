"""Comment record.

Comments arrive from the remote source as flat records. Threading is
expressed only through parent_id; the tree itself is rebuilt client-side
by CommentTreeService.
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import AliasChoices, ConfigDict, Field, field_validator

from discuss.domain.model.common import DomainModel
from discuss.domain.value import CommentId, PostId


class Comment(DomainModel):
    """Comment record as delivered by the remote source.

    Only id and parent_id are interpreted. Every other field, declared or
    not, is carried through untouched for the rendering layer.

    - parent_id: Direct parent comment (None for top-level)
    """

    model_config = ConfigDict(extra="allow")

    id: CommentId
    parent_id: Optional[CommentId] = Field(
        default=None, validation_alias=AliasChoices("parent_id", "parentId")
    )
    post_id: Optional[PostId] = Field(
        default=None, validation_alias=AliasChoices("post_id", "postId")
    )
    author: Optional[str] = None
    body: Optional[str] = None
    created_at: Optional[datetime] = None

    @field_validator("id")
    @classmethod
    def validate_id(cls, v: str) -> str:
        """Validate comment id is not empty."""
        if not v:
            raise ValueError("Comment id must not be empty")
        return v

    @field_validator("parent_id", mode="before")
    @classmethod
    def normalize_parent_id(cls, v: Any) -> Any:
        """Treat an empty parent id as top-level."""
        if v == "":
            return None
        return v

    @property
    def is_top_level(self) -> bool:
        """Whether the record names no parent."""
        return self.parent_id is None
