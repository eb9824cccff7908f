"""Domain value objects for discussion threads."""

from discuss.domain.value.identifiers import CommentId, PostId
from discuss.domain.value.types import Cursor, ThreadEventKind

__all__ = [
    # Identifiers
    "CommentId",
    "PostId",
    # Types
    "Cursor",
    "ThreadEventKind",
]
