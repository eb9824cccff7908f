"""In-memory repository implementations."""

from .comment_count import InMemoryCommentCountRepository
from .thread import InMemoryThreadRepository

__all__ = [
    "InMemoryCommentCountRepository",
    "InMemoryThreadRepository",
]
