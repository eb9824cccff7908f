"""Repository implementations."""

from discuss.domain.repository import CommentCountRepository, ThreadRepository
from discuss.persistence.repository.inmemory import (
    InMemoryCommentCountRepository,
    InMemoryThreadRepository,
)

__all__ = [
    "CommentCountRepository",
    "ThreadRepository",
    "InMemoryCommentCountRepository",
    "InMemoryThreadRepository",
]
