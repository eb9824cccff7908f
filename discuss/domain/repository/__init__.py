"""Repository interfaces for discussion threads.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from discuss.domain.repository.comment_count import CommentCountRepository
from discuss.domain.repository.thread import ThreadRepository

__all__ = [
    "CommentCountRepository",
    "ThreadRepository",
]
