"""Domain services."""

from .base import Service
from .comment_tree_service import CommentTreeService
from .thread_service import ThreadService

__all__ = [
    "CommentTreeService",
    "Service",
    "ThreadService",
]
