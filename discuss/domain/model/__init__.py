"""Domain model entities for discussion threads."""

from discuss.domain.model.comment import Comment
from discuss.domain.model.event import (
    CommentsAdded,
    CommentsLoaded,
    MoreCommentsAdded,
    NewCommentAdded,
    ReplyCommentsAdded,
    ThreadEvent,
)
from discuss.domain.model.node import Node
from discuss.domain.model.thread import CommentsState, ThreadState

__all__ = [
    "Comment",
    "CommentsAdded",
    "CommentsLoaded",
    "CommentsState",
    "MoreCommentsAdded",
    "NewCommentAdded",
    "Node",
    "ReplyCommentsAdded",
    "ThreadEvent",
    "ThreadState",
]
