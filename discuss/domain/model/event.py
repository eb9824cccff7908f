"""Thread events.

Every change to a post's comment tree is described by one of these
events. ThreadEvent is a closed union discriminated on kind, so handlers
never have to guess at payload shapes.
"""

from typing import Annotated, Literal, Optional, Union

from pydantic import Field

from discuss.domain.model.comment import Comment
from discuss.domain.model.common import DomainModel
from discuss.domain.model.node import Node
from discuss.domain.value import Cursor, PostId, ThreadEventKind


class CommentsAdded(DomainModel):
    """First page of a post's comments was fetched."""

    kind: Literal[ThreadEventKind.COMMENTS_ADDED] = ThreadEventKind.COMMENTS_ADDED
    post_id: PostId
    comments: list[Comment]
    next: Optional[Cursor] = None


class NewCommentAdded(DomainModel):
    """A comment was submitted locally."""

    kind: Literal[ThreadEventKind.NEW_COMMENT_ADDED] = (
        ThreadEventKind.NEW_COMMENT_ADDED
    )
    post_id: PostId
    comment: Comment


class ReplyCommentsAdded(DomainModel):
    """A batch of replies was fetched (may overlap the current tree)."""

    kind: Literal[ThreadEventKind.REPLY_COMMENTS_ADDED] = (
        ThreadEventKind.REPLY_COMMENTS_ADDED
    )
    post_id: PostId
    comments: list[Comment]


class MoreCommentsAdded(DomainModel):
    """An older page was fetched and already merged by the caller."""

    kind: Literal[ThreadEventKind.MORE_COMMENTS_ADDED] = (
        ThreadEventKind.MORE_COMMENTS_ADDED
    )
    post_id: PostId
    comments: Node
    next: Optional[Cursor] = None


class CommentsLoaded(DomainModel):
    """Comments were reloaded and must keep the server's top-level order."""

    kind: Literal[ThreadEventKind.COMMENTS_LOADED] = ThreadEventKind.COMMENTS_LOADED
    post_id: PostId
    comments: list[Comment]


ThreadEvent = Annotated[
    Union[
        CommentsAdded,
        NewCommentAdded,
        ReplyCommentsAdded,
        MoreCommentsAdded,
        CommentsLoaded,
    ],
    Field(discriminator="kind"),
]
