"""Per-post thread state.

ThreadState is the record kept for every post whose comments have been
loaded. CommentsState holds all of them. Both are immutable: every
transition returns new instances (see ThreadService.apply).
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from discuss.domain.model.common import DomainModel
from discuss.domain.model.node import Node
from discuss.domain.value import CommentId, Cursor, PostId


class ThreadState(DomainModel):
    """Comment tree and pagination state for a single post.

    - comments: Synthetic root of the comment tree
    - next: Cursor for older comments (None once everything is fetched)
    - z_index_top: Stacking counter bumped for every new top-level thread
    - fetched_at: When the post's comments were first fetched
    - last_fetched_at: When any comments were last fetched
    - changed_thread_ids: Top-level threads touched by the last transition
    """

    comments: Node
    next: Optional[Cursor] = None
    z_index_top: int
    fetched_at: datetime
    last_fetched_at: datetime
    changed_thread_ids: frozenset[CommentId] = frozenset()


class CommentsState(DomainModel):
    """Thread state of every loaded post."""

    ids: tuple[PostId, ...] = ()
    items: dict[PostId, ThreadState] = Field(default_factory=dict)

    def contains(self, post_id: PostId) -> bool:
        """Whether the post's comments have been loaded."""
        return post_id in self.items

    def get(self, post_id: PostId) -> ThreadState | None:
        """Get a post's thread state.

        Args:
            post_id: Post ID

        Returns:
            Thread state if loaded, None otherwise
        """
        return self.items.get(post_id)

    def with_thread(self, post_id: PostId, thread: ThreadState) -> "CommentsState":
        """Return a new state with the post's thread replaced or added.

        Other posts' entries are shared with the current state.
        """
        ids = self.ids if post_id in self.items else (*self.ids, post_id)
        return CommentsState(ids=ids, items={**self.items, post_id: thread})
