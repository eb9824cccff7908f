"""Thread state domain service."""

from collections.abc import Callable
from datetime import datetime

import logfire

from discuss.config import ThreadSettings
from discuss.domain.error import ThreadNotLoadedError
from discuss.domain.model import (
    CommentsAdded,
    CommentsLoaded,
    CommentsState,
    MoreCommentsAdded,
    NewCommentAdded,
    Node,
    ReplyCommentsAdded,
    ThreadEvent,
    ThreadState,
)
from discuss.domain.value import CommentId, PostId, ThreadEventKind

from .base import Service
from .comment_tree_service import CommentTreeService


def _top_level_ids(root: Node) -> frozenset[CommentId]:
    return frozenset(child.comment.id for child in root.children)


class ThreadService(Service):
    """Domain service applying thread events to the comments state.

    apply() is a pure state transition: it returns a new CommentsState and
    never hands back a root node that was already published. Events for
    the same post must be applied in the order they were accepted.
    """

    def __init__(
        self, tree_service: CommentTreeService, thread_settings: ThreadSettings
    ) -> None:
        """Initialize thread service.

        Args:
            tree_service: Comment tree service
            thread_settings: Thread configuration
        """
        self.tree_service = tree_service
        self.thread_settings = thread_settings
        self._handlers: dict[
            ThreadEventKind, Callable[[CommentsState, ThreadEvent], CommentsState]
        ] = {
            ThreadEventKind.COMMENTS_ADDED: self._comments_added,
            ThreadEventKind.NEW_COMMENT_ADDED: self._new_comment_added,
            ThreadEventKind.REPLY_COMMENTS_ADDED: self._reply_comments_added,
            ThreadEventKind.MORE_COMMENTS_ADDED: self._more_comments_added,
            ThreadEventKind.COMMENTS_LOADED: self._comments_loaded,
        }

    def apply(self, state: CommentsState, event: ThreadEvent) -> CommentsState:
        """Apply a thread event.

        Args:
            state: Current comments state
            event: Event to apply

        Returns:
            New comments state (state itself if the event was a no-op)

        Raises:
            ThreadNotLoadedError: If the event needs a thread that isn't loaded
        """
        with logfire.span(
            "thread_service.apply",
            post_id=event.post_id,
            kind=ThreadEventKind(event.kind).value,
        ):
            return self._handlers[event.kind](state, event)

    def _comments_added(
        self, state: CommentsState, event: CommentsAdded
    ) -> CommentsState:
        if state.contains(event.post_id):
            logfire.info("Thread already loaded, ignoring", post_id=event.post_id)
            return state

        root = self.tree_service.build(event.comments)
        now = datetime.now()
        thread = ThreadState(
            comments=root,
            next=event.next,
            z_index_top=self.thread_settings.default_z_index,
            fetched_at=now,
            last_fetched_at=now,
            changed_thread_ids=_top_level_ids(root),
        )
        logfire.info(
            "Thread loaded",
            post_id=event.post_id,
            count=len(event.comments),
            has_next=event.next is not None,
        )
        return state.with_thread(event.post_id, thread)

    def _new_comment_added(
        self, state: CommentsState, event: NewCommentAdded
    ) -> CommentsState:
        thread = self._require(state, event.post_id)

        parent = None
        if not event.comment.is_top_level:
            parent = self.tree_service.find(thread.comments, event.comment.parent_id)
        if parent is None:
            # New top-level thread stacks above the existing ones
            root = self.tree_service.renew_threads(thread.comments, set())
            z_index_top = thread.z_index_top + 1
        else:
            target = self.tree_service.top_level_ancestor(parent)
            root = self.tree_service.renew_threads(thread.comments, {target.comment.id})
            z_index_top = thread.z_index_top

        node = self.tree_service.insert(root, event.comment)
        top = self.tree_service.top_level_ancestor(node)

        logfire.info(
            "New comment added to thread",
            post_id=event.post_id,
            comment_id=event.comment.id,
            thread_id=top.comment.id,
            z_index_top=z_index_top,
        )
        return state.with_thread(
            event.post_id,
            thread.model_copy(
                update={
                    "comments": root,
                    "z_index_top": z_index_top,
                    "changed_thread_ids": frozenset({top.comment.id}),
                }
            ),
        )

    def _reply_comments_added(
        self, state: CommentsState, event: ReplyCommentsAdded
    ) -> CommentsState:
        thread = self._require(state, event.post_id)
        root = thread.comments

        fresh = [
            comment
            for comment in event.comments
            if self.tree_service.find(root, comment.id) is None
        ]
        logfire.info(
            "Reply batch filtered",
            post_id=event.post_id,
            received=len(event.comments),
            new=len(fresh),
        )

        changed: set[CommentId] = set()
        if fresh:
            existing = self.tree_service.index(root)
            targets = {
                self.tree_service.top_level_ancestor(
                    existing[comment.parent_id]
                ).comment.id
                for comment in fresh
                if not comment.is_top_level and comment.parent_id in existing
            }
            root = self.tree_service.renew_threads(root, targets)
            self.tree_service.build(fresh, root)
            nodes = self.tree_service.index(root)
            changed = {
                self.tree_service.top_level_ancestor(nodes[comment.id]).comment.id
                for comment in fresh
            }

        return state.with_thread(
            event.post_id,
            thread.model_copy(
                update={
                    "comments": root,
                    "last_fetched_at": datetime.now(),
                    "changed_thread_ids": frozenset(changed),
                }
            ),
        )

    def _more_comments_added(
        self, state: CommentsState, event: MoreCommentsAdded
    ) -> CommentsState:
        thread = self._require(state, event.post_id)
        logfire.info(
            "Older comments page added",
            post_id=event.post_id,
            has_next=event.next is not None,
        )
        return state.with_thread(
            event.post_id,
            thread.model_copy(
                update={
                    "comments": event.comments,
                    "next": event.next,
                    "last_fetched_at": datetime.now(),
                    "changed_thread_ids": _top_level_ids(event.comments),
                }
            ),
        )

    def _comments_loaded(
        self, state: CommentsState, event: CommentsLoaded
    ) -> CommentsState:
        root = self.tree_service.build_preserving_order(event.comments)
        thread = state.get(event.post_id)
        if thread is None:
            now = datetime.now()
            thread = ThreadState(
                comments=root,
                z_index_top=self.thread_settings.default_z_index,
                fetched_at=now,
                last_fetched_at=now,
                changed_thread_ids=_top_level_ids(root),
            )
        else:
            thread = thread.model_copy(
                update={"comments": root, "changed_thread_ids": _top_level_ids(root)}
            )
        logfire.info(
            "Thread reloaded in server order",
            post_id=event.post_id,
            count=len(event.comments),
        )
        return state.with_thread(event.post_id, thread)

    @staticmethod
    def _require(state: CommentsState, post_id: PostId) -> ThreadState:
        thread = state.get(post_id)
        if thread is None:
            logfire.error("Thread not loaded", post_id=post_id)
            raise ThreadNotLoadedError(post_id)
        return thread
