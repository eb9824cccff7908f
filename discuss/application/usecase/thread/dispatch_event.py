"""Dispatch thread event use case."""

from pydantic import BaseModel, ConfigDict

from discuss.application.usecase.base import BaseUseCase
from discuss.domain.model import NewCommentAdded, ThreadEvent
from discuss.domain.repository import CommentCountRepository, ThreadRepository
from discuss.domain.service import ThreadService


class DispatchThreadEventRequest(BaseModel):
    """Dispatch thread event request."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    event: ThreadEvent


class DispatchThreadEventResponse(BaseModel):
    """Dispatch thread event response."""

    post_id: str
    changed_thread_ids: list[str]
    z_index_top: int
    has_next: bool
    comment_count: int | None = None  # Only set when a new comment was added


class DispatchThreadEventUseCase(BaseUseCase):
    """Use case for applying a fetched or submitted comment event to a post."""

    def __init__(
        self,
        thread_service: ThreadService,
        thread_repository: ThreadRepository,
        comment_count_repository: CommentCountRepository,
    ) -> None:
        """Initialize dispatch thread event use case.

        Args:
            thread_service: Thread domain service
            thread_repository: Repository holding the comments state
            comment_count_repository: Per-post comment counts
        """
        self.thread_service = thread_service
        self.thread_repository = thread_repository
        self.comment_count_repository = comment_count_repository

    async def execute(
        self, request: DispatchThreadEventRequest
    ) -> DispatchThreadEventResponse:
        """Execute dispatch thread event flow.

        Steps:
        1. Load the current comments state
        2. Apply the event via thread service
        3. Save the new state
        4. Increment the post's comment count if a comment was submitted

        Args:
            request: Request carrying the event

        Returns:
            Summary of the post's thread after the event

        Raises:
            ThreadNotLoadedError: If the event needs a thread that isn't loaded
        """
        event = request.event

        state = await self.thread_repository.load()
        state = self.thread_service.apply(state, event)
        await self.thread_repository.save(state)

        comment_count = None
        if isinstance(event, NewCommentAdded):
            comment_count = await self.comment_count_repository.increment(
                event.post_id
            )

        thread = state.items[event.post_id]
        return DispatchThreadEventResponse(
            post_id=event.post_id,
            changed_thread_ids=sorted(thread.changed_thread_ids),
            z_index_top=thread.z_index_top,
            has_next=thread.next is not None,
            comment_count=comment_count,
        )
