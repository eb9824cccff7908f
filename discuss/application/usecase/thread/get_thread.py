"""Get thread use case."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel

from discuss.application.usecase.base import BaseUseCase
from discuss.domain.error import ThreadNotLoadedError
from discuss.domain.model import Node
from discuss.domain.repository import ThreadRepository
from discuss.domain.value import PostId


class ThreadNodeResponse(BaseModel):
    """Comment tree node for response.

    Recursive structure mirroring the domain Node, minus the parent
    back-reference.
    """

    comment_id: str
    parent_id: str | None
    comment: dict[str, Any]
    no_replies_rendered: int
    collapsed: bool
    children: list["ThreadNodeResponse"]

    @classmethod
    def from_domain(cls, node: Node) -> "ThreadNodeResponse":
        """Convert domain Node to response model.

        Args:
            node: Non-root domain node

        Returns:
            Response model with children recursively converted
        """
        return cls(
            comment_id=node.comment.id,
            parent_id=node.parent.id if node.parent is not None else None,
            comment=node.comment.model_dump(mode="json"),
            no_replies_rendered=node.no_replies_rendered,
            collapsed=node.collapsed,
            children=[cls.from_domain(child) for child in node.children],
        )


class GetThreadRequest(BaseModel):
    """Get thread request."""

    post_id: str


class GetThreadResponse(BaseModel):
    """Get thread response."""

    post_id: str
    comments: list[ThreadNodeResponse]
    next: str | None
    z_index_top: int
    fetched_at: datetime
    last_fetched_at: datetime
    total: int


class GetThreadUseCase(BaseUseCase):
    """Use case for reading a post's comment tree."""

    def __init__(self, thread_repository: ThreadRepository) -> None:
        """Initialize get thread use case.

        Args:
            thread_repository: Repository holding the comments state
        """
        self.thread_repository = thread_repository

    async def execute(self, request: GetThreadRequest) -> GetThreadResponse:
        """Execute get thread flow.

        Args:
            request: Get thread request with post ID

        Returns:
            The post's top-level threads with replies nested

        Raises:
            ThreadNotLoadedError: If the post's comments were never loaded
        """
        state = await self.thread_repository.load()
        thread = state.get(PostId(request.post_id))
        if thread is None:
            raise ThreadNotLoadedError(request.post_id)

        root = thread.comments
        return GetThreadResponse(
            post_id=request.post_id,
            comments=[ThreadNodeResponse.from_domain(child) for child in root.children],
            next=str(thread.next) if thread.next is not None else None,
            z_index_top=thread.z_index_top,
            fetched_at=thread.fetched_at,
            last_fetched_at=thread.last_fetched_at,
            total=sum(1 for _ in root.iter_descendants()),
        )
