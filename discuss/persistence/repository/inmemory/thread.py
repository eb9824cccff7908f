"""In-memory thread repository."""

from discuss.domain.model import CommentsState
from discuss.domain.repository.thread import ThreadRepository


class InMemoryThreadRepository(ThreadRepository):
    """In-memory implementation of ThreadRepository."""

    def __init__(self) -> None:
        self._state = CommentsState()

    async def load(self) -> CommentsState:
        """Load the current comments state."""
        return self._state

    async def save(self, state: CommentsState) -> CommentsState:
        """Replace the current comments state."""
        self._state = state
        return state
