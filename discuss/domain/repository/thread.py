"""Thread repository interface."""

from abc import ABC, abstractmethod

from discuss.domain.model import CommentsState


class ThreadRepository(ABC):
    """Repository holding the comments state of every loaded post.

    The state is replaced wholesale on every transition; implementations
    only need to hand back whatever was saved last.
    """

    @abstractmethod
    async def load(self) -> CommentsState:
        """Load the current comments state.

        Returns:
            The last saved state, or an empty state if nothing was saved
        """
        pass

    @abstractmethod
    async def save(self, state: CommentsState) -> CommentsState:
        """Replace the current comments state.

        Args:
            state: The new state

        Returns:
            The saved state
        """
        pass
