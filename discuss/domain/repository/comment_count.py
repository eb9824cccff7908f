"""Comment count repository interface."""

from abc import ABC, abstractmethod

from discuss.domain.value import PostId


class CommentCountRepository(ABC):
    """Repository for per-post total comment counts.

    Counts live outside the comment tree: a post's total includes
    comments that have not been fetched yet.
    """

    @abstractmethod
    async def get(self, post_id: PostId) -> int:
        """Get a post's comment count.

        Args:
            post_id: The post ID

        Returns:
            Number of comments (0 for unknown posts)
        """
        pass

    @abstractmethod
    async def set(self, post_id: PostId, count: int) -> None:
        """Set a post's comment count, e.g. from a fetched post.

        Args:
            post_id: The post ID
            count: Total number of comments
        """
        pass

    @abstractmethod
    async def increment(self, post_id: PostId) -> int:
        """Increment a post's comment count by 1.

        Args:
            post_id: The post ID

        Returns:
            The new count
        """
        pass
