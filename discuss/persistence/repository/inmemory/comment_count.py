"""In-memory comment count repository."""

from discuss.domain.repository.comment_count import CommentCountRepository
from discuss.domain.value import PostId


class InMemoryCommentCountRepository(CommentCountRepository):
    """In-memory implementation of CommentCountRepository."""

    def __init__(self) -> None:
        self._counts: dict[PostId, int] = {}

    async def get(self, post_id: PostId) -> int:
        """Get a post's comment count."""
        return self._counts.get(post_id, 0)

    async def set(self, post_id: PostId, count: int) -> None:
        """Set a post's comment count."""
        if count < 0:
            raise ValueError("Comment count must not be negative")
        self._counts[post_id] = count

    async def increment(self, post_id: PostId) -> int:
        """Increment a post's comment count by 1."""
        self._counts[post_id] = self._counts.get(post_id, 0) + 1
        return self._counts[post_id]
