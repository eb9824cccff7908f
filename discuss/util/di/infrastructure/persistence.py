"""Persistence infrastructure providers."""

from dishka import Scope, provide

from discuss.domain.repository import CommentCountRepository, ThreadRepository
from discuss.persistence.repository.inmemory import (
    InMemoryCommentCountRepository,
    InMemoryThreadRepository,
)
from discuss.util.di.base import ProviderBase


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider.

    Thread state lives for the lifetime of the process, so repositories
    are APP-scoped and shared by every request.
    """

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_thread_repository(self) -> ThreadRepository:
        """Provide thread repository."""
        return InMemoryThreadRepository()

    @provide(scope=Scope.APP)
    def get_comment_count_repository(self) -> CommentCountRepository:
        """Provide comment count repository."""
        return InMemoryCommentCountRepository()
