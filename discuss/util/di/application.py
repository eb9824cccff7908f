"""Application layer DI providers."""

from dishka import Scope, provide

from discuss.application.usecase.thread import (
    DispatchThreadEventUseCase,
    GetThreadUseCase,
)
from discuss.domain.repository import CommentCountRepository, ThreadRepository
from discuss.domain.service import ThreadService
from discuss.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Thread use cases
    @provide(scope=Scope.REQUEST)
    def get_dispatch_thread_event_use_case(
        self,
        thread_service: ThreadService,
        thread_repository: ThreadRepository,
        comment_count_repository: CommentCountRepository,
    ) -> DispatchThreadEventUseCase:
        """Provide dispatch thread event use case."""
        return DispatchThreadEventUseCase(
            thread_service=thread_service,
            thread_repository=thread_repository,
            comment_count_repository=comment_count_repository,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_thread_use_case(
        self, thread_repository: ThreadRepository
    ) -> GetThreadUseCase:
        """Provide get thread use case."""
        return GetThreadUseCase(thread_repository=thread_repository)
