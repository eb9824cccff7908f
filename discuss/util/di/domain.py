"""Domain layer DI providers."""

from dishka import Scope, provide

from discuss.config import ThreadSettings
from discuss.domain.service import CommentTreeService, ThreadService
from discuss.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with the repository lifecycle.
    """

    scope = Scope.REQUEST

    @provide
    def get_comment_tree_service(self) -> CommentTreeService:
        """Provide comment tree domain service."""
        return CommentTreeService()

    @provide
    def get_thread_service(
        self, tree_service: CommentTreeService, thread_settings: ThreadSettings
    ) -> ThreadService:
        """Provide thread domain service."""
        return ThreadService(tree_service=tree_service, thread_settings=thread_settings)
