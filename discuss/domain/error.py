"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class ThreadNotLoadedError(NotFoundError):
    """Raised when an event needs a post's thread that was never loaded.

    New comments, reply batches and older pages are all merged into an
    existing tree, so applying them before the initial load would silently
    lose the update.
    """

    def __init__(self, post_id: str):
        self.post_id = post_id
        super().__init__("Thread", post_id)
