"""Application bootstrap."""

from dishka import AsyncContainer

from discuss.config import Settings
from discuss.util.di.container import create_container
from discuss.util.logging import setup_logging
from discuss.util.observability import configure_logfire


def create_app() -> AsyncContainer:
    """Configure logging and observability, then build the DI container.

    Use cases are resolved from a request scope of the returned container:

        container = create_app()
        async with container() as request_container:
            use_case = await request_container.get(DispatchThreadEventUseCase)

    Settings are loaded from environment automatically.

    Returns:
        Production DI container
    """
    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)
    return create_container()
