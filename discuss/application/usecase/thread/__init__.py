"""Thread use cases."""

from .dispatch_event import (
    DispatchThreadEventRequest,
    DispatchThreadEventResponse,
    DispatchThreadEventUseCase,
)
from .get_thread import (
    GetThreadRequest,
    GetThreadResponse,
    GetThreadUseCase,
    ThreadNodeResponse,
)

__all__ = [
    "DispatchThreadEventRequest",
    "DispatchThreadEventResponse",
    "DispatchThreadEventUseCase",
    "GetThreadRequest",
    "GetThreadResponse",
    "GetThreadUseCase",
    "ThreadNodeResponse",
]
