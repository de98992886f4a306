"""Application layer - use cases and orchestration."""

from .commands import QuoteCommand
from .dtos import QuoteOutput
from .factory import ServiceFactory, get_factory

__all__ = [
    "QuoteCommand",
    "QuoteOutput",
    "ServiceFactory",
    "get_factory",
]
