"""Infrastructure layer - Adapters and implementations."""

from miqat.infrastructure.cache import InMemoryTTLCache

__all__ = ["InMemoryTTLCache"]
