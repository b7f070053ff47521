"""
Domain event bus adapters.
"""

from .bus import InMemoryEventBus, LoggingEventBus

__all__ = ["InMemoryEventBus", "LoggingEventBus"]
