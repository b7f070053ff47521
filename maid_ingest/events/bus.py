"""
Event bus adapters for domain events such as MaidsBulkUploaded.
"""

from collections import defaultdict
from typing import Callable

from maid_ingest.core.models import DomainEvent
from maid_ingest.core.ports import EventBus
from maid_ingest.observability.logger import get_logger

logger = get_logger(__name__)

Handler = Callable[[DomainEvent], None]


class InMemoryEventBus(EventBus):
    """
    Synchronous in-process event bus.

    Keeps every published event in ``published`` and dispatches it to the
    handlers subscribed to its type. A failing handler propagates to the
    publisher.
    """

    def __init__(self):
        self.published: list[DomainEvent] = []
        self._handlers: dict[str, list[Handler]] = defaultdict(list)

    def subscribe(self, event_type: str, handler: Handler) -> None:
        self._handlers[event_type].append(handler)

    def publish(self, event: DomainEvent) -> None:
        self.published.append(event)
        for handler in self._handlers.get(event.type, []):
            handler(event)

    def events_of_type(self, event_type: str) -> list[DomainEvent]:
        return [event for event in self.published if event.type == event_type]


class LoggingEventBus(EventBus):
    """Writes each event to the log; used when no real bus is configured."""

    def publish(self, event: DomainEvent) -> None:
        logger.info(
            f"Domain event: {event.type}",
            extra={"event_type": event.type, "event_data": event.model_dump(mode="json")["data"]},
        )
