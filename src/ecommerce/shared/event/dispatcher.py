"""In-process, synchronous event dispatcher.

Handlers are registered under the event's class name and invoked in
registration order whenever an event of that name is notified. There is no
queueing and no retry: when ``notify`` returns every handler has run, and a
failing handler propagates its exception to the caller.
"""

from abc import ABC, abstractmethod
from types import MappingProxyType

import structlog

logger = structlog.get_logger(__name__)


class EventHandler(ABC):
    """Abstract interface for in-process event handlers."""

    @abstractmethod
    def handle(self, event) -> None:
        """React to ``event``."""
        ...


class EventDispatcher:
    """Registry of event handlers keyed by event name."""

    def __init__(self) -> None:
        self._handlers: dict[str, list[EventHandler]] = {}

    @property
    def event_handlers(self) -> MappingProxyType:
        """Read-only view of the current registrations."""
        return MappingProxyType({name: tuple(handlers) for name, handlers in self._handlers.items()})

    def register(self, event_name: str, handler: EventHandler) -> None:
        self._handlers.setdefault(event_name, []).append(handler)
        logger.debug(
            "Event handler registered",
            event_name=event_name,
            handler=type(handler).__name__,
        )

    def unregister(self, event_name: str, handler: EventHandler) -> None:
        handlers = self._handlers.get(event_name)
        if not handlers or handler not in handlers:
            return

        handlers.remove(handler)
        if not handlers:
            del self._handlers[event_name]

        logger.debug(
            "Event handler unregistered",
            event_name=event_name,
            handler=type(handler).__name__,
        )

    def unregister_all(self) -> None:
        self._handlers.clear()

    def notify(self, event) -> None:
        """Invoke every handler registered for ``event``'s class name."""
        event_name = type(event).__name__

        # Copy so a handler may unregister itself mid-notification
        handlers = list(self._handlers.get(event_name, ()))
        logger.debug("Notifying event handlers", event_name=event_name, handler_count=len(handlers))

        for handler in handlers:
            handler.handle(event)


def publish(aggregate, event) -> None:
    """Raise ``event`` on ``aggregate`` and notify the domain dispatcher.

    The raised copy (carrying Protean metadata) is the one handed to the
    in-process handlers, and it stays in ``aggregate._events`` until the
    aggregate is persisted.
    """
    from ecommerce.domain import dispatcher

    aggregate.raise_(event)
    dispatcher.notify(aggregate._events[-1])
