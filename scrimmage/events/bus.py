"""Synchronous pub/sub for simulation events."""

from collections import defaultdict
from typing import Callable, Optional, TypeVar

from scrimmage.events.types import SimulationEvent

T = TypeVar("T", bound=SimulationEvent)
EventHandler = Callable[[SimulationEvent], None]


class EventBus:
    """
    Decouples the drive loop from logging and statistics.

    A handler subscribed to an event class also receives its subclasses,
    most specific class first. Handlers registered with ``subscribe_all``
    run last, in subscription order.

    Example:
        bus = EventBus()
        bus.subscribe(ScoringEvent, lambda e: print(e.points))
        engine = SimulationEngine(event_bus=bus)
    """

    def __init__(self) -> None:
        self._handlers: dict[type, list[EventHandler]] = defaultdict(list)
        self._global_handlers: list[EventHandler] = []

    def subscribe(self, event_type: type[T], handler: Callable[[T], None]) -> None:
        """Register a handler for an event class and its subclasses."""
        self._handlers[event_type].append(handler)

    def subscribe_all(self, handler: EventHandler) -> None:
        self._global_handlers.append(handler)

    def unsubscribe(self, event_type: type[T], handler: Callable[[T], None]) -> None:
        handlers = self._handlers.get(event_type, [])
        if handler in handlers:
            handlers.remove(handler)

    def unsubscribe_all(self, handler: EventHandler) -> None:
        if handler in self._global_handlers:
            self._global_handlers.remove(handler)

    def emit(self, event: SimulationEvent) -> None:
        """Deliver ``event`` to every matching handler before returning."""
        for event_class in type(event).__mro__:
            for handler in list(self._handlers.get(event_class, ())):
                handler(event)

        for handler in list(self._global_handlers):
            handler(event)

    def clear(self) -> None:
        self._handlers.clear()
        self._global_handlers.clear()

    def handler_count(self, event_type: Optional[type] = None) -> int:
        """
        Number of registered handlers.

        Args:
            event_type: Count only handlers registered for exactly this
                class; None counts every handler, global ones included
        """
        if event_type is None:
            total = sum(len(handlers) for handlers in self._handlers.values())
            return total + len(self._global_handlers)
        return len(self._handlers.get(event_type, ()))
