"""Tests for the event bus."""

from scrimmage.events import EventBus, PlayCompletedEvent, ScoringEvent
from scrimmage.events.types import SimulationEvent


class TestEventBus:
    """Tests for EventBus."""

    def test_typed_handler_receives_only_its_type(self):
        bus = EventBus()
        received = []
        bus.subscribe(ScoringEvent, received.append)

        bus.emit(PlayCompletedEvent())
        bus.emit(ScoringEvent(points=7))

        assert len(received) == 1
        assert received[0].points == 7

    def test_typed_handlers_run_before_global(self):
        bus = EventBus()
        order = []
        bus.subscribe_all(lambda e: order.append("global"))
        bus.subscribe(ScoringEvent, lambda e: order.append("typed"))

        bus.emit(ScoringEvent())

        assert order == ["typed", "global"]

    def test_unsubscribe(self):
        bus = EventBus()
        received = []
        bus.subscribe(ScoringEvent, received.append)
        bus.subscribe_all(received.append)
        bus.unsubscribe(ScoringEvent, received.append)
        bus.unsubscribe_all(received.append)

        bus.emit(ScoringEvent())

        assert received == []

    def test_unsubscribe_unknown_handler_is_noop(self):
        bus = EventBus()
        bus.unsubscribe(ScoringEvent, print)
        assert bus.handler_count() == 0

    def test_handler_count_and_clear(self):
        bus = EventBus()
        bus.subscribe(ScoringEvent, print)
        bus.subscribe(PlayCompletedEvent, print)
        bus.subscribe_all(print)

        assert bus.handler_count(ScoringEvent) == 1
        assert bus.handler_count() == 3

        bus.clear()
        assert bus.handler_count() == 0

    def test_base_class_handler_receives_subclasses(self):
        bus = EventBus()
        order = []
        bus.subscribe(SimulationEvent, lambda e: order.append("base"))
        bus.subscribe(ScoringEvent, lambda e: order.append("scoring"))

        bus.emit(ScoringEvent())
        bus.emit(PlayCompletedEvent())

        assert order == ["scoring", "base", "base"]

    def test_handler_may_unsubscribe_while_handling(self):
        bus = EventBus()
        received = []

        def once(event):
            received.append(event)
            bus.unsubscribe(ScoringEvent, once)

        bus.subscribe(ScoringEvent, once)
        bus.emit(ScoringEvent())
        bus.emit(ScoringEvent())

        assert len(received) == 1
