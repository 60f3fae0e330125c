from admin_gui.bootstrap import create_app
from admin_gui.services.event_bus import AdminEvent, EventBus


def test_event_bus_service_registration():
    ctx = create_app(headless=True)
    bus = ctx.services.get("event_bus")
    assert isinstance(bus, EventBus)


def test_subscribe_publish_basic():
    bus = EventBus()
    received = []

    def handler(evt):
        received.append((evt.name, evt.payload))

    bus.subscribe(AdminEvent.PAGE_CHANGED, handler)
    bus.publish(AdminEvent.PAGE_CHANGED, {"page": 2})
    bus.publish("page_changed", {"page": 3})
    assert received == [("page_changed", {"page": 2}), ("page_changed", {"page": 3})]


def test_once_subscription():
    bus = EventBus()
    count = 0

    def incr(_):
        nonlocal count
        count += 1

    bus.subscribe(AdminEvent.SORT_CHANGED, incr, once=True)
    bus.publish(AdminEvent.SORT_CHANGED)
    bus.publish(AdminEvent.SORT_CHANGED)
    assert count == 1
    assert bus.subscriber_count(AdminEvent.SORT_CHANGED) == 0


def test_unsubscribe_and_cancel():
    bus = EventBus()
    seen = []
    sub = bus.subscribe("custom", seen.append)
    cancelled = bus.subscribe("custom", seen.append)
    cancelled.cancel()
    bus.publish("custom", 1)
    assert len(seen) == 1
    bus.unsubscribe(sub)
    bus.publish("custom", 2)
    assert len(seen) == 1


def test_handler_error_isolated():
    bus = EventBus()
    seen = []

    def bad(_):
        raise ValueError("boom")

    bus.subscribe(AdminEvent.DATASET_CHANGED, bad)
    bus.subscribe(AdminEvent.DATASET_CHANGED, seen.append)
    bus.publish(AdminEvent.DATASET_CHANGED, {"count": 3})
    assert len(seen) == 1
    assert len(bus.errors) == 1
    assert isinstance(bus.errors[0][1], ValueError)


def test_tracing_summaries():
    bus = EventBus()
    bus.enable_tracing()
    bus.publish(AdminEvent.SEARCH_COMMITTED, {"term": "x" * 100})
    bus.publish(AdminEvent.PAGE_CHANGED)
    traces = bus.recent_traces()
    assert [t[0] for t in traces] == ["search_committed", "page_changed"]
    assert traces[0][2].endswith("...")
    assert traces[1][2] == "-"
