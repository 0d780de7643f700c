from retrocade.events.bus import EventBus


def test_event_bus_emit_subscribe():
    bus = EventBus()
    received = {}

    def handler(sender, **kwargs):
        received.update(kwargs)

    bus.subscribe("test", handler)
    bus.emit("test", value=42, msg="hello")

    assert received["value"] == 42
    assert received["msg"] == "hello"


def test_unsubscribe_stops_delivery():
    bus = EventBus()
    calls = []
    subscription = bus.subscribe("ping", lambda sender, **kw: calls.append(kw))

    bus.emit("ping", n=1)
    bus.unsubscribe(subscription)
    bus.emit("ping", n=2)

    assert calls == [{"n": 1}]
    assert bus.receiver_count("ping") == 0


def test_scoped_bus_close_releases_only_its_receivers():
    bus = EventBus()
    outer = []
    inner = []
    bus.subscribe("tick", lambda sender, **kw: outer.append(kw))
    scoped = bus.scoped()
    scoped.subscribe("tick", lambda sender, **kw: inner.append(kw))
    assert bus.receiver_count("tick") == 2

    scoped.close()
    bus.emit("tick", n=1)
    scoped.emit("tick", n=2)

    assert inner == []
    assert outer == [{"n": 1}]
    assert bus.receiver_count("tick") == 1
