"""Tests for SignalBus and the flush system."""
from blade.engine import Engine
from blade.signals import SignalBus, make_signal_system


class TestSignalBus:
    def test_publish_is_deferred_until_flush(self):
        bus = SignalBus()
        received = []
        bus.subscribe("sliced", lambda name, data: received.append(data))
        bus.publish("sliced", points=3)
        assert received == []
        assert bus.pending == 1
        bus.flush()
        assert received == [{"points": 3}]
        assert bus.pending == 0

    def test_unsubscribe(self):
        bus = SignalBus()
        received = []

        def handler(name, data):
            received.append(name)

        bus.subscribe("bomb", handler)
        bus.unsubscribe("bomb", handler)
        bus.unsubscribe("bomb", handler)
        bus.unsubscribe("never", handler)
        bus.publish("bomb")
        bus.flush()
        assert received == []

    def test_publish_during_flush_goes_to_next_flush(self):
        bus = SignalBus()
        received = []
        bus.subscribe("combo", lambda n, d: bus.publish("echo"))
        bus.subscribe("echo", lambda n, d: received.append(n))
        bus.publish("combo")
        bus.flush()
        assert received == []
        bus.flush()
        assert received == ["echo"]

    def test_clear(self):
        bus = SignalBus()
        bus.publish("miss")
        bus.clear()
        assert bus.pending == 0


def test_signal_system_flushes_each_frame():
    engine = Engine(seed=1)
    bus = SignalBus()
    received = []
    bus.subscribe("speed_up", lambda n, d: received.append(d["frame"]))
    engine.add_system(lambda w, ctx: bus.publish("speed_up", frame=ctx.frame))
    engine.add_system(make_signal_system(bus))
    engine.run(3)
    assert received == [1, 2, 3]
