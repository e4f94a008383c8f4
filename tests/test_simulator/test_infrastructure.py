"""
Request channel and interruptible clock
"""

import threading
import time

import pytest

from simulator.infrastructure.message_broker import MessageBroker
from simulator.infrastructure.realtime_env import RealtimeClock


class TestMessageBroker:
    def test_fifo_per_topic(self):
        broker = MessageBroker()
        broker.put("a", 1)
        broker.put("a", 2)
        broker.put("b", 3)
        assert broker.get("a", timeout=0) == 1
        assert broker.get("a", timeout=0) == 2
        assert broker.get("b", timeout=0) == 3

    def test_get_times_out_with_none(self):
        broker = MessageBroker()
        started = time.monotonic()
        assert broker.get("a", timeout=0.05) is None
        assert time.monotonic() - started >= 0.04

    def test_interrupt_wakes_blocked_consumer(self):
        broker = MessageBroker()
        results = []
        consumer = threading.Thread(target=lambda: results.append(broker.get("a", timeout=5)))
        consumer.start()
        time.sleep(0.05)
        broker.interrupt("a")
        consumer.join(timeout=1)
        assert not consumer.is_alive()
        assert results == [None]

    def test_wake_up_markers_are_not_messages(self):
        broker = MessageBroker()
        broker.interrupt("a")
        assert broker.is_empty("a")
        assert broker.pending("a") == 0
        broker.put("a", 4)
        assert not broker.is_empty("a")
        assert broker.pending("a") == 1

    def test_clear(self):
        broker = MessageBroker()
        broker.put("a", 1)
        broker.clear("a")
        assert broker.is_empty("a")


class TestRealtimeClock:
    def test_invalid_speed(self):
        with pytest.raises(ValueError):
            RealtimeClock(speed_factor=0)
        clock = RealtimeClock()
        with pytest.raises(ValueError):
            clock.set_speed(-1)

    def test_sleep_runs_out(self):
        clock = RealtimeClock(speed_factor=10.0)
        started = time.monotonic()
        assert clock.sleep(0.2) is False
        assert time.monotonic() - started < 0.2

    def test_interrupt_cuts_sleep_short(self):
        clock = RealtimeClock()
        results = []
        sleeper = threading.Thread(target=lambda: results.append(clock.sleep(5)))
        sleeper.start()
        time.sleep(0.05)
        clock.interrupt()
        sleeper.join(timeout=1)
        assert results == [True]
        assert clock.is_interrupted()

    def test_reset_rearms(self):
        clock = RealtimeClock(speed_factor=100.0)
        clock.interrupt()
        assert clock.sleep(1) is True
        clock.reset()
        assert not clock.is_interrupted()
        assert clock.sleep(0.1) is False
