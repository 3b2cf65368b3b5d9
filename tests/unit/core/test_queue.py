"""Unit tests for DeliveryQueue."""
from __future__ import annotations

import threading
from datetime import UTC, datetime

from mp_logging.core import DeliveryQueue, LogEntry, Logger, Severity, SourceLocation
from mp_logging.testing import isolated_state


def _entry(message: str) -> LogEntry:
    return LogEntry(
        category="q",
        timestamp=datetime(2026, 1, 1, tzinfo=UTC),
        severity=Severity.DEBUG,
        message=message,
        source=SourceLocation.unknown(),
    )


class TestDeliveryQueue:
    def test_starts_empty(self) -> None:
        queue = DeliveryQueue()
        assert len(queue) == 0
        assert not queue
        assert queue.drain() == []

    def test_drain_preserves_order_and_senders(self) -> None:
        queue = DeliveryQueue()
        state = isolated_state()
        first, second = Logger("one", state=state), Logger("two", state=state)
        queue.append(first, _entry("a"))
        queue.append(second, _entry("b"))
        queue.append(first, _entry("c"))
        batch = queue.drain()
        assert [(logger.category, entry.message) for logger, entry in batch] == [
            ("one", "a"),
            ("two", "b"),
            ("one", "c"),
        ]

    def test_drain_clears(self) -> None:
        queue = DeliveryQueue()
        queue.append(Logger("x", state=isolated_state()), _entry("a"))
        queue.drain()
        assert len(queue) == 0
        assert queue.drain() == []

    def test_requeue_goes_ahead_of_newer_items(self) -> None:
        queue = DeliveryQueue()
        logger = Logger("x", state=isolated_state())
        queue.append(logger, _entry("c"))
        queue.requeue([(logger, _entry("a")), (logger, _entry("b"))])
        queue.requeue([])
        assert [entry.message for _, entry in queue.drain()] == ["a", "b", "c"]

    def test_concurrent_appends_and_drains_lose_nothing(self) -> None:
        queue = DeliveryQueue()
        logger = Logger("x", state=isolated_state())
        writers, per_writer = 4, 500
        drained: list[str] = []
        done = threading.Event()

        def write(worker: int) -> None:
            for i in range(per_writer):
                queue.append(logger, _entry(f"{worker}:{i}"))

        def drain() -> None:
            while not done.is_set():
                drained.extend(entry.message for _, entry in queue.drain())

        drainer = threading.Thread(target=drain)
        drainer.start()
        threads = [threading.Thread(target=write, args=(w,)) for w in range(writers)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        done.set()
        drainer.join()
        drained.extend(entry.message for _, entry in queue.drain())

        assert len(drained) == writers * per_writer
        assert len(set(drained)) == writers * per_writer
        for w in range(writers):
            mine = [int(m.split(":")[1]) for m in drained if m.startswith(f"{w}:")]
            assert mine == sorted(mine)
