"""Tests for IntentQueue."""
from __future__ import annotations

from dataclasses import dataclass

import pytest
from survival_craft import Actor, IntentQueue


@dataclass(frozen=True)
class Wave:
    times: int


@dataclass(frozen=True)
class Sit:
    pass


@pytest.fixture
def queue() -> IntentQueue:
    return IntentQueue()


@pytest.fixture
def actor() -> Actor:
    return Actor.create("tester")


class TestQueueBasics:
    def test_empty_queue(self, queue: IntentQueue) -> None:
        assert queue.pending() == 0

    def test_enqueue_increments_pending(self, queue: IntentQueue) -> None:
        queue.enqueue(Wave(1))
        queue.enqueue(Sit())
        assert queue.pending() == 2

    def test_process_next_on_empty(self, queue: IntentQueue, actor: Actor) -> None:
        assert queue.process_next(actor) is None


class TestDispatch:
    def test_fifo_order(self, queue: IntentQueue, actor: Actor) -> None:
        seen: list[int] = []

        def on_wave(intent: Wave, who: Actor) -> bool:
            seen.append(intent.times)
            return True

        queue.handle(Wave, on_wave)
        for n in (3, 1, 2):
            queue.enqueue(Wave(n))
        results = queue.drain(actor)
        assert seen == [3, 1, 2]
        assert results == [(Wave(3), True), (Wave(1), True), (Wave(2), True)]
        assert queue.pending() == 0

    def test_handler_receives_actor(self, queue: IntentQueue, actor: Actor) -> None:
        received: list[Actor] = []

        def on_sit(intent: Sit, who: Actor) -> bool:
            received.append(who)
            return False

        queue.handle(Sit, on_sit)
        queue.enqueue(Sit())
        assert queue.drain(actor) == [(Sit(), False)]
        assert received == [actor]

    def test_later_handler_overwrites(self, queue: IntentQueue, actor: Actor) -> None:
        queue.handle(Sit, lambda intent, who: True)
        queue.handle(Sit, lambda intent, who: False)
        queue.enqueue(Sit())
        assert queue.drain(actor) == [(Sit(), False)]

    def test_unregistered_type_raises(self, queue: IntentQueue, actor: Actor) -> None:
        queue.enqueue(Wave(1))
        with pytest.raises(TypeError, match="No handler registered for Wave"):
            queue.drain(actor)

    def test_drain_reports_each_result_before_next(
        self, queue: IntentQueue, actor: Actor
    ) -> None:
        log: list[str] = []

        def on_wave(intent: Wave, who: Actor) -> bool:
            log.append(f"handle {intent.times}")
            return intent.times > 1

        queue.handle(Wave, on_wave)
        queue.enqueue(Wave(1))
        queue.enqueue(Wave(2))
        results = queue.drain(
            actor, on_result=lambda intent, accepted: log.append(f"result {intent.times} {accepted}")
        )
        assert log == ["handle 1", "result 1 False", "handle 2", "result 2 True"]
        assert results == [(Wave(1), False), (Wave(2), True)]
