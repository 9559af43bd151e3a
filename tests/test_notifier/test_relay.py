"""Tests for the Redis relay, using an in-memory pub/sub double."""

import asyncio
from typing import AsyncIterator, List

import pytest

from internal.notifier import Hub, LifecycleEvent, RedisRelay


class InMemoryPubSub:
    def __init__(self):
        self.published: List[str] = []
        self.fail = False
        self.fail_listens = 0
        self.listen_calls = 0
        self._queue: "asyncio.Queue[str]" = asyncio.Queue()

    async def publish(self, channel: str, message: str) -> int:
        if self.fail:
            raise ConnectionError("redis down")
        self.published.append(message)
        await self._queue.put(message)
        return 1

    async def listen(self, channel: str) -> AsyncIterator[str]:
        self.listen_calls += 1
        if self.listen_calls <= self.fail_listens:
            raise ConnectionError("connection reset")
        while True:
            yield await self._queue.get()

    async def inject(self, message: str) -> None:
        await self._queue.put(message)


async def _next(sub, timeout=1.0):
    return await asyncio.wait_for(sub.get(), timeout)


async def _wait_for(condition, timeout=1.0):
    async def poll():
        while not condition():
            await asyncio.sleep(0.005)

    await asyncio.wait_for(poll(), timeout)


class TestRedisRelay:
    @pytest.mark.asyncio
    async def test_published_event_reaches_local_subscribers_through_redis(self, logger):
        hub, pubsub = Hub(), InMemoryPubSub()
        relay = RedisRelay(hub, pubsub, logger=logger)
        sub = hub.subscribe()
        relay.start()

        relay.publish(LifecycleEvent.deleted("p1"))

        assert (await _next(sub)).post == "p1"
        assert len(pubsub.published) == 1
        assert sub.queue.empty()
        await relay.close()

    @pytest.mark.asyncio
    async def test_events_from_other_workers_are_delivered(self, logger):
        hub, pubsub = Hub(), InMemoryPubSub()
        relay = RedisRelay(hub, pubsub, logger=logger)
        sub = hub.subscribe()
        relay.start()

        await pubsub.inject("not an event")
        await pubsub.inject(LifecycleEvent.updated({"_id": "p9"}).to_json())

        assert (await _next(sub)).post == {"_id": "p9"}
        await relay.close()

    @pytest.mark.asyncio
    async def test_redis_failure_falls_back_to_local_delivery(self, logger):
        hub, pubsub = Hub(), InMemoryPubSub()
        pubsub.fail = True
        relay = RedisRelay(hub, pubsub, logger=logger)
        sub = hub.subscribe()

        relay.publish(LifecycleEvent.deleted("p1"))
        await relay.close()

        assert (await _next(sub)).post == "p1"

    @pytest.mark.asyncio
    async def test_listener_resubscribes_after_connection_loss(self, logger):
        hub, pubsub = Hub(), InMemoryPubSub()
        pubsub.fail_listens = 1
        relay = RedisRelay(hub, pubsub, logger=logger, reconnect_delay=0.01)
        sub = hub.subscribe()
        relay.start()

        await _wait_for(lambda: pubsub.listen_calls >= 2)
        relay.publish(LifecycleEvent.deleted("p1"))

        assert (await _next(sub)).post == "p1"
        assert len(pubsub.published) == 1
        assert sub.queue.empty()
        await relay.close()

    @pytest.mark.asyncio
    async def test_events_are_delivered_locally_while_listener_is_down(self, logger):
        hub, pubsub = Hub(), InMemoryPubSub()
        pubsub.fail_listens = 100
        relay = RedisRelay(hub, pubsub, logger=logger, reconnect_delay=10)
        sub = hub.subscribe()
        relay.start()

        await _wait_for(lambda: pubsub.listen_calls >= 1 and not relay.is_listening)
        relay.publish(LifecycleEvent.deleted("p1"))

        assert (await _next(sub)).post == "p1"
        await relay.close()
        assert len(pubsub.published) == 1
        assert sub.queue.empty()
