"""Tests for the in-process notifier hub and the event envelope."""

import json

import pytest

from internal.notifier import Action, Hub, HubConfig, LifecycleEvent


class TestLifecycleEvent:
    def test_envelope(self):
        event = LifecycleEvent.created({"_id": "p1", "creator": {"_id": "u1", "name": "Alice"}})

        assert event.to_dict() == {
            "channel": "posts",
            "action": "create",
            "post": {"_id": "p1", "creator": {"_id": "u1", "name": "Alice"}},
        }

    def test_delete_carries_only_the_id(self):
        assert LifecycleEvent.deleted("p1").to_dict()["post"] == "p1"

    def test_json_round_trip(self):
        event = LifecycleEvent.updated({"_id": "p1"})

        assert LifecycleEvent.from_json(event.to_json()) == event

    @pytest.mark.parametrize(
        "raw",
        ['"just a string"', '{"action": "explode", "post": "p1"}', '{"action": "create"}', "not json"],
    )
    def test_from_json_rejects_foreign_messages(self, raw):
        with pytest.raises(ValueError):
            LifecycleEvent.from_json(raw)


class TestHub:
    @pytest.mark.asyncio
    async def test_every_subscriber_receives_the_event(self):
        hub = Hub()
        first, second = hub.subscribe(), hub.subscribe()

        hub.publish(LifecycleEvent.deleted("p1"))

        assert (await first.get()).post == "p1"
        assert (await second.get()).post == "p1"

    @pytest.mark.asyncio
    async def test_publish_without_subscribers_is_a_no_op(self):
        Hub().publish(LifecycleEvent.deleted("p1"))

    @pytest.mark.asyncio
    async def test_unsubscribed_observer_gets_nothing(self):
        hub = Hub()
        sub = hub.subscribe()
        hub.unsubscribe(sub)

        hub.publish(LifecycleEvent.deleted("p1"))

        assert sub.queue.empty()
        assert hub.subscriber_count == 0

    @pytest.mark.asyncio
    async def test_full_subscriber_drops_without_affecting_others(self, logger):
        hub = Hub(HubConfig(queue_size=1), logger=logger)
        slow, fast = hub.subscribe(), hub.subscribe()

        hub.publish(LifecycleEvent.deleted("p1"))
        await fast.get()
        hub.publish(LifecycleEvent.deleted("p2"))

        assert slow.queue.qsize() == 1
        assert (await slow.get()).post == "p1"
        assert (await fast.get()).post == "p2"

    def test_queue_size_must_be_positive(self):
        with pytest.raises(ValueError):
            HubConfig(queue_size=0)

    def test_action_values(self):
        assert [a.value for a in Action] == ["create", "update", "delete"]

    def test_json_is_plain(self):
        assert json.loads(LifecycleEvent.deleted("p1").to_json())["action"] == "delete"
