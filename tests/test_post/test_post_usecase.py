"""Unit tests for the post lifecycle use case, run against in-memory stores."""

import asyncio
import uuid

import pytest

from core.errors import ErrInternal, ErrNotFound, ErrUnauthenticated, ErrValidationFailed
from internal.notifier.type import Action
from internal.post import (
    CreatePostInput,
    ErrNotPostOwner,
    ErrPostNotFound,
    ListPostsInput,
    UpdatePostInput,
)
from internal.user.errors import ErrUserNotFound


def _create_input(title="First post", content="Some content", image_url="images/a.png"):
    return CreatePostInput(title=title, content=content, image_url=image_url)


async def _create(usecase, auth, **kwargs):
    return await usecase.create(auth, _create_input(**kwargs))


class TestCreate:
    @pytest.mark.asyncio
    async def test_create_then_get_round_trips(self, post_usecase, alice, as_user):
        created = await _create(post_usecase, as_user(alice))

        fetched = await post_usecase.get(as_user(alice), created.id)

        assert fetched.title == "First post"
        assert fetched.content == "Some content"
        assert fetched.image_url == "images/a.png"
        assert fetched.creator.id == str(alice.id)

    @pytest.mark.asyncio
    async def test_create_adds_post_to_owned_set(self, post_usecase, user_repo, alice, as_user):
        created = await _create(post_usecase, as_user(alice))

        assert user_repo.owned[alice.id] == {uuid.UUID(created.id)}

    @pytest.mark.asyncio
    async def test_created_event_inlines_creator_name(self, post_usecase, notifier, alice, as_user):
        created = await _create(post_usecase, as_user(alice))

        assert len(notifier.events) == 1
        event = notifier.events[0]
        assert event.action == Action.CREATE
        assert event.post["_id"] == created.id
        assert event.post["creator"] == {"_id": str(alice.id), "name": "Alice"}

    @pytest.mark.asyncio
    async def test_short_title_fails_validation(self, post_usecase, post_repo, alice, as_user):
        with pytest.raises(ErrValidationFailed) as exc_info:
            await _create(post_usecase, as_user(alice), title="abc")

        fields = [e["field"] for e in exc_info.value.data]
        assert fields == ["title"]
        assert post_repo.calls == []

    @pytest.mark.asyncio
    async def test_all_violations_are_reported(self, post_usecase, alice, as_user):
        with pytest.raises(ErrValidationFailed) as exc_info:
            await _create(post_usecase, as_user(alice), title="abc", content="", image_url=None)

        fields = {e["field"] for e in exc_info.value.data}
        assert fields == {"title", "content", "image"}

    @pytest.mark.asyncio
    async def test_missing_image_reports_no_file_picked(self, post_usecase, alice, as_user):
        with pytest.raises(ErrValidationFailed) as exc_info:
            await _create(post_usecase, as_user(alice), image_url="  ")

        assert exc_info.value.data == [{"field": "image", "message": "No file picked."}]

    @pytest.mark.asyncio
    async def test_fields_are_stored_trimmed(self, post_usecase, post_repo, alice, as_user):
        created = await _create(
            post_usecase, as_user(alice), title="  abcd  ", content=" body text ", image_url=" images/a.png "
        )

        stored = post_repo.posts[uuid.UUID(created.id)]
        assert (stored.title, stored.content, stored.image_url) == ("abcd", "body text", "images/a.png")
        assert created.title == "abcd"

    @pytest.mark.asyncio
    async def test_deleted_account_is_not_found(self, post_usecase, user_repo, post_repo, as_user):
        ghost = user_repo.add_user("Ghost")
        del user_repo.users[ghost.id]

        with pytest.raises(ErrUserNotFound):
            await _create(post_usecase, as_user(ghost))
        assert post_repo.calls == []

    @pytest.mark.asyncio
    async def test_owned_set_failure_is_internal(self, post_usecase, user_repo, notifier, alice, as_user):
        user_repo.fail_add_post = True

        with pytest.raises(ErrInternal):
            await _create(post_usecase, as_user(alice))
        assert notifier.events == []

    @pytest.mark.asyncio
    async def test_store_failure_is_internal(self, post_usecase, post_repo, user_repo, alice, as_user):
        post_repo.fail_create = True

        with pytest.raises(ErrInternal):
            await _create(post_usecase, as_user(alice))
        assert "add_post" not in user_repo.calls


class TestAnonymous:
    @pytest.mark.asyncio
    async def test_every_operation_rejects_anonymous(
        self, post_usecase, post_repo, user_repo, blob_store, anonymous
    ):
        post_id = str(uuid.uuid4())
        operations = [
            post_usecase.list(anonymous, ListPostsInput(page=1)),
            post_usecase.get(anonymous, post_id),
            post_usecase.create(anonymous, _create_input()),
            post_usecase.update(anonymous, post_id, UpdatePostInput(title="Title", content="Body")),
            post_usecase.delete(anonymous, post_id),
        ]

        for operation in operations:
            with pytest.raises(ErrUnauthenticated):
                await operation

        assert post_repo.calls == []
        assert user_repo.calls == []
        assert blob_store.removed == []


class TestGet:
    @pytest.mark.asyncio
    async def test_unknown_id_is_not_found(self, post_usecase, alice, as_user):
        with pytest.raises(ErrPostNotFound):
            await post_usecase.get(as_user(alice), str(uuid.uuid4()))

    @pytest.mark.asyncio
    async def test_malformed_id_is_not_found(self, post_usecase, post_repo, alice, as_user):
        with pytest.raises(ErrNotFound):
            await post_usecase.get(as_user(alice), "not-a-uuid")
        assert post_repo.calls == []


class TestList:
    @pytest.mark.asyncio
    async def test_second_page_of_five(self, post_usecase, alice, as_user):
        created = []
        for i in range(1, 6):
            created.append(await _create(post_usecase, as_user(alice), title=f"Post {i}"))

        result = await post_usecase.list(as_user(alice), ListPostsInput(page=2))

        assert [p.title for p in result.posts] == ["Post 3", "Post 2"]
        assert result.total_posts == 5

    @pytest.mark.asyncio
    @pytest.mark.parametrize("page", [None, 0, -3])
    async def test_missing_or_low_page_means_first(self, post_usecase, alice, as_user, page):
        for i in range(1, 4):
            await _create(post_usecase, as_user(alice), title=f"Post {i}")

        result = await post_usecase.list(as_user(alice), ListPostsInput(page=page))

        assert [p.title for p in result.posts] == ["Post 3", "Post 2"]

    @pytest.mark.asyncio
    async def test_page_past_the_end_is_empty(self, post_usecase, alice, as_user):
        await _create(post_usecase, as_user(alice))

        result = await post_usecase.list(as_user(alice), ListPostsInput(page=5))

        assert result.posts == []
        assert result.total_posts == 1


class TestUpdate:
    @pytest.mark.asyncio
    async def test_non_owner_is_forbidden_even_with_invalid_input(self, post_usecase, alice, bob, as_user):
        created = await _create(post_usecase, as_user(alice))

        with pytest.raises(ErrNotPostOwner):
            await post_usecase.update(as_user(bob), created.id, UpdatePostInput(title="", content=""))

    @pytest.mark.asyncio
    async def test_no_image_keeps_stored_image(self, post_usecase, blob_store, alice, as_user):
        created = await _create(post_usecase, as_user(alice))

        updated = await post_usecase.update(
            as_user(alice), created.id, UpdatePostInput(title="New title", content="New content")
        )
        await post_usecase.close()

        assert updated.image_url == "images/a.png"
        assert updated.title == "New title"
        assert blob_store.removed == []

    @pytest.mark.asyncio
    async def test_update_stores_trimmed_fields(self, post_usecase, post_repo, alice, as_user):
        created = await _create(post_usecase, as_user(alice))

        updated = await post_usecase.update(
            as_user(alice), created.id, UpdatePostInput(title="  New title ", content="\tNew content\n")
        )

        stored = post_repo.posts[uuid.UUID(created.id)]
        assert (stored.title, stored.content) == ("New title", "New content")
        assert updated.title == "New title"

    @pytest.mark.asyncio
    async def test_new_image_removes_old_one_after_save(self, post_usecase, blob_store, notifier, alice, as_user):
        created = await _create(post_usecase, as_user(alice))

        updated = await post_usecase.update(
            as_user(alice),
            created.id,
            UpdatePostInput(title="New title", content="New content", image_url="images/b.png"),
        )
        await post_usecase.close()

        assert updated.image_url == "images/b.png"
        assert blob_store.removed == ["images/a.png"]
        assert notifier.events[-1].action == Action.UPDATE
        assert notifier.events[-1].post["imageUrl"] == "images/b.png"

    @pytest.mark.asyncio
    async def test_same_image_is_not_removed(self, post_usecase, blob_store, alice, as_user):
        created = await _create(post_usecase, as_user(alice))

        await post_usecase.update(
            as_user(alice),
            created.id,
            UpdatePostInput(title="New title", content="New content", image_url="images/a.png"),
        )
        await post_usecase.close()

        assert blob_store.removed == []

    @pytest.mark.asyncio
    async def test_failed_save_keeps_old_image(self, post_usecase, post_repo, blob_store, alice, as_user):
        created = await _create(post_usecase, as_user(alice))
        post_repo.fail_update = True

        with pytest.raises(ErrInternal):
            await post_usecase.update(
                as_user(alice),
                created.id,
                UpdatePostInput(title="New title", content="New content", image_url="images/b.png"),
            )
        await post_usecase.close()

        assert blob_store.removed == []

    @pytest.mark.asyncio
    async def test_invalid_fields_fail_before_any_write(self, post_usecase, post_repo, alice, as_user):
        created = await _create(post_usecase, as_user(alice))
        post_repo.calls.clear()

        with pytest.raises(ErrValidationFailed):
            await post_usecase.update(as_user(alice), created.id, UpdatePostInput(title="ab", content="cd"))

        assert "update" not in post_repo.calls

    @pytest.mark.asyncio
    async def test_unknown_post_is_not_found(self, post_usecase, alice, as_user):
        with pytest.raises(ErrPostNotFound):
            await post_usecase.update(
                as_user(alice), str(uuid.uuid4()), UpdatePostInput(title="Title", content="Body")
            )

    @pytest.mark.asyncio
    async def test_concurrent_updates_of_one_post_do_not_interleave(self, post_usecase, post_repo, alice, as_user):
        created = await _create(post_usecase, as_user(alice))
        post_repo.calls.clear()

        await asyncio.gather(
            post_usecase.update(as_user(alice), created.id, UpdatePostInput(title="Title A", content="Body A")),
            post_usecase.update(as_user(alice), created.id, UpdatePostInput(title="Title B", content="Body B")),
        )

        assert post_repo.calls == ["detail", "update", "detail", "update"]
        assert post_repo.posts[uuid.UUID(created.id)].title == "Title B"


class TestDelete:
    @pytest.mark.asyncio
    async def test_delete_removes_post_image_and_owned_entry(
        self, post_usecase, user_repo, blob_store, notifier, alice, as_user
    ):
        created = await _create(post_usecase, as_user(alice))

        await post_usecase.delete(as_user(alice), created.id)
        await post_usecase.close()

        with pytest.raises(ErrPostNotFound):
            await post_usecase.get(as_user(alice), created.id)
        assert user_repo.owned[alice.id] == set()
        assert blob_store.removed == ["images/a.png"]
        assert notifier.events[-1].action == Action.DELETE
        assert notifier.events[-1].post == created.id

    @pytest.mark.asyncio
    async def test_non_owner_is_forbidden(self, post_usecase, post_repo, alice, bob, as_user):
        created = await _create(post_usecase, as_user(alice))

        with pytest.raises(ErrNotPostOwner):
            await post_usecase.delete(as_user(bob), created.id)
        assert uuid.UUID(created.id) in post_repo.posts

    @pytest.mark.asyncio
    async def test_image_removal_failure_is_not_fatal(self, post_usecase, post_repo, blob_store, alice, as_user):
        created = await _create(post_usecase, as_user(alice))
        blob_store.fail_remove = True

        await post_usecase.delete(as_user(alice), created.id)
        await post_usecase.close()

        assert post_repo.posts == {}

    @pytest.mark.asyncio
    async def test_image_removal_scheduled_when_record_delete_fails(
        self, post_usecase, post_repo, user_repo, blob_store, alice, as_user
    ):
        created = await _create(post_usecase, as_user(alice))
        post_repo.fail_delete = True

        with pytest.raises(ErrInternal):
            await post_usecase.delete(as_user(alice), created.id)
        await post_usecase.close()

        assert blob_store.removed == ["images/a.png"]
        assert "remove_post" not in user_repo.calls

    @pytest.mark.asyncio
    async def test_owned_set_failure_is_internal_but_post_is_gone(
        self, post_usecase, post_repo, user_repo, notifier, alice, as_user
    ):
        created = await _create(post_usecase, as_user(alice))
        user_repo.fail_remove_post = True

        with pytest.raises(ErrInternal):
            await post_usecase.delete(as_user(alice), created.id)
        await post_usecase.close()

        assert post_repo.posts == {}
        assert notifier.events[-1].action == Action.DELETE
