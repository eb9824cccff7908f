"""Unit tests for DispatchThreadEventUseCase."""

import pytest

from discuss.application.usecase.thread import (
    DispatchThreadEventRequest,
    DispatchThreadEventUseCase,
)
from discuss.domain.error import ThreadNotLoadedError
from discuss.domain.model import (
    CommentsAdded,
    NewCommentAdded,
    ReplyCommentsAdded,
)
from discuss.domain.repository import CommentCountRepository, ThreadRepository
from discuss.domain.value import Cursor, PostId
from tests.conftest import child_ids, make_comment
from tests.harness import create_env_fixture

# Unit test fixture - fresh repositories per test
unit_env = create_env_fixture()

POST_ID = PostId("p1")


async def load_post(use_case: DispatchThreadEventUseCase) -> None:
    await use_case.execute(
        DispatchThreadEventRequest(
            event=CommentsAdded(
                post_id=POST_ID,
                comments=[make_comment("a"), make_comment("b", parent_id="a")],
                next=Cursor("older"),
            )
        )
    )


class TestDispatchThreadEventUseCase:
    """Tests for DispatchThreadEventUseCase."""

    @pytest.mark.asyncio
    async def test_initial_load_saves_state(self, unit_env):
        """Loading comments should store the built tree."""
        # Arrange
        use_case = await unit_env.get(DispatchThreadEventUseCase)
        thread_repo = await unit_env.get(ThreadRepository)

        # Act
        await load_post(use_case)

        # Assert
        state = await thread_repo.load()
        thread = state.get(POST_ID)
        assert thread is not None
        assert child_ids(thread.comments) == ["a"]
        assert str(thread.next) == "older"

    @pytest.mark.asyncio
    async def test_response_summarizes_thread(self, unit_env):
        use_case = await unit_env.get(DispatchThreadEventUseCase)

        response = await use_case.execute(
            DispatchThreadEventRequest(
                event=CommentsAdded(
                    post_id=POST_ID,
                    comments=[make_comment("b"), make_comment("a")],
                )
            )
        )

        assert response.post_id == "p1"
        assert response.changed_thread_ids == ["a", "b"]
        assert response.z_index_top == 100000
        assert response.has_next is False
        assert response.comment_count is None

    @pytest.mark.asyncio
    async def test_new_comment_increments_post_count(self, unit_env):
        """Submitting a comment should bump the post's comment count."""
        # Arrange
        use_case = await unit_env.get(DispatchThreadEventUseCase)
        count_repo = await unit_env.get(CommentCountRepository)
        await count_repo.set(POST_ID, 2)
        await load_post(use_case)

        # Act
        response = await use_case.execute(
            DispatchThreadEventRequest(
                event=NewCommentAdded(
                    post_id=POST_ID, comment=make_comment("c", parent_id="b")
                )
            )
        )

        # Assert
        assert response.comment_count == 3
        assert await count_repo.get(POST_ID) == 3
        assert response.changed_thread_ids == ["a"]
        assert response.z_index_top == 100000

    @pytest.mark.asyncio
    async def test_reply_batch_does_not_touch_count(self, unit_env):
        use_case = await unit_env.get(DispatchThreadEventUseCase)
        count_repo = await unit_env.get(CommentCountRepository)
        await load_post(use_case)

        response = await use_case.execute(
            DispatchThreadEventRequest(
                event=ReplyCommentsAdded(
                    post_id=POST_ID, comments=[make_comment("c", parent_id="a")]
                )
            )
        )

        assert response.comment_count is None
        assert await count_repo.get(POST_ID) == 0

    @pytest.mark.asyncio
    async def test_event_for_unloaded_post_raises(self, unit_env):
        """Events that need an existing thread should fail loudly."""
        use_case = await unit_env.get(DispatchThreadEventUseCase)
        thread_repo = await unit_env.get(ThreadRepository)

        with pytest.raises(ThreadNotLoadedError):
            await use_case.execute(
                DispatchThreadEventRequest(
                    event=NewCommentAdded(post_id=POST_ID, comment=make_comment("a"))
                )
            )

        state = await thread_repo.load()
        assert not state.contains(POST_ID)

    def test_request_parses_event_by_kind(self):
        """Events should be picked from the union by their kind."""
        request = DispatchThreadEventRequest.model_validate(
            {
                "event": {
                    "kind": "reply_comments_added",
                    "post_id": "p1",
                    "comments": [{"id": "b", "parentId": "a"}],
                }
            }
        )

        assert isinstance(request.event, ReplyCommentsAdded)
        assert request.event.comments[0].parent_id == "a"
