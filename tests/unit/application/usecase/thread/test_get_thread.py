"""Unit tests for GetThreadUseCase."""

import pytest

from discuss.application.usecase.thread import (
    DispatchThreadEventRequest,
    DispatchThreadEventUseCase,
    GetThreadRequest,
    GetThreadUseCase,
)
from discuss.domain.error import ThreadNotLoadedError
from discuss.domain.model import CommentsAdded
from discuss.domain.value import Cursor, PostId
from tests.conftest import make_comment
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestGetThreadUseCase:
    """Tests for GetThreadUseCase."""

    @pytest.mark.asyncio
    async def test_returns_nested_tree(self, unit_env):
        """Should return top-level threads with replies nested."""
        # Arrange
        dispatch = await unit_env.get(DispatchThreadEventUseCase)
        use_case = await unit_env.get(GetThreadUseCase)
        await dispatch.execute(
            DispatchThreadEventRequest(
                event=CommentsAdded(
                    post_id=PostId("p1"),
                    comments=[
                        make_comment("a", body="first"),
                        make_comment("b", parent_id="a"),
                        make_comment("c"),
                    ],
                    next=Cursor("older"),
                )
            )
        )

        # Act
        response = await use_case.execute(GetThreadRequest(post_id="p1"))

        # Assert
        assert response.total == 3
        assert response.next == "older"
        assert [node.comment_id for node in response.comments] == ["a", "c"]
        a = response.comments[0]
        assert a.parent_id is None
        assert a.comment["body"] == "first"
        assert a.collapsed is False
        assert a.no_replies_rendered == 0
        assert [child.comment_id for child in a.children] == ["b"]
        assert a.children[0].parent_id == "a"

    @pytest.mark.asyncio
    async def test_unknown_post_raises(self, unit_env):
        use_case = await unit_env.get(GetThreadUseCase)

        with pytest.raises(ThreadNotLoadedError):
            await use_case.execute(GetThreadRequest(post_id="missing"))
