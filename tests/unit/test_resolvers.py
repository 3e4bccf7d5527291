"""
Unit tests for the link and comment resolvers with the CRUD layer mocked out.
"""

import datetime
from unittest.mock import AsyncMock, MagicMock

import pytest
import strawberry
from sqlalchemy.ext.asyncio import AsyncSession

from hackernews import crud
from hackernews.core.exceptions import (
    InputValidationError,
    NotFoundError,
    StorageError,
    StorageErrorKind,
)
from hackernews.graphql.resolvers.comment import post_comment_on_link, resolve_comment
from hackernews.graphql.resolvers.link import post_link, resolve_feed, resolve_link
from hackernews.models import Comment as CommentModel
from hackernews.models import Link as LinkModel

CREATED_AT = datetime.datetime(2024, 1, 1, tzinfo=datetime.timezone.utc)


@pytest.fixture
def mock_info():
    """A strawberry Info whose context carries a mocked AsyncSession."""
    info = MagicMock(spec=strawberry.Info)
    info.context = MagicMock()
    info.context.db = AsyncMock(spec=AsyncSession)
    return info


@pytest.fixture
def sample_link() -> LinkModel:
    return LinkModel(
        id=1,
        description="Fullstack tutorial for GraphQL",
        url="https://www.howtographql.com",
        created_at=CREATED_AT,
    )


@pytest.fixture
def sample_comment() -> CommentModel:
    return CommentModel(id=7, body="Great read", link_id=1, created_at=CREATED_AT)


class TestResolveFeed:
    async def test_uses_default_page_size(self, mock_info, sample_link, mocker):
        aget_feed = mocker.patch.object(
            crud.link, "aget_feed", new_callable=AsyncMock, return_value=[sample_link]
        )

        links = await resolve_feed(mock_info)

        aget_feed.assert_awaited_once_with(
            db=mock_info.context.db, filter_needle=None, skip=0, take=30
        )
        assert [link.url for link in links] == ["https://www.howtographql.com"]
        assert links[0].id == "1"

    async def test_passes_needle_and_pagination(self, mock_info, mocker):
        aget_feed = mocker.patch.object(
            crud.link, "aget_feed", new_callable=AsyncMock, return_value=[]
        )

        await resolve_feed(mock_info, filter_needle="graphql", skip=10, take=5)

        aget_feed.assert_awaited_once_with(
            db=mock_info.context.db, filter_needle="graphql", skip=10, take=5
        )

    @pytest.mark.parametrize("take", [0, 51])
    async def test_out_of_range_take_never_reaches_storage(self, mock_info, mocker, take):
        aget_feed = mocker.patch.object(crud.link, "aget_feed", new_callable=AsyncMock)

        with pytest.raises(InputValidationError, match=f"'{take}'"):
            await resolve_feed(mock_info, take=take)

        aget_feed.assert_not_awaited()

    async def test_negative_skip_never_reaches_storage(self, mock_info, mocker):
        aget_feed = mocker.patch.object(crud.link, "aget_feed", new_callable=AsyncMock)

        with pytest.raises(InputValidationError):
            await resolve_feed(mock_info, skip=-1)

        aget_feed.assert_not_awaited()


class TestResolveLink:
    async def test_returns_link(self, mock_info, sample_link, mocker):
        aget = mocker.patch.object(
            crud.link, "aget", new_callable=AsyncMock, return_value=sample_link
        )

        link = await resolve_link(mock_info, id=strawberry.ID("1"))

        aget.assert_awaited_once_with(db=mock_info.context.db, id=1)
        assert link.description == "Fullstack tutorial for GraphQL"

    async def test_missing_link_is_none(self, mock_info, mocker):
        mocker.patch.object(crud.link, "aget", new_callable=AsyncMock, return_value=None)

        assert await resolve_link(mock_info, id=strawberry.ID("404")) is None

    @pytest.mark.parametrize("link_id", [None, "abc", "-1"])
    async def test_absent_or_malformed_id_is_none(self, mock_info, mocker, link_id):
        aget = mocker.patch.object(crud.link, "aget", new_callable=AsyncMock)

        assert await resolve_link(mock_info, id=link_id) is None
        aget.assert_not_awaited()


class TestPostLink:
    async def test_creates_link(self, mock_info, sample_link, mocker):
        acreate = mocker.patch.object(
            crud.link, "acreate", new_callable=AsyncMock, return_value=sample_link
        )

        link = await post_link(
            mock_info, url="https://www.howtographql.com", description="Fullstack tutorial for GraphQL"
        )

        obj_in = acreate.await_args.kwargs["obj_in"]
        assert obj_in.url == "https://www.howtographql.com"
        assert obj_in.description == "Fullstack tutorial for GraphQL"
        assert link.id == "1"


class TestResolveComment:
    async def test_returns_comment(self, mock_info, sample_comment, mocker):
        mocker.patch.object(
            crud.comment, "aget", new_callable=AsyncMock, return_value=sample_comment
        )

        comment = await resolve_comment(mock_info, id=strawberry.ID("7"))

        assert comment.body == "Great read"
        assert comment.link_id == 1

    async def test_malformed_id_is_none(self, mock_info, mocker):
        aget = mocker.patch.object(crud.comment, "aget", new_callable=AsyncMock)

        assert await resolve_comment(mock_info, id=strawberry.ID("seven")) is None
        aget.assert_not_awaited()


class TestPostCommentOnLink:
    async def test_creates_comment(self, mock_info, sample_comment, mocker):
        acreate = mocker.patch.object(
            crud.comment, "acreate", new_callable=AsyncMock, return_value=sample_comment
        )

        comment = await post_comment_on_link(
            mock_info, link_id=strawberry.ID("1"), body="Great read"
        )

        obj_in = acreate.await_args.kwargs["obj_in"]
        assert obj_in.link_id == 1
        assert obj_in.body == "Great read"
        assert comment.id == "7"

    async def test_malformed_link_id_never_reaches_storage(self, mock_info, mocker):
        acreate = mocker.patch.object(crud.comment, "acreate", new_callable=AsyncMock)

        with pytest.raises(NotFoundError) as exc_info:
            await post_comment_on_link(mock_info, link_id=strawberry.ID("abc"), body="Hi")

        assert exc_info.value.message == (
            "Cannot post comment on non-existing link with id 'abc'."
        )
        acreate.assert_not_awaited()

    async def test_foreign_key_violation_becomes_not_found(self, mock_info, mocker):
        mocker.patch.object(
            crud.comment,
            "acreate",
            new_callable=AsyncMock,
            side_effect=StorageError(
                "FOREIGN KEY constraint failed",
                kind=StorageErrorKind.FOREIGN_KEY_VIOLATION,
            ),
        )

        with pytest.raises(NotFoundError) as exc_info:
            await post_comment_on_link(mock_info, link_id=strawberry.ID("9999"), body="Hi")

        assert exc_info.value.message == (
            "Cannot post comment on non-existing link with id '9999'."
        )
        assert isinstance(exc_info.value.__cause__, StorageError)

    async def test_other_storage_errors_propagate_unchanged(self, mock_info, mocker):
        storage_error = StorageError(
            "UNIQUE constraint failed: comments.id",
            kind=StorageErrorKind.UNIQUE_VIOLATION,
        )
        mocker.patch.object(
            crud.comment, "acreate", new_callable=AsyncMock, side_effect=storage_error
        )

        with pytest.raises(StorageError) as exc_info:
            await post_comment_on_link(mock_info, link_id=strawberry.ID("1"), body="Hi")

        assert exc_info.value is storage_error
