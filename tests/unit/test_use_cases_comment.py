"""
Unit tests for comment use cases.
"""
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio

from devconnect.application.dto.comment_dto import CommentCreateRequest
from devconnect.application.use_cases.comment import AddCommentUseCase, ListCommentsUseCase
from devconnect.application.use_cases.post import DeletePostUseCase
from devconnect.domain.exceptions import NotFoundError, ValidationError
from devconnect.domain.models import Post


@pytest.fixture
def alice(make_user):
    return make_user("Alice", "alice@example.com")


@pytest.fixture
def bob(make_user):
    return make_user("Bob", "bob@example.com")


@pytest_asyncio.fixture
async def alices_post(post_repo, alice):
    return await post_repo.create(Post(id=None, title="Hello", body="World", author_id=alice.id))


class TestAddCommentUseCase:
    @pytest.mark.asyncio
    async def test_any_user_can_comment(self, post_repo, view_builder, alices_post, bob):
        use_case = AddCommentUseCase(post_repo, view_builder)

        result = await use_case.execute(alices_post.id, CommentCreateRequest(text="  Nice! "), bob.id)

        assert result.text == "Nice!"
        assert result.user.id == bob.id
        assert result.user.name == "Bob"
        assert result.post == alices_post.id
        stored = await post_repo.find_by_id(alices_post.id)
        assert stored.comment_ids == [result.id]

    @pytest.mark.asyncio
    async def test_appends_in_creation_order(self, post_repo, view_builder, alices_post, alice, bob):
        use_case = AddCommentUseCase(post_repo, view_builder)
        first = await use_case.execute(alices_post.id, CommentCreateRequest(text="one"), bob.id)
        second = await use_case.execute(alices_post.id, CommentCreateRequest(text="two"), alice.id)

        stored = await post_repo.find_by_id(alices_post.id)
        assert stored.comment_ids == [first.id, second.id]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("text", [None, "", "   ", "x" * 1001])
    async def test_invalid_text_persists_nothing(self, text, post_repo, view_builder, alices_post, bob, store):
        use_case = AddCommentUseCase(post_repo, view_builder)
        with pytest.raises(ValidationError, match="Comment must be between 1 and 1000 characters"):
            await use_case.execute(alices_post.id, CommentCreateRequest(text=text), bob.id)
        assert store.comments == {}
        assert (await post_repo.find_by_id(alices_post.id)).comment_ids == []

    @pytest.mark.asyncio
    async def test_text_of_exactly_1000_characters_is_accepted(self, post_repo, view_builder, alices_post, bob):
        use_case = AddCommentUseCase(post_repo, view_builder)
        result = await use_case.execute(alices_post.id, CommentCreateRequest(text="x" * 1000), bob.id)
        assert len(result.text) == 1000

    @pytest.mark.asyncio
    @pytest.mark.parametrize("post_id", ["65a000000000000000000000", "malformed-id"])
    async def test_missing_post_raises_not_found(self, post_id, post_repo, view_builder, bob, store):
        use_case = AddCommentUseCase(post_repo, view_builder)
        with pytest.raises(NotFoundError, match="Post not found"):
            await use_case.execute(post_id, CommentCreateRequest(text="Nice!"), bob.id)
        assert store.comments == {}

    @pytest.mark.asyncio
    async def test_validation_runs_before_store_access(self):
        repo = AsyncMock()
        use_case = AddCommentUseCase(repo, MagicMock())
        with pytest.raises(ValidationError):
            await use_case.execute("post-1", CommentCreateRequest(text=""), "user-b")
        repo.add_comment.assert_not_called()


class TestListCommentsUseCase:
    @pytest.mark.asyncio
    async def test_oldest_first(self, post_repo, comment_repo, view_builder, alices_post, alice, bob):
        add = AddCommentUseCase(post_repo, view_builder)
        await add.execute(alices_post.id, CommentCreateRequest(text="first"), bob.id)
        await add.execute(alices_post.id, CommentCreateRequest(text="second"), alice.id)

        result = await ListCommentsUseCase(post_repo, comment_repo, view_builder).execute(alices_post.id)

        assert [c.text for c in result] == ["first", "second"]

    @pytest.mark.asyncio
    async def test_only_comments_of_that_post(self, post_repo, comment_repo, view_builder, alices_post, alice, bob):
        other = await post_repo.create(Post(id=None, title="Other", body="Post", author_id=bob.id))
        add = AddCommentUseCase(post_repo, view_builder)
        await add.execute(alices_post.id, CommentCreateRequest(text="here"), bob.id)
        await add.execute(other.id, CommentCreateRequest(text="there"), alice.id)

        result = await ListCommentsUseCase(post_repo, comment_repo, view_builder).execute(other.id)

        assert [c.text for c in result] == ["there"]

    @pytest.mark.asyncio
    async def test_deleted_post_has_no_comments(self, post_repo, comment_repo, view_builder, alices_post, alice, bob):
        await AddCommentUseCase(post_repo, view_builder).execute(
            alices_post.id, CommentCreateRequest(text="Nice!"), bob.id
        )
        await DeletePostUseCase(post_repo).execute(alices_post.id, alice.id)

        result = await ListCommentsUseCase(post_repo, comment_repo, view_builder).execute(alices_post.id)

        assert result == []

    @pytest.mark.asyncio
    async def test_orphaned_comments_are_hidden(self):
        post_repo = AsyncMock()
        post_repo.find_by_id.return_value = None
        comment_repo = AsyncMock()

        result = await ListCommentsUseCase(post_repo, comment_repo, MagicMock()).execute("post-1")

        assert result == []
        comment_repo.find_by_post.assert_not_called()
