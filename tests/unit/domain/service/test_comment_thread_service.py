"""Unit tests for CommentService."""

from datetime import timedelta

import pytest

from dealort.domain.error import NotFoundError, ValidationError
from dealort.domain.model import Comment
from dealort.domain.model.common import utcnow
from dealort.domain.repository import CommentLikeRepository, CommentRepository
from dealort.domain.service import CommentService
from dealort.domain.value import CommentId, new_id
from tests.conftest import seed_organization, seed_user
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


async def save_comment(unit_env, organization_id, user_id, parent_id=None, age=0):
    """Save a comment created ``age`` minutes ago."""
    comment_repo = await unit_env.get(CommentRepository)
    created = utcnow() - timedelta(minutes=age)
    return await comment_repo.save(
        Comment(
            id=CommentId(new_id()),
            organization_id=organization_id,
            user_id=user_id,
            parent_id=parent_id,
            content=f"comment {age}",
            created_at=created,
            updated_at=created,
        )
    )


class TestCreateComment:
    @pytest.mark.asyncio
    async def test_create_top_level_comment(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        user = await seed_user(unit_env)
        organization = await seed_organization(unit_env)

        comment = await comment_service.create_comment(
            organization_id=organization.id, user_id=user.id, content="Nice launch"
        )

        assert comment.parent_id is None
        assert comment.content == "Nice launch"
        assert await comment_service.count_for_organization(organization.id) == 1

    @pytest.mark.asyncio
    async def test_reply_to_missing_parent_raises(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        user = await seed_user(unit_env)
        organization = await seed_organization(unit_env)

        with pytest.raises(NotFoundError, match="Parent comment not found"):
            await comment_service.create_comment(
                organization_id=organization.id,
                user_id=user.id,
                content="Reply",
                parent_id=CommentId(new_id()),
            )

    @pytest.mark.asyncio
    async def test_reply_to_comment_of_other_organization_raises(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        user = await seed_user(unit_env)
        first = await seed_organization(unit_env, slug="first")
        second = await seed_organization(unit_env, slug="second")
        parent = await save_comment(unit_env, first.id, user.id)

        with pytest.raises(ValidationError):
            await comment_service.create_comment(
                organization_id=second.id,
                user_id=user.id,
                content="Reply",
                parent_id=parent.id,
            )

    @pytest.mark.asyncio
    async def test_blank_content_raises(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        user = await seed_user(unit_env)
        organization = await seed_organization(unit_env)

        with pytest.raises(ValidationError):
            await comment_service.create_comment(
                organization_id=organization.id, user_id=user.id, content="   "
            )


class TestListComments:
    @pytest.mark.asyncio
    async def test_replies_are_nested_newest_first(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        user = await seed_user(unit_env)
        organization = await seed_organization(unit_env)

        root = await save_comment(unit_env, organization.id, user.id, age=30)
        older_reply = await save_comment(
            unit_env, organization.id, user.id, parent_id=root.id, age=20
        )
        newer_reply = await save_comment(
            unit_env, organization.id, user.id, parent_id=root.id, age=10
        )
        grandchild = await save_comment(
            unit_env, organization.id, user.id, parent_id=older_reply.id, age=5
        )

        page = await comment_service.list_comments(organization.id)

        assert [node.comment.id for node in page.items] == [root.id]
        replies = page.items[0].replies
        assert [node.comment.id for node in replies] == [newer_reply.id, older_reply.id]
        assert [node.comment.id for node in replies[1].replies] == [grandchild.id]
        assert replies[1].replies[0].author.id == user.id

    @pytest.mark.asyncio
    async def test_pagination_by_cursor(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        user = await seed_user(unit_env)
        organization = await seed_organization(unit_env)
        comments = [
            await save_comment(unit_env, organization.id, user.id, age=age)
            for age in (1, 2, 3)
        ]

        first_page = await comment_service.list_comments(organization.id, limit=2)

        assert [n.comment.id for n in first_page.items] == [
            comments[0].id,
            comments[1].id,
        ]
        assert first_page.has_more is True
        assert first_page.next_cursor == comments[1].id

        second_page = await comment_service.list_comments(
            organization.id, cursor=first_page.next_cursor, limit=2
        )

        assert [n.comment.id for n in second_page.items] == [comments[2].id]
        assert second_page.has_more is False
        assert second_page.next_cursor is None

    @pytest.mark.asyncio
    async def test_like_state_for_viewer(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        author = await seed_user(unit_env, "Author")
        viewer = await seed_user(unit_env, "Viewer")
        organization = await seed_organization(unit_env)
        comment = await save_comment(unit_env, organization.id, author.id)

        assert await comment_service.toggle_like(comment.id, viewer.id) is True

        as_viewer = await comment_service.list_comments(
            organization.id, viewer_id=viewer.id
        )
        anonymous = await comment_service.list_comments(organization.id)

        assert as_viewer.items[0].like_count == 1
        assert as_viewer.items[0].has_liked is True
        assert anonymous.items[0].has_liked is False

    @pytest.mark.asyncio
    async def test_empty_organization_lists_nothing(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        organization = await seed_organization(unit_env)

        page = await comment_service.list_comments(organization.id)

        assert page.items == []
        assert page.next_cursor is None
        assert page.has_more is False

    @pytest.mark.asyncio
    async def test_like_count_across_distinct_users(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        author = await seed_user(unit_env, "Author")
        likers = [await seed_user(unit_env, f"Liker {i}") for i in range(3)]
        bystander = await seed_user(unit_env, "Bystander")
        organization = await seed_organization(unit_env)
        comment = await save_comment(unit_env, organization.id, author.id)

        for liker in likers:
            assert await comment_service.toggle_like(comment.id, liker.id) is True

        as_liker = await comment_service.list_comments(
            organization.id, viewer_id=likers[1].id
        )
        as_bystander = await comment_service.list_comments(
            organization.id, viewer_id=bystander.id
        )

        assert as_liker.items[0].like_count == 3
        assert as_liker.items[0].has_liked is True
        assert as_bystander.items[0].like_count == 3
        assert as_bystander.items[0].has_liked is False

    @pytest.mark.asyncio
    async def test_fifteen_comments_split_into_pages_of_ten(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        user = await seed_user(unit_env)
        organization = await seed_organization(unit_env)
        comments = [
            await save_comment(unit_env, organization.id, user.id, age=age)
            for age in range(1, 16)
        ]

        first_page = await comment_service.list_comments(organization.id, limit=10)

        assert len(first_page.items) == 10
        assert first_page.has_more is True
        assert first_page.next_cursor == first_page.items[9].comment.id
        assert first_page.next_cursor == comments[9].id

        second_page = await comment_service.list_comments(
            organization.id, cursor=first_page.next_cursor, limit=10
        )

        assert [n.comment.id for n in second_page.items] == [
            c.id for c in comments[10:]
        ]
        assert second_page.has_more is False
        assert second_page.next_cursor is None

    @pytest.mark.asyncio
    async def test_depth_ceiling_stops_hydration(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        comment_service.max_thread_depth = 1
        user = await seed_user(unit_env)
        organization = await seed_organization(unit_env)

        root = await save_comment(unit_env, organization.id, user.id, age=3)
        child = await save_comment(
            unit_env, organization.id, user.id, parent_id=root.id, age=2
        )
        await save_comment(unit_env, organization.id, user.id, parent_id=child.id, age=1)

        page = await comment_service.list_comments(organization.id)

        assert page.items[0].replies[0].comment.id == child.id
        assert page.items[0].replies[0].replies == []


class TestToggleLike:
    @pytest.mark.asyncio
    async def test_toggle_twice_removes_like(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        like_repo = await unit_env.get(CommentLikeRepository)
        user = await seed_user(unit_env)
        organization = await seed_organization(unit_env)
        comment = await save_comment(unit_env, organization.id, user.id)

        assert await comment_service.toggle_like(comment.id, user.id) is True
        assert await comment_service.toggle_like(comment.id, user.id) is False
        assert await like_repo.count_by_comment(comment.id) == 0

    @pytest.mark.asyncio
    async def test_unknown_comment_raises(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        user = await seed_user(unit_env)

        with pytest.raises(NotFoundError):
            await comment_service.toggle_like(CommentId(new_id()), user.id)


class TestUpdateAndDelete:
    @pytest.mark.asyncio
    async def test_update_by_non_author_is_not_found(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        author = await seed_user(unit_env, "Author")
        other = await seed_user(unit_env, "Other")
        organization = await seed_organization(unit_env)
        comment = await save_comment(unit_env, organization.id, author.id)

        with pytest.raises(NotFoundError, match="not found or unauthorized"):
            await comment_service.update_comment(comment.id, other.id, "Hijacked")

    @pytest.mark.asyncio
    async def test_update_changes_content(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        user = await seed_user(unit_env)
        organization = await seed_organization(unit_env)
        comment = await save_comment(unit_env, organization.id, user.id)

        updated = await comment_service.update_comment(comment.id, user.id, "Edited")

        assert updated.content == "Edited"

    @pytest.mark.asyncio
    async def test_delete_removes_subtree_and_likes(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        like_repo = await unit_env.get(CommentLikeRepository)
        user = await seed_user(unit_env)
        organization = await seed_organization(unit_env)

        root = await save_comment(unit_env, organization.id, user.id, age=3)
        child = await save_comment(
            unit_env, organization.id, user.id, parent_id=root.id, age=2
        )
        grandchild = await save_comment(
            unit_env, organization.id, user.id, parent_id=child.id, age=1
        )
        sibling = await save_comment(unit_env, organization.id, user.id, age=0)
        await comment_service.toggle_like(grandchild.id, user.id)

        await comment_service.delete_comment(root.id, user.id)

        for deleted in (root, child, grandchild):
            assert await comment_repo.find_by_id(deleted.id) is None
        assert await comment_repo.find_by_id(sibling.id) is not None
        assert await like_repo.count_by_comment(grandchild.id) == 0
