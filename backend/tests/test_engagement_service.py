"""
ForumGuard Backend — Reply Engagement Analyzer Unit Tests
==========================================================

What:  Tests for ReplyEngagementAnalyzer (single user, batch, threshold).
How:   Mock ForumRepository built from records (no database).

What we test:
    ✅ Exactly 3 distinct authors meets the requirement (boundary)
    ✅ Duplicate replies to the same author collapse
    ✅ Self-replies never count
    ✅ Zero replies → (0, False)
    ✅ Null / blank usernames raise InvalidArgumentError
    ✅ Missing parent posts are skipped
    ✅ Repository failures propagate unmodified
    ✅ Batch skips the placeholder, keeps catalog order, aborts on failure
"""

import logging

import pytest

from forumguard.exceptions import DatabaseError, InvalidArgumentError
from forumguard.schemas.forum import PostRecord, ReplyRecord
from forumguard.services.engagement_service import (
    REQUIRED_UNIQUE_REPLIES,
    ReplyEngagementAnalyzer,
)
from forumguard.services.repository import USER_LIST_PLACEHOLDER


class TestAnalyzeStudent:
    """Per-user analysis against the classroom forum."""

    @pytest.mark.asyncio
    async def test_exactly_three_unique_authors(self, forum_repository):
        """alice replied once each to bob, charlie, david."""
        result = await ReplyEngagementAnalyzer(forum_repository).analyze_student("alice")

        assert result.unique_count == 3
        assert result.requirement_met is True

    @pytest.mark.asyncio
    async def test_duplicates_collapse(self, forum_repository):
        """bob replied 5 times but only to alice and charlie."""
        result = await ReplyEngagementAnalyzer(forum_repository).analyze_student("bob")

        assert result.unique_count == 2
        assert result.requirement_met is False

    @pytest.mark.asyncio
    async def test_more_than_threshold(self, forum_repository):
        result = await ReplyEngagementAnalyzer(forum_repository).analyze_student("charlie")

        assert result.unique_count == 5
        assert result.requirement_met is True

    @pytest.mark.asyncio
    async def test_zero_replies(self, forum_repository):
        result = await ReplyEngagementAnalyzer(forum_repository).analyze_student("lurker")

        assert result.unique_count == 0
        assert result.requirement_met is False
        forum_repository.get_post.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_only_self_replies_count_zero(self, forum_repository):
        result = await ReplyEngagementAnalyzer(forum_repository).analyze_student("narcissist")

        assert result.unique_count == 0
        assert result.requirement_met is False

    @pytest.mark.asyncio
    async def test_self_replies_excluded_from_mixed_activity(self, forum_repository):
        result = await ReplyEngagementAnalyzer(forum_repository).analyze_student("mixed")

        assert result.unique_count == 3
        assert result.requirement_met is True

    @pytest.mark.asyncio
    async def test_username_match_is_case_sensitive(self, forum_repository):
        result = await ReplyEngagementAnalyzer(forum_repository).analyze_student("Alice")

        assert result.unique_count == 0

    @pytest.mark.asyncio
    async def test_unknown_user_is_not_an_error(self, forum_repository):
        result = await ReplyEngagementAnalyzer(forum_repository).analyze_student("ghost")

        assert result.unique_count == 0
        assert result.requirement_met is False

    @pytest.mark.asyncio
    async def test_repeated_calls_are_deterministic(self, forum_repository):
        analyzer = ReplyEngagementAnalyzer(forum_repository)

        first = await analyzer.analyze_student("charlie")
        second = await analyzer.analyze_student("charlie")

        assert first == second


class TestAnalyzeStudentValidation:
    """Argument checks happen before the repository is touched."""

    @pytest.mark.asyncio
    async def test_null_username_rejected(self, forum_repository):
        with pytest.raises(InvalidArgumentError, match="cannot be null"):
            await ReplyEngagementAnalyzer(forum_repository).analyze_student(None)
        forum_repository.get_all_replies.assert_not_awaited()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("username", ["", "   ", "\t\n"])
    async def test_blank_username_rejected(self, forum_repository, username):
        with pytest.raises(InvalidArgumentError, match="cannot be empty"):
            await ReplyEngagementAnalyzer(forum_repository).analyze_student(username)
        forum_repository.get_all_replies.assert_not_awaited()

    def test_null_repository_rejected(self):
        with pytest.raises(InvalidArgumentError):
            ReplyEngagementAnalyzer(None)


class TestAnalyzeStudentDataIntegrity:
    """Behavior when the forum store misbehaves."""

    @pytest.mark.asyncio
    async def test_missing_parent_post_skipped(self, make_repository, caplog):
        posts = [
            PostRecord(id=1, author="bob", content="q1"),
            PostRecord(id=2, author="carol", content="q2"),
        ]
        replies = [
            ReplyRecord(id=10, post_id=1, author="alice"),
            ReplyRecord(id=11, post_id=99, author="alice"),  # dangling reference
            ReplyRecord(id=12, post_id=2, author="alice"),
        ]
        repo = make_repository(posts=posts, replies=replies)

        with caplog.at_level(logging.WARNING, logger="forumguard.services.engagement_service"):
            result = await ReplyEngagementAnalyzer(repo).analyze_student("alice")

        assert result.unique_count == 2
        assert "missing post 99" in caplog.text

    @pytest.mark.asyncio
    async def test_repository_failure_propagates_unmodified(self, make_repository):
        repo = make_repository()
        failure = DatabaseError(message="connection lost")
        repo.get_all_replies.side_effect = failure

        with pytest.raises(DatabaseError) as exc_info:
            await ReplyEngagementAnalyzer(repo).analyze_student("alice")

        assert exc_info.value is failure

    @pytest.mark.asyncio
    async def test_one_post_lookup_per_matching_reply(self, forum_repository):
        await ReplyEngagementAnalyzer(forum_repository).analyze_student("bob")

        # bob wrote 5 replies; other users' replies are never resolved
        assert forum_repository.get_post.await_count == 5
        forum_repository.get_all_replies.assert_awaited_once()


class TestAnalyzeAllStudents:
    """Batch analysis over the user catalog."""

    @pytest.mark.asyncio
    async def test_every_user_analyzed_in_catalog_order(self, forum_repository):
        results = await ReplyEngagementAnalyzer(forum_repository).analyze_all_students()

        assert list(results) == [
            "alice", "bob", "charlie", "david", "emma",
            "frank", "lurker", "narcissist", "mixed",
        ]
        assert USER_LIST_PLACEHOLDER not in results
        assert results["alice"].unique_count == 3
        assert results["bob"].requirement_met is False
        assert results["charlie"].unique_count == 5
        assert results["lurker"].unique_count == 0
        assert results["mixed"].requirement_met is True

    @pytest.mark.asyncio
    async def test_empty_catalog(self, make_repository):
        repo = make_repository(users=[])

        results = await ReplyEngagementAnalyzer(repo).analyze_all_students()

        assert results == {}

    @pytest.mark.asyncio
    async def test_blank_catalog_entry_aborts_batch(self, make_repository):
        repo = make_repository(users=["alice", "  ", "bob"])

        with pytest.raises(InvalidArgumentError):
            await ReplyEngagementAnalyzer(repo).analyze_all_students()

    @pytest.mark.asyncio
    async def test_repository_failure_mid_batch_aborts(self, make_repository):
        repo = make_repository(users=["alice", "bob"])
        repo.get_all_replies.side_effect = [[], DatabaseError(message="gone")]

        with pytest.raises(DatabaseError):
            await ReplyEngagementAnalyzer(repo).analyze_all_students()


class TestThreshold:

    def test_required_unique_replies_is_three(self):
        assert ReplyEngagementAnalyzer.required_unique_replies() == 3
        assert REQUIRED_UNIQUE_REPLIES == 3

    def test_threshold_available_from_instance(self, forum_repository):
        assert ReplyEngagementAnalyzer(forum_repository).required_unique_replies() == 3
