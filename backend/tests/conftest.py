"""
ForumGuard Backend — Test Configuration (conftest.py)
======================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy:
    ├── make_repository:  factory building an AsyncMock ForumRepository from records
    ├── forum_repository: the classroom forum used across analyzer tests
    ├── sqlite_session:   AsyncSession on a fresh in-memory SQLite forum
    └── test_client:      HTTPX AsyncClient with the repository dependency overridden

The classroom forum:
    alice       replied once each to bob, charlie, david        → 3, met
    bob         replied 3× to alice, 2× to charlie              → 2, not met
    charlie     replied once each to alice, bob, david, emma, frank → 5, met
    lurker      never replied                                   → 0, not met
    narcissist  replied 3× to own post only                     → 0, not met
    mixed       replied to self twice, alice, bob, charlie      → 3, met
"""

import os

# Override settings BEFORE any forumguard import creates the engine
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["LOG_LEVEL"] = "WARNING"

from typing import Dict, Iterable, List, Optional
from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine

from forumguard.database import Base
from forumguard.models import forum as forum_models  # noqa: F401  (registers tables)
from forumguard.schemas.forum import PostRecord, ReplyRecord
from forumguard.services.repository import USER_LIST_PLACEHOLDER, ForumRepository


# ══════════════════════════════════════════════════════════════════════════
# Repository Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def make_repository():
    """
    Returns a factory building a mock ForumRepository from plain records.

    Usage:
        repo = make_repository(posts=[...], replies=[...], users=["alice"])
        await ReplyEngagementAnalyzer(repo).analyze_student("alice")

    get_post() answers from `posts` by id (None when absent);
    get_user_list() prepends the placeholder entry like the real store.
    """

    def _make(
        posts: Iterable[PostRecord] = (),
        replies: Iterable[ReplyRecord] = (),
        users: Optional[List[str]] = None,
    ) -> AsyncMock:
        posts = list(posts)
        posts_by_id: Dict[int, PostRecord] = {post.id: post for post in posts}
        if users is None:
            users = []
            for post in posts:
                if post.author not in users:
                    users.append(post.author)

        repo = AsyncMock(spec=ForumRepository)
        repo.get_all_replies.return_value = list(replies)
        repo.get_post.side_effect = lambda post_id: posts_by_id.get(post_id)
        repo.get_user_list.return_value = [USER_LIST_PLACEHOLDER] + list(users)
        repo.get_all_posts.return_value = posts
        return repo

    return _make


@pytest.fixture
def classroom_posts() -> List[PostRecord]:
    authors = [
        "alice", "bob", "charlie", "david", "emma",
        "frank", "narcissist", "mixed", "mixed",
    ]
    return [
        PostRecord(id=index, author=author, content=f"{author}'s question")
        for index, author in enumerate(authors, start=1)
    ]


@pytest.fixture
def classroom_replies() -> List[ReplyRecord]:
    # post ids: alice=1 bob=2 charlie=3 david=4 emma=5 frank=6 narcissist=7 mixed=8,9
    edges = [
        ("alice", 2), ("alice", 3), ("alice", 4),
        ("bob", 1), ("bob", 1), ("bob", 1), ("bob", 3), ("bob", 3),
        ("charlie", 1), ("charlie", 2), ("charlie", 4), ("charlie", 5), ("charlie", 6),
        ("narcissist", 7), ("narcissist", 7), ("narcissist", 7),
        ("mixed", 8), ("mixed", 9), ("mixed", 1), ("mixed", 2), ("mixed", 3),
    ]
    return [
        ReplyRecord(id=index, post_id=post_id, author=author, content="reply")
        for index, (author, post_id) in enumerate(edges, start=1)
    ]


CLASSROOM_USERS = [
    "alice", "bob", "charlie", "david", "emma",
    "frank", "lurker", "narcissist", "mixed",
]


@pytest.fixture
def forum_repository(make_repository, classroom_posts, classroom_replies):
    return make_repository(
        posts=classroom_posts,
        replies=classroom_replies,
        users=list(CLASSROOM_USERS),
    )


# ══════════════════════════════════════════════════════════════════════════
# Database Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def sqlite_session():
    """
    Provides an AsyncSession bound to a throwaway in-memory SQLite forum.

    The forum tables are created here for the test only; the application
    itself never creates schema.
    """
    engine = create_async_engine("sqlite+aiosqlite://")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    session_factory = async_sessionmaker(engine, expire_on_commit=False)
    async with session_factory() as session:
        yield session

    await engine.dispose()


# ══════════════════════════════════════════════════════════════════════════
# HTTP Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def test_client(forum_repository):
    """
    HTTPX AsyncClient talking to the app in-process.

    The SQL repository dependency is replaced by `forum_repository`, so
    endpoint tests never touch a database.
    """
    from forumguard.main import app
    from forumguard.services.sql_repository import get_forum_repository

    app.dependency_overrides[get_forum_repository] = lambda: forum_repository
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
