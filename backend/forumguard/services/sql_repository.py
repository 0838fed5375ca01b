"""
ForumGuard Backend — SQLAlchemy Forum Repository
==================================================

What:  ForumRepository implementation reading the forum tables through an
       AsyncSession.
Who:   Built per request by the `get_forum_repository` FastAPI dependency
       and handed to the services.

Query plans:
    get_all_replies: SELECT * FROM Reply ORDER BY id
    get_post:        SELECT * FROM Post WHERE id = :id  (primary key lookup)
    get_user_list:   SELECT userName FROM userDB ORDER BY id
    get_all_posts:   SELECT * FROM Post ORDER BY id

Error Handling:
    Any SQLAlchemyError is logged with its type and re-raised as
    DatabaseError. The services let it propagate untouched, and the global
    handler turns it into a generic HTTP 500.
"""

import logging
from typing import List, Optional

from fastapi import Depends
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from forumguard.database import get_db_session
from forumguard.exceptions import DatabaseError
from forumguard.models.forum import Post, Reply, User
from forumguard.schemas.forum import PostRecord, ReplyRecord
from forumguard.services.repository import USER_LIST_PLACEHOLDER, ForumRepository

logger = logging.getLogger(__name__)


class SQLAlchemyForumRepository(ForumRepository):
    """Read-only forum access over one AsyncSession."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def get_all_replies(self) -> List[ReplyRecord]:
        try:
            result = await self._session.execute(select(Reply).order_by(Reply.id))
            return [ReplyRecord.model_validate(reply) for reply in result.scalars().all()]
        except SQLAlchemyError as e:
            raise self._wrap(e, "get_all_replies") from e

    async def get_post(self, post_id: int) -> Optional[PostRecord]:
        try:
            result = await self._session.execute(select(Post).where(Post.id == post_id))
            post = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            raise self._wrap(e, "get_post", post_id=post_id) from e
        if post is None:
            return None
        return PostRecord.model_validate(post)

    async def get_user_list(self) -> List[str]:
        try:
            result = await self._session.execute(select(User.user_name).order_by(User.id))
            usernames = list(result.scalars().all())
        except SQLAlchemyError as e:
            raise self._wrap(e, "get_user_list") from e
        return [USER_LIST_PLACEHOLDER] + usernames

    async def get_all_posts(self) -> List[PostRecord]:
        try:
            result = await self._session.execute(select(Post).order_by(Post.id))
            return [PostRecord.model_validate(post) for post in result.scalars().all()]
        except SQLAlchemyError as e:
            raise self._wrap(e, "get_all_posts") from e

    @staticmethod
    def _wrap(error: SQLAlchemyError, operation: str, **context) -> DatabaseError:
        logger.error("Forum store query failed in %s: %s", operation, str(error), exc_info=True)
        return DatabaseError(
            message="Could not read forum data. Please try again.",
            context={"operation": operation, "error_type": type(error).__name__, **context},
        )


async def get_forum_repository(
    db: AsyncSession = Depends(get_db_session),
) -> ForumRepository:
    """FastAPI dependency: one repository per request, bound to its session."""
    return SQLAlchemyForumRepository(db)
