"""
ForumGuard Backend — Posts Overview Routes
============================================

What:  Read-only post views: display ordering, pin slots, reply alerts.
"""

from typing import List

from fastapi import APIRouter, Depends

from forumguard.schemas.forum import ErrorResponse, PinStatus, PostRecord, ReplyAlert
from forumguard.services.post_service import PostOverviewService
from forumguard.services.repository import ForumRepository
from forumguard.services.sql_repository import get_forum_repository

router = APIRouter(prefix="/api", tags=["Posts"])


@router.get(
    "/posts",
    response_model=List[PostRecord],
    summary="All posts, pinned first then newest first",
)
async def list_posts(
    repository: ForumRepository = Depends(get_forum_repository),
) -> List[PostRecord]:
    return await PostOverviewService(repository).list_posts()


@router.get(
    "/posts/pins",
    response_model=PinStatus,
    summary="Pinned post slots in use",
)
async def get_pin_status(
    repository: ForumRepository = Depends(get_forum_repository),
) -> PinStatus:
    return await PostOverviewService(repository).pin_status()


@router.get(
    "/posts/{post_id}",
    response_model=PostRecord,
    responses={404: {"description": "No such post", "model": ErrorResponse}},
    summary="A single post by id",
)
async def get_post(
    post_id: int,
    repository: ForumRepository = Depends(get_forum_repository),
) -> PostRecord:
    return await PostOverviewService(repository).get_post(post_id)


@router.get(
    "/users/{username}/reply-alert",
    response_model=ReplyAlert,
    responses={400: {"description": "Blank username", "model": ErrorResponse}},
    summary="Unread reply badge for a user's home page",
)
async def get_reply_alert(
    username: str,
    repository: ForumRepository = Depends(get_forum_repository),
) -> ReplyAlert:
    return await PostOverviewService(repository).reply_alert(username)
