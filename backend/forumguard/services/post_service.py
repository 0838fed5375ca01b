"""
ForumGuard Backend — Posts Overview Service
=============================================

What:  Read-only views over the forum's posts that the UI shows alongside
       the engagement report:
       - list_posts():   posts in display order (pinned first)
       - get_post():     one post by id, NotFoundError when absent
       - pin_status():   how many of the MAX_PINNED_POSTS slots are used
       - reply_alert():  home-page badge for posts with unread replies
Why:   These derive entirely from Post flags the forum already stores, so
       they belong next to the other read-only analyses rather than in the
       forum's write path.

Not handled here:
    Pinning, unpinning and marking replies as read are writes performed by
    the forum application. Delivering the alert (push, e-mail) is out of
    scope; reply_alert() only computes what the badge would say.
"""

import logging
from typing import List, Optional

from forumguard.exceptions import InvalidArgumentError, NotFoundError
from forumguard.schemas.forum import PinStatus, PostRecord, ReplyAlert
from forumguard.services.repository import ForumRepository

logger = logging.getLogger(__name__)

# The forum refuses to pin a fourth post; this mirrors its limit for display.
MAX_PINNED_POSTS = 3


def order_for_display(posts: List[PostRecord]) -> List[PostRecord]:
    """
    Pinned posts first, then newest first within each group.

    Equivalent to the forum's `ORDER BY isPinned DESC, id DESC`.
    """
    return sorted(posts, key=lambda post: (not post.is_pinned, -post.id))


def format_reply_alert(unread_count: int) -> Optional[str]:
    """
    Badge text for the home page, with singular/plural grammar.

    >>> format_reply_alert(1)
    'You have 1 new reply to your post'
    >>> format_reply_alert(3)
    'You have 3 new replies to your posts'
    """
    if unread_count <= 0:
        return None
    if unread_count == 1:
        return "You have 1 new reply to your post"
    return f"You have {unread_count} new replies to your posts"


class PostOverviewService:
    """Read-only post views over a ForumRepository."""

    def __init__(self, repository: ForumRepository):
        self._repository = repository

    async def list_posts(self) -> List[PostRecord]:
        posts = await self._repository.get_all_posts()
        return order_for_display(posts)

    async def get_post(self, post_id: int) -> PostRecord:
        post = await self._repository.get_post(post_id)
        if post is None:
            raise NotFoundError(resource="Post", resource_id=str(post_id))
        return post

    async def pin_status(self) -> PinStatus:
        posts = await self._repository.get_all_posts()
        pinned_ids = [post.id for post in order_for_display(posts) if post.is_pinned]

        if len(pinned_ids) > MAX_PINNED_POSTS:
            # The store is supposed to prevent this; report it, don't fix it
            logger.warning(
                "Forum has %d pinned posts, above the limit of %d",
                len(pinned_ids),
                MAX_PINNED_POSTS,
            )

        return PinStatus(
            pinned_count=len(pinned_ids),
            max_pinned=MAX_PINNED_POSTS,
            can_pin_more=len(pinned_ids) < MAX_PINNED_POSTS,
            pinned_post_ids=pinned_ids,
        )

    async def reply_alert(self, username: Optional[str]) -> ReplyAlert:
        """
        Count the user's posts that have replies they haven't viewed yet.

        Raises:
            InvalidArgumentError: username is None or blank.
        """
        if username is None or not username.strip():
            raise InvalidArgumentError("Username cannot be empty", argument="username")

        posts = await self._repository.get_all_posts()
        unread_count = sum(
            1 for post in posts if post.author == username and post.has_unread_replies
        )
        return ReplyAlert(
            username=username,
            unread_count=unread_count,
            message=format_reply_alert(unread_count),
        )
