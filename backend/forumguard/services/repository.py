"""
ForumGuard Backend — Forum Repository Interface
=================================================

What:  Abstract base class describing the read operations the services may
       ask of the forum store.
Why:   The engagement analyzer and the posts overview must not know how the
       forum is persisted. They depend on this narrow port; the SQL adapter
       implements it for production and tests substitute an AsyncMock.
How:   Concrete implementations inherit from ForumRepository and implement
       every abstract method. All methods are read-only.

Contract:
    - No pre-filtering: get_all_replies() returns every reply; filtering by
      author is the analyzer's job.
    - get_post() returns None for an unknown id instead of raising.
    - get_user_list() starts with the USER_LIST_PLACEHOLDER entry that the
      forum's user pickers display; callers skip it.
    - Storage failures are raised as-is (DatabaseError for the SQL adapter)
      and are never swallowed by the services.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from forumguard.schemas.forum import PostRecord, ReplyRecord

# First entry of every user list returned by the forum store
USER_LIST_PLACEHOLDER = "<Select a User>"


class ForumRepository(ABC):
    """
    Read-only access to Users, Posts and Replies.

    Implementations:
        - SQLAlchemyForumRepository: async SQLAlchemy session per request
    """

    @abstractmethod
    async def get_all_replies(self) -> List[ReplyRecord]:
        """Every reply in the forum, in creation (id) order."""
        ...

    @abstractmethod
    async def get_post(self, post_id: int) -> Optional[PostRecord]:
        """
        Fetch a single post.

        Returns:
            The post, or None when no post has this id.
        """
        ...

    @abstractmethod
    async def get_user_list(self) -> List[str]:
        """USER_LIST_PLACEHOLDER followed by every username in catalog order."""
        ...

    @abstractmethod
    async def get_all_posts(self) -> List[PostRecord]:
        """Every post in the forum, in creation (id) order."""
        ...
