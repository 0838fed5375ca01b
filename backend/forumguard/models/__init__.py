# Models package init
"""ORM mappings onto the forum application's existing tables."""

from forumguard.models.forum import Post, Reply, User

__all__ = ["Post", "Reply", "User"]
