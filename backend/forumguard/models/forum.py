"""
ForumGuard Backend — Forum ORM Mappings
=========================================

What:  SQLAlchemy models for the `userDB`, `Post` and `Reply` tables.
Why:   The SQL repository reads forum data through typed `select()` queries
       instead of hand-written SQL strings.
Who:   Used only by SQLAlchemyForumRepository (and by tests that build an
       in-memory forum).

Table Ownership:
    These tables are created and written by the forum application itself.
    Column names follow its camelCase schema; Python attributes are
    snake_case and mapped explicitly. Nothing here issues DDL at runtime.

    Post lifecycle columns added by later forum releases:
    - isPinned / pinnedBy: admin pinning, at most 3 pinned posts at once
    - hasUnreadReplies / lastReplyTimestamp: reply alert badge state
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import Boolean, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from forumguard.database import Base


class User(Base):
    """A forum account. Only the username matters to the analyses."""

    __tablename__ = "userDB"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    # Unique and case-sensitive; "alice" and "Alice" are different users
    user_name: Mapped[str] = mapped_column("userName", String(255), unique=True, nullable=False)

    def __repr__(self) -> str:
        return f"<User(id={self.id}, user_name='{self.user_name}')>"


class Post(Base):
    """A top-level discussion post."""

    __tablename__ = "Post"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    author: Mapped[str] = mapped_column(String(255), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    author_role: Mapped[Optional[str]] = mapped_column("authorRole", String(255), nullable=True)

    # ── Moderation ────────────────────────────────────────────────────────
    is_pinned: Mapped[bool] = mapped_column("isPinned", Boolean, nullable=False, default=False)
    # Username of the admin who pinned the post; NULL when not pinned
    pinned_by: Mapped[Optional[str]] = mapped_column("pinnedBy", String(255), nullable=True)

    # ── Reply alerts ──────────────────────────────────────────────────────
    has_unread_replies: Mapped[bool] = mapped_column(
        "hasUnreadReplies", Boolean, nullable=False, default=False
    )
    last_reply_at: Mapped[Optional[datetime]] = mapped_column(
        "lastReplyTimestamp", DateTime(timezone=False), nullable=True
    )

    def __repr__(self) -> str:
        return f"<Post(id={self.id}, author='{self.author}', pinned={self.is_pinned})>"


class Reply(Base):
    """A reply to a Post. `post_id` always references an existing Post."""

    __tablename__ = "Reply"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    post_id: Mapped[int] = mapped_column(
        "postID", Integer, ForeignKey("Post.id", ondelete="CASCADE"), nullable=False
    )
    author: Mapped[str] = mapped_column(String(255), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    author_role: Mapped[Optional[str]] = mapped_column("authorRole", String(255), nullable=True)

    def __repr__(self) -> str:
        return f"<Reply(id={self.id}, post_id={self.post_id}, author='{self.author}')>"
