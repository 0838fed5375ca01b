"""
ForumGuard Backend — Reply Engagement Analyzer
================================================

What:  Counts, per user, how many *distinct* other authors that user has
       replied to, and whether the grading minimum is reached.
Why:   Participation grading requires every student to reply to at least
       REQUIRED_UNIQUE_REPLIES different classmates. Replying five times to
       the same person, or to one's own posts, does not count.
How:   Treat each reply as a directed edge (reply author → parent post
       author). The metric is the out-degree over distinct targets with the
       self-loop removed:

    all replies ──filter author == username──▶ matching replies
        │
        ▼ get_post(reply.post_id) for each
    {parent post authors}  (set: duplicates collapse)
        │
        ▼ discard(username)
    unique_count = len(set),  requirement_met = unique_count >= 3

Failure Semantics:
    - Null or blank username → InvalidArgumentError (never retried)
    - Repository errors propagate unmodified; nothing is caught here
    - A reply whose parent post is missing is skipped with a WARNING log.
      Referential integrity is the store's contract, not ours.
    - analyze_all_students() aborts on the first failing user.

Consistency:
    One bulk reply fetch, then one post lookup per matching reply. A reply
    written between those reads is not specially handled. Callers needing
    a consistent batch over the whole forum must provide their own snapshot.
"""

import logging
from typing import Dict, Optional, Set

from forumguard.exceptions import InvalidArgumentError
from forumguard.schemas.forum import EngagementResult
from forumguard.services.repository import USER_LIST_PLACEHOLDER, ForumRepository

logger = logging.getLogger(__name__)

REQUIRED_UNIQUE_REPLIES = 3


class ReplyEngagementAnalyzer:
    """
    Stateless analysis over a ForumRepository.

    The analyzer holds only its repository; every call re-reads the forum,
    so results always reflect the store at call time (no caching).
    """

    def __init__(self, repository: Optional[ForumRepository]):
        if repository is None:
            raise InvalidArgumentError("Repository cannot be null", argument="repository")
        self._repository = repository

    @staticmethod
    def required_unique_replies() -> int:
        """Minimum number of distinct authors a user must reply to. Always 3."""
        return REQUIRED_UNIQUE_REPLIES

    async def analyze_student(self, username: Optional[str]) -> EngagementResult:
        """
        Analyze a single user's reply activity.

        Args:
            username: Exact, case-sensitive username.

        Returns:
            EngagementResult(unique_count, requirement_met). A user with no
            replies yields (0, False).

        Raises:
            InvalidArgumentError: username is None or blank after trimming.
            DatabaseError: propagated unmodified from the repository.
        """
        if username is None:
            raise InvalidArgumentError("Username cannot be null", argument="username")
        if not username.strip():
            raise InvalidArgumentError("Username cannot be empty", argument="username")

        unique_authors: Set[str] = set()

        replies = await self._repository.get_all_replies()
        for reply in replies:
            if reply.author != username:
                continue

            post = await self._repository.get_post(reply.post_id)
            if post is None:
                logger.warning(
                    "Reply %d by '%s' references missing post %d; skipped",
                    reply.id,
                    username,
                    reply.post_id,
                )
                continue
            unique_authors.add(post.author)

        # Self-replies never count toward the requirement
        unique_authors.discard(username)

        unique_count = len(unique_authors)
        return EngagementResult(
            unique_count=unique_count,
            requirement_met=unique_count >= REQUIRED_UNIQUE_REPLIES,
        )

    async def analyze_all_students(self) -> Dict[str, EngagementResult]:
        """
        Analyze every user in the forum's user catalog.

        Returns:
            username → EngagementResult, in catalog order, without the
            placeholder entry.

        Raises:
            The first error from analyze_student() or the repository; the
            batch is abandoned at that point.
        """
        results: Dict[str, EngagementResult] = {}

        usernames = await self._repository.get_user_list()
        for username in usernames:
            if username == USER_LIST_PLACEHOLDER:
                continue
            results[username] = await self.analyze_student(username)

        met = sum(1 for result in results.values() if result.requirement_met)
        logger.info("Engagement batch complete: %d users, %d meet the requirement", len(results), met)
        return results
