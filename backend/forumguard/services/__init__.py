# Services package init
"""
ForumGuard Backend — Services Layer
=====================================

What:  The analyses, kept apart from HTTP and from persistence.

Service Inventory:
    - input_validator: validate() — ordered SQL-injection screening rules
    - engagement_service: ReplyEngagementAnalyzer — distinct reply targets
    - post_service: PostOverviewService — pinned ordering, post lookup, reply alerts
    - repository: ForumRepository — the read-only port the services depend on
    - sql_repository: SQLAlchemyForumRepository — the port over async SQLAlchemy

Why services never receive a session:
    The analyzer and overview service take a ForumRepository, so unit tests
    feed them an AsyncMock with hand-built records and no database at all.
"""
