"""
ForumGuard Backend — Engagement Route Handlers
================================================

What:  Exposes the reply engagement analyzer to the grading dashboard.
How:   Each request builds a ReplyEngagementAnalyzer over its own
       repository (and therefore its own read session).

Route order matters:
    /engagement/threshold is declared before /engagement/{username} so the
    literal path is not captured as a username.
"""

import logging

from fastapi import APIRouter, Depends

from forumguard.schemas.forum import (
    EngagementReportResponse,
    ErrorResponse,
    StudentEngagementResponse,
    ThresholdResponse,
)
from forumguard.services.engagement_service import ReplyEngagementAnalyzer
from forumguard.services.repository import ForumRepository
from forumguard.services.sql_repository import get_forum_repository

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Engagement"])


@router.get(
    "/engagement/threshold",
    response_model=ThresholdResponse,
    summary="Minimum number of distinct authors to reply to",
)
async def get_threshold() -> ThresholdResponse:
    return ThresholdResponse(
        required_unique_replies=ReplyEngagementAnalyzer.required_unique_replies()
    )


@router.get(
    "/engagement",
    response_model=EngagementReportResponse,
    responses={500: {"description": "Forum store unavailable", "model": ErrorResponse}},
    summary="Engagement report for every student",
    description=(
        "Analyzes every user in catalog order. The report is all-or-nothing: "
        "if any user fails, the request fails."
    ),
)
async def get_engagement_report(
    repository: ForumRepository = Depends(get_forum_repository),
) -> EngagementReportResponse:
    analyzer = ReplyEngagementAnalyzer(repository)
    students = await analyzer.analyze_all_students()
    return EngagementReportResponse(
        required_unique_replies=analyzer.required_unique_replies(),
        students=students,
    )


@router.get(
    "/engagement/{username}",
    response_model=StudentEngagementResponse,
    responses={
        400: {"description": "Blank username", "model": ErrorResponse},
        500: {"description": "Forum store unavailable", "model": ErrorResponse},
    },
    summary="Engagement for one student",
)
async def get_student_engagement(
    username: str,
    repository: ForumRepository = Depends(get_forum_repository),
) -> StudentEngagementResponse:
    """
    Distinct authors replied to by `username`.

    An unknown username is not an error: it simply has no replies and
    yields unique_count=0.
    """
    analyzer = ReplyEngagementAnalyzer(repository)
    result = await analyzer.analyze_student(username)
    return StudentEngagementResponse(
        username=username,
        unique_count=result.unique_count,
        requirement_met=result.requirement_met,
        required_unique_replies=analyzer.required_unique_replies(),
    )
