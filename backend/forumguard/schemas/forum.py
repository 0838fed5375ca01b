"""
ForumGuard Backend — Pydantic Records and API Schemas
======================================================

What:  Two kinds of models live here:
       1. Records (PostRecord, ReplyRecord) — the read-only shapes the
          repository port hands to the services.
       2. Responses — the API contract returned by the route handlers.
Why:   Services must not depend on ORM objects or sessions. Converting rows
       into frozen records at the repository boundary keeps the analyses
       pure and lets tests build forum data with plain constructors.
"""

from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, Field


# ══════════════════════════════════════════════════════════════════════════
# Records — what the repository port returns
# ══════════════════════════════════════════════════════════════════════════


class PostRecord(BaseModel):
    """A Post as read from the forum store. Never mutated by this service."""

    id: int = Field(description="Post identity, immutable once created")
    author: str = Field(description="Username of the post author")
    content: str = Field(default="", description="Post text")
    author_role: Optional[str] = Field(default=None, description="Role badge of the author")
    is_pinned: bool = Field(default=False, description="Pinned to the top of the thread")
    pinned_by: Optional[str] = Field(default=None, description="Admin who pinned the post")
    has_unread_replies: bool = Field(
        default=False, description="Replies arrived since the author last viewed them"
    )
    last_reply_at: Optional[datetime] = Field(default=None, description="Time of the newest reply")

    model_config = {"from_attributes": True, "frozen": True}


class ReplyRecord(BaseModel):
    """A Reply as read from the forum store."""

    id: int
    post_id: int = Field(description="Parent post id")
    author: str
    content: str = ""
    author_role: Optional[str] = None

    model_config = {"from_attributes": True, "frozen": True}


# ══════════════════════════════════════════════════════════════════════════
# Engagement
# ══════════════════════════════════════════════════════════════════════════


class EngagementResult(BaseModel):
    """
    What:  Outcome of analyzing one user's reply activity.
    Fields:
        unique_count:    Distinct other authors the user replied to
        requirement_met: unique_count >= the required minimum (3)
    """

    unique_count: int = Field(ge=0, description="Distinct post authors replied to, self excluded")
    requirement_met: bool = Field(description="Whether the minimum of distinct authors is reached")

    model_config = {"frozen": True}


class StudentEngagementResponse(EngagementResult):
    """Returned by GET /api/engagement/{username}."""

    username: str
    required_unique_replies: int


class EngagementReportResponse(BaseModel):
    """
    Returned by GET /api/engagement.

    `students` preserves the order of the forum's user catalog.
    """

    required_unique_replies: int
    students: Dict[str, EngagementResult]


class ThresholdResponse(BaseModel):
    required_unique_replies: int = Field(description="Minimum distinct authors to reply to")


# ══════════════════════════════════════════════════════════════════════════
# Input validation
# ══════════════════════════════════════════════════════════════════════════


class ValidateRequest(BaseModel):
    """Body of POST /api/validate. `text` may be null; null counts as safe."""

    text: Optional[str] = Field(default=None, description="Free-text field to screen")


class ValidateResponse(BaseModel):
    """
    What:  Verdict for one screened field.
    Why 200 for rejections: A rejection is an expected outcome, not an error.
           The client shows `message` next to the field and blocks submit.
    """

    safe: bool
    rule: Optional[str] = Field(default=None, description="Name of the rule that matched")
    reason: Optional[str] = Field(default=None, description="Stable rejection reason")
    message: str = Field(default="", description="Display text; empty when safe")


# ══════════════════════════════════════════════════════════════════════════
# Posts overview
# ══════════════════════════════════════════════════════════════════════════


class PinStatus(BaseModel):
    """How many of the limited pin slots are in use."""

    pinned_count: int
    max_pinned: int
    can_pin_more: bool
    pinned_post_ids: List[int]


class ReplyAlert(BaseModel):
    """
    What:  Home-page badge state for one user.
    message is None when there is nothing to show.
    """

    username: str
    unread_count: int
    message: Optional[str] = None


# ══════════════════════════════════════════════════════════════════════════
# Error & health
# ══════════════════════════════════════════════════════════════════════════


class ErrorResponse(BaseModel):
    """
    Standardized error response format for all API errors.

    Example:
        {
            "error": "invalid_argument",
            "message": "Username cannot be empty",
            "details": {"argument": "username"},
            "request_id": "1f2e3d4c"
        }
    """

    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
