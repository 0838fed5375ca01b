"""
ForumGuard Backend — Input Validation Route
=============================================

What:  POST /api/validate screens one free-text field.
Who:   The login, registration and posting screens call it before
       submitting a form, then show `message` in red under the field.

Why POST (not GET with a query string):
    The screened value may be a password. Bodies are not written to
    access logs or proxy logs; query strings are.
"""

import logging

from fastapi import APIRouter

from forumguard.middleware.request_id import request_id_var
from forumguard.schemas.forum import ValidateRequest, ValidateResponse
from forumguard.services.input_validator import validate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Validation"])


@router.post(
    "/validate",
    response_model=ValidateResponse,
    summary="Screen a text field for SQL-injection-shaped input",
    description=(
        "Runs the ordered validation rules against `text` and returns the "
        "verdict. Rejections are normal results (HTTP 200) carrying the "
        "name of the matching rule and a stable reason string."
    ),
)
async def validate_text(payload: ValidateRequest) -> ValidateResponse:
    result = validate(payload.text)

    if not result.safe:
        # Never log the text itself: it may be a password
        logger.warning(
            "[%s] Input rejected by rule '%s' (%d chars)",
            request_id_var.get(""),
            result.rule,
            len(payload.text or ""),
        )

    return ValidateResponse(
        safe=result.safe,
        rule=result.rule,
        reason=result.reason,
        message=result.message,
    )
