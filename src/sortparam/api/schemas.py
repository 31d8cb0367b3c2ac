"""Response schemas for sort parameter errors.

Errors are reported as RFC 7807 Problem Details.

RFC 7807 Reference: https://tools.ietf.org/html/rfc7807
"""

from __future__ import annotations

from enum import Enum
from typing import Dict

from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field


class ErrorCode(str, Enum):
    """Error codes for sort parameter failures."""

    INVALID_SORT_DIRECTION = "INVALID_SORT_DIRECTION"
    AMBIGUOUS_SORT_DEFAULT = "AMBIGUOUS_SORT_DEFAULT"
    MIXED_SORT_DIRECTIONS = "MIXED_SORT_DIRECTIONS"
    SORT_CONFIGURATION_ERROR = "SORT_CONFIGURATION_ERROR"


ERROR_TITLES: Dict[ErrorCode, str] = {
    ErrorCode.INVALID_SORT_DIRECTION: "Invalid Sort Direction",
    ErrorCode.AMBIGUOUS_SORT_DEFAULT: "Ambiguous Sort Default",
    ErrorCode.MIXED_SORT_DIRECTIONS: "Mixed Sort Directions",
    ErrorCode.SORT_CONFIGURATION_ERROR: "Sort Configuration Error",
}


def get_error_type_uri(code: ErrorCode) -> str:
    """Return the problem type URI for an error code."""
    return f"urn:sortparam:error:{code.value}"


class ProblemDetail(BaseModel):
    """RFC 7807 Problem Detail body."""

    type: str = Field(..., description="URI identifying the problem type")
    title: str = Field(..., description="Short summary of the problem type")
    status: int = Field(..., description="HTTP status code")
    detail: str = Field(..., description="Explanation of this occurrence")
    instance: str = Field(..., description="Request path of this occurrence")
    code: str = Field(..., description="Machine-readable error code")

    model_config = ConfigDict(frozen=True)


class ProblemJSONResponse(JSONResponse):
    """JSONResponse using the application/problem+json media type."""

    media_type = "application/problem+json"
