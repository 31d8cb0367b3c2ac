"""Exception handlers mapping sort errors to RFC 7807 responses.

An unknown direction in strict parsing is the client's fault (400). An
ambiguous default declaration, a mixed-direction legacy fold or a bad
configuration is a server-side authoring error (500).
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request

from sortparam.api.schemas import (
    ERROR_TITLES,
    ErrorCode,
    ProblemDetail,
    ProblemJSONResponse,
    get_error_type_uri,
)
from sortparam.exceptions import (
    AmbiguousSortDefaultError,
    InvalidDirectionError,
    MixedSortDirectionError,
    SortParamError,
)

logger = logging.getLogger(__name__)


def _problem_response(
    code: ErrorCode, status: int, detail: str, request: Request
) -> ProblemJSONResponse:
    problem = ProblemDetail(
        type=get_error_type_uri(code),
        title=ERROR_TITLES.get(code, "Error"),
        status=status,
        detail=detail,
        instance=str(request.url.path),
        code=code.value,
    )
    return ProblemJSONResponse(content=problem.model_dump(), status_code=status)


def _classify(exc: SortParamError) -> tuple[ErrorCode, int]:
    if isinstance(exc, InvalidDirectionError):
        return ErrorCode.INVALID_SORT_DIRECTION, 400
    if isinstance(exc, AmbiguousSortDefaultError):
        return ErrorCode.AMBIGUOUS_SORT_DEFAULT, 500
    if isinstance(exc, MixedSortDirectionError):
        return ErrorCode.MIXED_SORT_DIRECTIONS, 500
    return ErrorCode.SORT_CONFIGURATION_ERROR, 500


async def sort_error_handler(
    request: Request, exc: SortParamError
) -> ProblemJSONResponse:
    """Handle SortParamError and convert to RFC 7807 Problem Detail.

    Parameters
    ----------
    request : Request
        The incoming FastAPI request.
    exc : SortParamError
        The sort error raised while handling the request.

    Returns
    -------
    ProblemJSONResponse
        Problem response with a 400 or 500 status.
    """
    code, status = _classify(exc)

    if status >= 500:
        logger.error("Sort error on %s: %s", request.url.path, exc.message)
    else:
        logger.warning("Sort error on %s: %s", request.url.path, exc.message)

    return _problem_response(code, status, exc.message, request)


def register_exception_handlers(app: FastAPI) -> None:
    """Register sort error handlers on the FastAPI app.

    Examples
    --------
    >>> from fastapi import FastAPI
    >>> app = FastAPI()
    >>> register_exception_handlers(app)
    """
    app.add_exception_handler(SortParamError, sort_error_handler)  # type: ignore[arg-type]
