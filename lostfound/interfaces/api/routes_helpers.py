"""Helper utilities shared across API route handlers."""

from fastapi import HTTPException, status
from fastapi.responses import JSONResponse

from lostfound.application.errors import (
    ConflictError,
    NotFoundError,
    PermissionDeniedError,
)

DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 200


def normalize_paging(page: int, page_size: int) -> tuple[int, int]:
    """Clamp paging parameters to the supported range.

    ``page`` below 1 becomes 1; a ``page_size`` outside ``1..200`` falls back
    to the default of 20.
    """

    if page <= 0:
        page = 1
    if page_size <= 0 or page_size > MAX_PAGE_SIZE:
        page_size = DEFAULT_PAGE_SIZE
    return page, page_size


def http_error(exc: ValueError) -> HTTPException:
    """Translate a use case error into the matching HTTP error."""

    if isinstance(exc, NotFoundError):
        code = status.HTTP_404_NOT_FOUND
    elif isinstance(exc, PermissionDeniedError):
        code = status.HTTP_403_FORBIDDEN
    elif isinstance(exc, ConflictError):
        code = status.HTTP_409_CONFLICT
    else:
        code = status.HTTP_400_BAD_REQUEST
    return HTTPException(status_code=code, detail=str(exc))


def conflict_response(exc: ConflictError) -> JSONResponse:
    """Return ``{error, itemCount}`` with status 409."""

    content: dict[str, object] = {"error": str(exc)}
    if exc.item_count is not None:
        content["itemCount"] = exc.item_count
    return JSONResponse(status_code=status.HTTP_409_CONFLICT, content=content)
