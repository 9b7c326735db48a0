"""Translate use-case exceptions into HTTP errors."""

from fastapi import HTTPException, status


def to_http_error(exc: Exception) -> HTTPException:
    """Map the exceptions raised by use cases to their HTTP status."""

    if isinstance(exc, PermissionError):
        return HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(exc))
    if isinstance(exc, LookupError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
