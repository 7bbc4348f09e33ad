"""Shared helpers for API routes."""

from fastapi import HTTPException, status

from app.domain.rules import NotFound, StorageError


def to_http_exception(exc: Exception) -> HTTPException:
    """Translate a use case error into the matching HTTP error."""

    if isinstance(exc, NotFound):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))
    if isinstance(exc, StorageError):
        return HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="The data store is unavailable, try again later",
        )
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))


__all__ = ["to_http_exception"]
