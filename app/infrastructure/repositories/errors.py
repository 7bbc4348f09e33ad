"""Translation of driver failures into :class:`StorageError`."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.domain.rules import StorageError

logger = logging.getLogger(__name__)


@contextmanager
def storage_errors(session: Session, action: str) -> Iterator[None]:
    """Roll back and re-raise database failures as :class:`StorageError`."""

    try:
        yield
    except SQLAlchemyError as exc:
        session.rollback()
        logger.exception("Database failure while %s", action)
        raise StorageError(f"Database failure while {action}") from exc


__all__ = ["storage_errors"]
