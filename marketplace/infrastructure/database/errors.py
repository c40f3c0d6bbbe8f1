"""Translate SQLAlchemy failures into application PersistenceError."""

from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import AsyncIterator, Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from marketplace.application.exceptions import (
    DuplicatePublicationError,
    PersistenceError,
    SlugConflictError,
)


@asynccontextmanager
async def store_errors(session: AsyncSession, operation: str) -> AsyncIterator[None]:
    """
    Wrap statements that run before commit. Any failure is rolled back, so the
    raised PersistenceError carries applied=False and the caller may retry.
    """
    try:
        yield
    except IntegrityError:
        await session.rollback()
        raise
    except SQLAlchemyError as e:
        await session.rollback()
        raise PersistenceError(f"{operation} failed: {e}", applied=False) from e


async def commit(session: AsyncSession, operation: str) -> None:
    """Commit; a failure here leaves the outcome unknown (applied=None)."""
    try:
        await session.commit()
    except SQLAlchemyError as e:
        await session.rollback()
        raise PersistenceError(f"{operation} commit failed: {e}", applied=None) from e


def publication_conflict(error: IntegrityError, slug: str, submission_id: str) -> Exception:
    """Map a unique violation on the events table to the matching application error."""
    text = str(error.orig).lower()
    if "slug" in text:
        return SlugConflictError(f"Slug already taken: {slug}")
    if "source_submission" in text:
        return DuplicatePublicationError(f"Submission already published: {submission_id}")
    return PersistenceError(f"Event insert violated a constraint: {error.orig}", applied=False)


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """sqlite hands back naive datetimes; stored values are always UTC."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)
