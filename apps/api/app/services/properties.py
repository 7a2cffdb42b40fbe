"""Business logic for creating and listing properties."""
from __future__ import annotations

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from ..repositories import properties as properties_repo
from ..schemas import properties as schemas

logger = logging.getLogger(__name__)

CREATE_FAILED = "Failed to create property"
ADD_FAILED = "Failed to add property"
FETCH_FAILED = "Failed to fetch properties"


class PersistenceError(Exception):
    """Raised when the store rejects or cannot complete a request."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


async def create_property(
    payload: schemas.PropertyCreate,
    session: AsyncSession,
    *,
    failure_message: str = CREATE_FAILED,
) -> schemas.PropertyRead:
    """Persist a validated payload as a new property.

    The insert runs in its own transaction; a failure rolls it back and is
    reported as a ``PersistenceError`` carrying the client-facing message.
    """

    try:
        async with session.begin():
            record = await properties_repo.insert_property(session, **payload.model_dump())
            created = schemas.PropertyRead.model_validate(record)
    except Exception as exc:  # noqa: BLE001 - every store fault maps to one response
        logger.exception("Error creating property: %s", exc)
        raise PersistenceError(failure_message) from exc

    logger.info("Created property %s", created.id)
    return created


async def list_properties(session: AsyncSession) -> list[schemas.PropertyRead]:
    """Return all properties ordered by creation time, newest first."""

    try:
        records = await properties_repo.list_properties(session)
    except Exception as exc:  # noqa: BLE001 - every store fault maps to one response
        logger.exception("Error fetching properties: %s", exc)
        raise PersistenceError(FETCH_FAILED) from exc

    return [schemas.PropertyRead.model_validate(record) for record in records]
