"""Data access helpers for property listings."""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Sequence
from uuid import uuid4

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.property import Property


async def insert_property(session: AsyncSession, **fields: object) -> Property:
    """Insert a property row and return it with its id and timestamp assigned."""

    record = Property(
        id=str(uuid4()),
        created_at=datetime.now(timezone.utc),
        **fields,
    )
    session.add(record)
    await session.flush()
    return record


async def list_properties(session: AsyncSession) -> Sequence[Property]:
    """Return every property, newest first."""

    stmt: Select[tuple[Property]] = select(Property).order_by(Property.created_at.desc())
    result = await session.execute(stmt)
    return result.scalars().all()
