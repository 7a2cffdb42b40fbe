"""Property listing endpoints."""
from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..db.session import get_session
from ..schemas import properties as properties_schema
from ..services import properties as properties_service

router = APIRouter()

ERROR_RESPONSES = {
    status.HTTP_400_BAD_REQUEST: {"model": properties_schema.ErrorResponse},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": properties_schema.ErrorResponse},
}


@router.post(
    "/properties",
    response_model=properties_schema.PropertyRead,
    status_code=status.HTTP_201_CREATED,
    responses=ERROR_RESPONSES,
)
async def create_property(
    payload: properties_schema.PropertyCreate,
    session: AsyncSession = Depends(get_session),
) -> properties_schema.PropertyRead:
    """Create a property and return the stored record."""

    return await properties_service.create_property(payload, session)


@router.post(
    "/add-property",
    response_model=properties_schema.PropertyRead,
    status_code=status.HTTP_201_CREATED,
    responses=ERROR_RESPONSES,
    deprecated=True,
)
async def add_property(
    payload: properties_schema.PropertyCreate,
    session: AsyncSession = Depends(get_session),
) -> properties_schema.PropertyRead:
    """Legacy path for creating a property; keeps its original error text."""

    return await properties_service.create_property(
        payload,
        session,
        failure_message=properties_service.ADD_FAILED,
    )


@router.get(
    "/properties",
    response_model=list[properties_schema.PropertyRead],
    responses={status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": properties_schema.ErrorResponse}},
)
async def list_properties(
    session: AsyncSession = Depends(get_session),
) -> list[properties_schema.PropertyRead]:
    """Return every property, newest first."""

    return await properties_service.list_properties(session)
