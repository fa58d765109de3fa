"""
Stock Manager Backend — Sub-component Route Handlers
=====================================================

What:  POST /api/sub-components
       GET /api/sub-components/component/{component_id}
       PUT/DELETE /api/sub-components/{sub_component_id}

A sub-component places one component inside another (`super_uuid`).
`note` is optional; an omitted note is stored as NULL, never "".
"""

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from stock_manager.database import get_db_session
from stock_manager.routes._responses import (
    INVALID_BODY,
    INVALID_UUID,
    INVALID_UUID_OR_BODY,
    NOT_FOUND,
    STORE_ERROR,
)
from stock_manager.schemas.inventory import SubComponentIn, SubComponentOut
from stock_manager.services.crud_service import sub_component_service

router = APIRouter(prefix="/api/sub-components", tags=["Sub-components"])


@router.post(
    "",
    status_code=201,
    response_model=List[SubComponentOut],
    responses={**INVALID_BODY, **STORE_ERROR},
    summary="Create a sub-component",
)
async def create_sub_component(
    payload: SubComponentIn,
    db: AsyncSession = Depends(get_db_session),
) -> List[SubComponentOut]:
    return await sub_component_service.create(db, payload)


@router.get(
    "/component/{component_id}",
    response_model=List[SubComponentOut],
    responses={**INVALID_UUID, **STORE_ERROR},
    summary="List the sub-components nested in a component",
)
async def list_sub_components(
    component_id: UUID,
    db: AsyncSession = Depends(get_db_session),
) -> List[SubComponentOut]:
    return await sub_component_service.list_by(db, "super_uuid", component_id)


@router.put(
    "/{sub_component_id}",
    response_model=List[SubComponentOut],
    responses={**INVALID_UUID_OR_BODY, **NOT_FOUND, **STORE_ERROR},
    summary="Replace a sub-component",
)
async def update_sub_component(
    sub_component_id: UUID,
    payload: SubComponentIn,
    db: AsyncSession = Depends(get_db_session),
) -> List[SubComponentOut]:
    # PUT is a full replacement: leaving `note` out clears it.
    return await sub_component_service.update(db, sub_component_id, payload)


@router.delete(
    "/{sub_component_id}",
    status_code=204,
    response_class=Response,
    responses={**INVALID_UUID, **NOT_FOUND, **STORE_ERROR},
    summary="Delete a sub-component",
)
async def delete_sub_component(
    sub_component_id: UUID,
    db: AsyncSession = Depends(get_db_session),
) -> Response:
    await sub_component_service.delete(db, sub_component_id)
    return Response(status_code=204)
