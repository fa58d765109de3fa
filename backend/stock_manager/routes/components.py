"""
Stock Manager Backend — Component Route Handlers
=================================================

What:  POST/GET /api/components
       GET /api/components/category/{category_id}
       GET /api/components/sub-category/{sub_category_id}
       PUT/DELETE /api/components/{component_id}

Route order matters only in principle: `/category/{category_id}` has two path
segments and `/{component_id}` has one, so they never shadow each other.
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
from stock_manager.schemas.inventory import ComponentIn, ComponentOut
from stock_manager.services.crud_service import component_service

router = APIRouter(prefix="/api/components", tags=["Components"])


@router.post(
    "",
    status_code=201,
    response_model=List[ComponentOut],
    responses={**INVALID_BODY, **STORE_ERROR},
    summary="Create a component",
    description=(
        "Body: reference, quantity (integer >= 0), date_checked (ISO 8601), "
        "category and sub_category ids. The ids are not checked here; an unknown "
        "id fails at the store's foreign key with a 500."
    ),
)
async def create_component(
    payload: ComponentIn,
    db: AsyncSession = Depends(get_db_session),
) -> List[ComponentOut]:
    return await component_service.create(db, payload)


@router.get(
    "",
    response_model=List[ComponentOut],
    responses=STORE_ERROR,
    summary="List all components",
)
async def list_components(db: AsyncSession = Depends(get_db_session)) -> List[ComponentOut]:
    return await component_service.list_all(db)


@router.get(
    "/category/{category_id}",
    response_model=List[ComponentOut],
    responses={**INVALID_UUID, **STORE_ERROR},
    summary="List the components of a category",
)
async def list_components_by_category(
    category_id: UUID,
    db: AsyncSession = Depends(get_db_session),
) -> List[ComponentOut]:
    return await component_service.list_by(db, "category", category_id)


@router.get(
    "/sub-category/{sub_category_id}",
    response_model=List[ComponentOut],
    responses={**INVALID_UUID, **STORE_ERROR},
    summary="List the components of a sub-category",
)
async def list_components_by_sub_category(
    sub_category_id: UUID,
    db: AsyncSession = Depends(get_db_session),
) -> List[ComponentOut]:
    return await component_service.list_by(db, "sub_category", sub_category_id)


@router.put(
    "/{component_id}",
    response_model=List[ComponentOut],
    responses={**INVALID_UUID_OR_BODY, **NOT_FOUND, **STORE_ERROR},
    summary="Replace a component",
)
async def update_component(
    component_id: UUID,
    payload: ComponentIn,
    db: AsyncSession = Depends(get_db_session),
) -> List[ComponentOut]:
    return await component_service.update(db, component_id, payload)


@router.delete(
    "/{component_id}",
    status_code=204,
    response_class=Response,
    responses={**INVALID_UUID, **NOT_FOUND, **STORE_ERROR},
    summary="Delete a component",
)
async def delete_component(
    component_id: UUID,
    db: AsyncSession = Depends(get_db_session),
) -> Response:
    await component_service.delete(db, component_id)
    return Response(status_code=204)
