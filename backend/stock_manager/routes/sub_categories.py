"""
Stock Manager Backend — Sub-category Route Handlers
====================================================

What:  POST /api/sub-categories
       GET/PUT/DELETE /api/sub-categories/{parent_id | sub_category_id}

Note the asymmetry on the path id: for GET it is the PARENT category's id
(relation-scoped list), for PUT and DELETE it is the sub-category's own id.
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
from stock_manager.schemas.inventory import SubCategoryIn, SubCategoryOut
from stock_manager.services.crud_service import sub_category_service

router = APIRouter(prefix="/api/sub-categories", tags=["Sub-categories"])


@router.post(
    "",
    status_code=201,
    response_model=List[SubCategoryOut],
    responses={**INVALID_BODY, **STORE_ERROR},
    summary="Create a sub-category",
)
async def create_sub_category(
    payload: SubCategoryIn,
    db: AsyncSession = Depends(get_db_session),
) -> List[SubCategoryOut]:
    return await sub_category_service.create(db, payload)


@router.get(
    "/{parent_id}",
    response_model=List[SubCategoryOut],
    responses={**INVALID_UUID, **STORE_ERROR},
    summary="List the sub-categories of a category",
)
async def list_sub_categories(
    parent_id: UUID,
    db: AsyncSession = Depends(get_db_session),
) -> List[SubCategoryOut]:
    return await sub_category_service.list_by(db, "parent", parent_id)


@router.put(
    "/{sub_category_id}",
    response_model=List[SubCategoryOut],
    responses={**INVALID_UUID_OR_BODY, **NOT_FOUND, **STORE_ERROR},
    summary="Replace a sub-category",
)
async def update_sub_category(
    sub_category_id: UUID,
    payload: SubCategoryIn,
    db: AsyncSession = Depends(get_db_session),
) -> List[SubCategoryOut]:
    return await sub_category_service.update(db, sub_category_id, payload)


@router.delete(
    "/{sub_category_id}",
    status_code=204,
    response_class=Response,
    responses={**INVALID_UUID, **NOT_FOUND, **STORE_ERROR},
    summary="Delete a sub-category",
)
async def delete_sub_category(
    sub_category_id: UUID,
    db: AsyncSession = Depends(get_db_session),
) -> Response:
    await sub_category_service.delete(db, sub_category_id)
    return Response(status_code=204)
