"""
Stock Manager Backend — Category Route Handlers
================================================

What:  POST/GET /api/categories, PUT/DELETE /api/categories/{category_id}.
How:   FastAPI validates the UUID path parameter and the CategoryIn body;
       category_service runs the statement; global exception handlers
       format every error.

Categories are the root of the hierarchy: the list is unscoped.
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
from stock_manager.schemas.inventory import CategoryIn, CategoryOut
from stock_manager.services.crud_service import category_service

router = APIRouter(prefix="/api/categories", tags=["Categories"])


@router.post(
    "",
    status_code=201,
    response_model=List[CategoryOut],
    responses={**INVALID_BODY, **STORE_ERROR},
    summary="Create a category",
)
async def create_category(
    payload: CategoryIn,
    db: AsyncSession = Depends(get_db_session),
) -> List[CategoryOut]:
    """Returns the inserted row wrapped in a one-element array."""
    return await category_service.create(db, payload)


@router.get(
    "",
    response_model=List[CategoryOut],
    responses=STORE_ERROR,
    summary="List all categories",
)
async def list_categories(db: AsyncSession = Depends(get_db_session)) -> List[CategoryOut]:
    return await category_service.list_all(db)


@router.put(
    "/{category_id}",
    response_model=List[CategoryOut],
    responses={**INVALID_UUID_OR_BODY, **NOT_FOUND, **STORE_ERROR},
    summary="Replace a category",
)
async def update_category(
    category_id: UUID,
    payload: CategoryIn,
    db: AsyncSession = Depends(get_db_session),
) -> List[CategoryOut]:
    return await category_service.update(db, category_id, payload)


@router.delete(
    "/{category_id}",
    status_code=204,
    response_class=Response,
    responses={**INVALID_UUID, **NOT_FOUND, **STORE_ERROR},
    summary="Delete a category",
)
async def delete_category(
    category_id: UUID,
    db: AsyncSession = Depends(get_db_session),
) -> Response:
    await category_service.delete(db, category_id)
    return Response(status_code=204)
