"""
Stock Manager Backend — CRUD Service
=====================================

What:  One statement per operation against a single inventory table:
       create, list, list-by-relation, update-by-id, delete-by-id.
Why:   The four entities share an identical contract, so one class
       parametrized by model, response schema and display names covers
       them all without four copies of the same boilerplate.
How:   Builds SQLAlchemy Core-style statements with RETURNING, executes them
       through the request's AsyncSession, and maps returned rows through
       the entity's response schema.

Statement shapes (all values are bound parameters):
    INSERT INTO component_manager.<table> (...) VALUES (...) RETURNING *
    SELECT * FROM component_manager.<table> [WHERE <column> = :value]
    UPDATE component_manager.<table> SET ... WHERE uuid = :uuid RETURNING *
    DELETE FROM component_manager.<table> WHERE uuid = :uuid RETURNING uuid

Transactions:
    Writes commit inside the service, before the handler returns, so a
    failing COMMIT is reported like any other store failure instead of
    after the response is already sent.

Error Handling Strategy:
    Any SQLAlchemyError, from the statement or its commit, becomes a
    StoreError carrying "Failed to <action> <entity>" and the driver's own
    message. Zero rows from UPDATE/DELETE becomes NotFoundError. Nothing is retried.
"""

import logging
from typing import Any, List, Type
from uuid import UUID

from pydantic import BaseModel
from sqlalchemy import delete, insert, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from stock_manager.database import Base
from stock_manager.exceptions import NotFoundError, StoreError
from stock_manager.models import Category, Component, SubCategory, SubComponent
from stock_manager.schemas.inventory import (
    CategoryOut,
    ComponentOut,
    SubCategoryOut,
    SubComponentOut,
)

logger = logging.getLogger(__name__)


def store_message(exc: SQLAlchemyError) -> str:
    """The driver's message when there is one, SQLAlchemy's otherwise."""
    orig = getattr(exc, "orig", None)
    return str(orig) if orig is not None else str(exc)


class CrudService:
    """
    Stateless CRUD operations for one entity.

    Args:
        model:    ORM model of the table
        schema:   Response model each returned row is mapped to
        entity:   Lower-case name used in failure messages ("sub-category")
        plural:   Plural used for list failures ("sub-categories")
        label:    Capitalized name used in 404 messages ("Sub-category")
    """

    def __init__(
        self,
        model: Type[Base],
        schema: Type[BaseModel],
        entity: str,
        plural: str,
        label: str,
    ):
        self.model = model
        self.schema = schema
        self.entity = entity
        self.plural = plural
        self.label = label

    # ── Helpers ───────────────────────────────────────────────────────────

    async def _rows(
        self, db: AsyncSession, statement: Any, failure: str, commit: bool = False
    ) -> list:
        try:
            result = await db.execute(statement)
            rows = list(result.scalars().all())
            if commit:
                await db.commit()
            return rows
        except SQLAlchemyError as e:
            details = store_message(e)
            logger.error("%s: %s", failure, details)
            raise StoreError(message=failure, details=details, context={"table": self.model.__tablename__})

    def _to_response(self, rows: list) -> List[BaseModel]:
        return [self.schema.model_validate(row) for row in rows]

    # ── Operations ────────────────────────────────────────────────────────

    async def create(self, db: AsyncSession, payload: BaseModel) -> List[BaseModel]:
        """Insert one row; returns it wrapped in a list."""
        statement = insert(self.model).values(**payload.model_dump()).returning(self.model)
        rows = await self._rows(db, statement, f"Failed to create {self.entity}", commit=True)
        logger.info("Created %s %s", self.entity, rows[0].uuid if rows else "?")
        return self._to_response(rows)

    async def list_all(self, db: AsyncSession) -> List[BaseModel]:
        statement = select(self.model)
        rows = await self._rows(db, statement, f"Failed to fetch {self.plural}")
        return self._to_response(rows)

    async def list_by(self, db: AsyncSession, column: str, value: UUID) -> List[BaseModel]:
        """
        Relation-scoped list: rows whose foreign-key `column` equals `value`.

        An unknown parent simply yields an empty list; no existence check
        is made on the referenced row.
        """
        statement = select(self.model).where(getattr(self.model, column) == value)
        rows = await self._rows(db, statement, f"Failed to fetch {self.plural}")
        return self._to_response(rows)

    async def update(self, db: AsyncSession, uuid: UUID, payload: BaseModel) -> List[BaseModel]:
        """
        Replace every mutable field of the row `uuid`.

        Raises:
            NotFoundError: no row has that identifier (→ 404)
            StoreError:    the store rejected the statement (→ 500)
        """
        statement = (
            update(self.model)
            .where(self.model.uuid == uuid)
            .values(**payload.model_dump())
            .returning(self.model)
            .execution_options(synchronize_session=False)
        )
        rows = await self._rows(db, statement, f"Failed to update {self.entity}", commit=True)
        if not rows:
            raise NotFoundError(resource=self.label, resource_id=str(uuid))
        logger.info("Updated %s %s", self.entity, uuid)
        return self._to_response(rows)

    async def delete(self, db: AsyncSession, uuid: UUID) -> None:
        """Hard-delete the row `uuid`; NotFoundError when nothing matched."""
        statement = (
            delete(self.model)
            .where(self.model.uuid == uuid)
            .returning(self.model.uuid)
            .execution_options(synchronize_session=False)
        )
        rows = await self._rows(db, statement, f"Failed to delete {self.entity}", commit=True)
        if not rows:
            raise NotFoundError(resource=self.label, resource_id=str(uuid))
        logger.info("Deleted %s %s", self.entity, uuid)


# ── Singleton Instances ───────────────────────────────────────────────────
category_service = CrudService(Category, CategoryOut, "category", "categories", "Category")
sub_category_service = CrudService(
    SubCategory, SubCategoryOut, "sub-category", "sub-categories", "Sub-category"
)
component_service = CrudService(Component, ComponentOut, "component", "components", "Component")
sub_component_service = CrudService(
    SubComponent, SubComponentOut, "sub-component", "sub-components", "Sub-component"
)
