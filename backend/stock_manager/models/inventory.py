"""
Stock Manager Backend — Inventory SQLAlchemy Models
====================================================

What:  ORM models for the four tables of the `component_manager` schema.
Why:   Gives the CRUD service typed columns to build parameterized
       INSERT/SELECT/UPDATE/DELETE ... RETURNING statements from.
How:   Inherits from the shared Base, whose metadata carries the schema.

Hierarchy:
    category ──< sub_category
        │             │
        └──────< component >──┘
                     │
                     └──< sub_component (super_uuid)

Referential integrity lives in the store: the application never checks a
foreign key before writing, a dangling reference surfaces as a StoreError.
"""

from uuid import UUID
from datetime import datetime
from typing import Optional

from sqlalchemy import ForeignKey, Integer, Text, text
from sqlalchemy.dialects import postgresql
from sqlalchemy.orm import Mapped, mapped_column

from stock_manager.config import settings
from stock_manager.database import Base


def _fk(table: str) -> ForeignKey:
    return ForeignKey(f"{settings.db_schema}.{table}.uuid")


def _uuid_pk() -> Mapped[UUID]:
    # The store generates identifiers; the application never supplies one.
    return mapped_column(
        postgresql.UUID(as_uuid=True),
        primary_key=True,
        server_default=text("gen_random_uuid()"),
    )


class Category(Base):
    """Root of the hierarchy."""

    __tablename__ = "category"

    uuid: Mapped[UUID] = _uuid_pk()
    category_name: Mapped[str] = mapped_column(Text, nullable=False)

    def __repr__(self) -> str:
        return f"<Category(uuid={self.uuid}, name='{self.category_name}')>"


class SubCategory(Base):
    __tablename__ = "sub_category"

    uuid: Mapped[UUID] = _uuid_pk()
    sub_category_name: Mapped[str] = mapped_column(Text, nullable=False)
    parent: Mapped[UUID] = mapped_column(
        postgresql.UUID(as_uuid=True), _fk("category"), nullable=False
    )

    def __repr__(self) -> str:
        return f"<SubCategory(uuid={self.uuid}, parent={self.parent})>"


class Component(Base):
    """
    A stocked part, filed under one category and one sub-category.

    `date_checked` is the last stock-take time, stored with time zone.
    """

    __tablename__ = "component"

    uuid: Mapped[UUID] = _uuid_pk()
    reference: Mapped[str] = mapped_column(Text, nullable=False)
    quantity: Mapped[int] = mapped_column(Integer, nullable=False)
    date_checked: Mapped[datetime] = mapped_column(postgresql.TIMESTAMP(timezone=True), nullable=False)
    category: Mapped[UUID] = mapped_column(
        postgresql.UUID(as_uuid=True), _fk("category"), nullable=False
    )
    sub_category: Mapped[UUID] = mapped_column(
        postgresql.UUID(as_uuid=True), _fk("sub_category"), nullable=False
    )

    def __repr__(self) -> str:
        return f"<Component(uuid={self.uuid}, reference='{self.reference}', quantity={self.quantity})>"


class SubComponent(Base):
    """A component nested inside another component (`super_uuid`) at a given place."""

    __tablename__ = "sub_component"

    uuid: Mapped[UUID] = _uuid_pk()
    super_uuid: Mapped[UUID] = mapped_column(
        postgresql.UUID(as_uuid=True), _fk("component"), nullable=False
    )
    place: Mapped[str] = mapped_column(Text, nullable=False)
    note: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<SubComponent(uuid={self.uuid}, super_uuid={self.super_uuid}, place='{self.place}')>"
