"""
Stock Manager Backend — Pydantic Request/Response Schemas
==========================================================

What:  Pydantic models defining the API contract for the four entities.
Why:   Request bodies and store rows get explicit per-entity shapes instead
       of passing raw dicts around. Response models map a RETURNING row
       (ORM instance) to exactly the columns the API exposes.
How:   Each *In model is the rule table for its body: every field carries
       a validator that raises PydanticCustomError with the message the API
       reports. FastAPI collects all failures into one RequestValidationError,
       which main.py turns into {"errors": [{field, message}, ...]} / 400.
       Each *Out model reads ORM attributes directly (`from_attributes`).

Absent fields:
    Request fields default to None and `validate_default` is on, so a
    missing field goes through the same validator (and message) as an
    empty one. `note` is the exception: absent means NULL, but an explicit
    null is still rejected.
"""

from uuid import UUID
from datetime import datetime, timezone
from typing import Annotated, Any, List, Optional

from pydantic import (
    BaseModel,
    BeforeValidator,
    Field,
    ValidationError,
    ValidatorFunctionWrapHandler,
    field_validator,
)
from pydantic_core import PydanticCustomError

# Column is a PostgreSQL `integer`
MAX_QUANTITY = 2**31 - 1


def parse_iso8601(value: str) -> Optional[datetime]:
    """
    Parse an ISO-8601 date or datetime string.

    Returns None when the string isn't ISO-8601. Naive values are read as UTC
    so the store never has to guess the server's local zone.
    """
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def required(message: str) -> BeforeValidator:
    """Present, a string, and not empty; otherwise fails with `message`."""

    def check(value: Any) -> str:
        if not isinstance(value, str) or value == "":
            raise PydanticCustomError("required", message)
        return value

    return BeforeValidator(check)


# ══════════════════════════════════════════════════════════════════════════
# Request Models — validated write bodies (POST and PUT share them)
# ══════════════════════════════════════════════════════════════════════════


class InventoryIn(BaseModel):
    """Base for write bodies. Unknown fields are ignored."""

    model_config = {"validate_default": True}


class CategoryIn(InventoryIn):
    category_name: Annotated[str, required("Category name is required")] = None


class SubCategoryIn(InventoryIn):
    sub_category_name: Annotated[str, required("Sub-category name is required")] = None
    parent: Annotated[str, required("Parent category UUID is required")] = None


class ComponentIn(InventoryIn):
    """
    Component write body.

    `category` and `sub_category` are only checked for presence here;
    whether they name existing rows is the store's foreign keys' job.
    """

    reference: Annotated[str, required("Reference is required")] = None
    quantity: int = Field(default=None, ge=0, le=MAX_QUANTITY)
    date_checked: datetime = None
    category: Annotated[str, required("Category UUID is required")] = None
    sub_category: Annotated[str, required("Sub-category UUID is required")] = None

    @field_validator("quantity", mode="wrap")
    @classmethod
    def validate_quantity(cls, v: Any, handler: ValidatorFunctionWrapHandler) -> int:
        """
        Integers and integer strings ("12") within the column's range.

        Booleans and floats are refused outright rather than coerced.
        """
        if isinstance(v, (bool, float)):
            raise PydanticCustomError("quantity", "Quantity must be a non-negative integer")
        try:
            return handler(v)
        except ValidationError:
            raise PydanticCustomError("quantity", "Quantity must be a non-negative integer")

    @field_validator("date_checked", mode="before")
    @classmethod
    def validate_date_checked(cls, v: Any) -> datetime:
        if isinstance(v, datetime):
            return v if v.tzinfo else v.replace(tzinfo=timezone.utc)
        parsed = parse_iso8601(v) if isinstance(v, str) else None
        if parsed is None:
            raise PydanticCustomError("iso8601", "Date must be in ISO8601 format")
        return parsed


class SubComponentIn(InventoryIn):
    super_uuid: Annotated[str, required("Super UUID is required")] = None
    place: Annotated[str, required("Place is required")] = None
    note: Optional[str] = Field(default=None, validate_default=False)

    @field_validator("note", mode="before")
    @classmethod
    def validate_note(cls, v: Any) -> str:
        """Only runs when `note` was sent; an explicit null is not a string."""
        if not isinstance(v, str):
            raise PydanticCustomError("note", "Note must be a string")
        return v


# ══════════════════════════════════════════════════════════════════════════
# Response Models — one store row each; endpoints return lists of them
# ══════════════════════════════════════════════════════════════════════════


class CategoryOut(BaseModel):
    uuid: UUID
    category_name: str

    model_config = {"from_attributes": True}


class SubCategoryOut(BaseModel):
    uuid: UUID
    sub_category_name: str
    parent: UUID

    model_config = {"from_attributes": True}


class ComponentOut(BaseModel):
    uuid: UUID
    reference: str
    quantity: int
    date_checked: datetime
    category: UUID
    sub_category: UUID

    model_config = {"from_attributes": True}


class SubComponentOut(BaseModel):
    uuid: UUID
    super_uuid: UUID
    place: str
    note: Optional[str] = Field(default=None, description="Null when no note was given")

    model_config = {"from_attributes": True}


# ══════════════════════════════════════════════════════════════════════════
# Error Response Models — documented in OpenAPI `responses`
# ══════════════════════════════════════════════════════════════════════════


class FieldErrorItem(BaseModel):
    field: str = Field(description="Name of the body field that failed")
    message: str = Field(description="Human-readable rule message")


class ValidationErrorResponse(BaseModel):
    errors: List[FieldErrorItem]


class ErrorResponse(BaseModel):
    """
    Body of every non-validation error.

    Examples:
        {"error": "Invalid UUID"}
        {"error": "Component not found"}
        {"error": "Failed to create component", "details": "insert or update ..."}
    """

    error: str = Field(description="What went wrong")
    details: Optional[str] = Field(default=None, description="Raw store message on 500s")


class HealthResponse(BaseModel):
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
