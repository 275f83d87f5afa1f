"""
Cursor-based pagination utilities.

Provides the wire envelope shared by every `Get{Resource}sWithCursor` listing
and the encode/decode functions for the opaque cursor strings the backend mints.
A cursor anchors a page boundary to a record (its sort value plus its id), not
to an offset, so it stays valid when records are inserted or deleted upstream.
"""

import base64
from datetime import date, datetime, time, timedelta, timezone
from decimal import Decimal
from enum import Enum
from typing import Any, Generic, TypeVar

from pydantic import BaseModel as PydanticBaseModel
from pydantic import Field, computed_field, field_validator, model_validator

from hoopers_api.domain.exceptions import InvalidArgumentError
from hoopers_api.utils.model_utils import BaseModel

T = TypeVar("T")

CURSOR_VERSION = 1

SortValue = bool | int | float | str | None


class PageDirection(str, Enum):
    NEXT = "next"
    PREVIOUS = "previous"

    @classmethod
    def parse(cls, value: "str | PageDirection") -> "PageDirection":
        if isinstance(value, PageDirection):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise InvalidArgumentError(
            f"Invalid direction {value!r}; expected 'next' or 'previous'"
        )


class CursorData(PydanticBaseModel):
    """Internal cursor structure - versioned for future compatibility."""

    v: int = CURSOR_VERSION
    sort_by: str  # Canonical sort field the cursor was minted under
    value: SortValue = None  # Normalized sort value of the anchor record
    id: str  # Anchor record id, the tie-breaker


def normalize_sort_value(value: Any) -> SortValue:
    """
    Reduce a record's sort value to a JSON primitive that orders the same way
    as the value itself. Naive datetimes are taken as UTC.
    """
    if value is None or isinstance(value, bool | int | float | str):
        return value
    if isinstance(value, Enum):
        return normalize_sort_value(value.value)
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.timestamp()
    if isinstance(value, date):
        return value.toordinal()
    if isinstance(value, time):
        return value.hour * 3600 + value.minute * 60 + value.second + value.microsecond / 1e6
    if isinstance(value, timedelta):
        return value.total_seconds()
    if isinstance(value, Decimal):
        return float(value)
    return str(value)


def encode_cursor(sort_by: str, value: Any, id: str) -> str:
    """
    Encode a page boundary into an opaque cursor string.

    Args:
        sort_by: Canonical name of the sort field
        value: The anchor record's value for that field
        id: The anchor record's id

    Returns:
        URL-safe base64 cursor string without padding
    """
    cursor_data = CursorData(
        sort_by=sort_by, value=normalize_sort_value(value), id=str(id)
    )
    raw = cursor_data.model_dump_json().encode("utf-8")
    return base64.urlsafe_b64encode(raw).decode("ascii").rstrip("=")


def decode_cursor(cursor: str) -> CursorData:
    """
    Decode cursor string back to pagination data.

    Raises:
        InvalidArgumentError: If the cursor is empty, malformed or from an
            unsupported version
    """
    value = (cursor or "").strip()
    if not value:
        raise InvalidArgumentError("Empty cursor")

    padding = "=" * (-len(value) % 4)
    try:
        raw = base64.urlsafe_b64decode((value + padding).encode("ascii"))
        cursor_data = CursorData.model_validate_json(raw)
    except Exception as e:
        raise InvalidArgumentError("Invalid cursor format", detail=str(e)) from e

    if cursor_data.v != CURSOR_VERSION:
        raise InvalidArgumentError(f"Unsupported cursor version {cursor_data.v}")
    return cursor_data


class CursorPaginatedResult(BaseModel, Generic[T]):
    """Response wrapper with cursor pagination metadata."""

    items: list[T] = Field(default_factory=list)
    next_cursor: str | None = None
    previous_cursor: str | None = None
    has_more: bool = False
    direction: PageDirection = PageDirection.NEXT
    sort_by: str | None = None

    @field_validator("direction", mode="before")
    @classmethod
    def parse_direction(cls, value: Any) -> Any:
        if value is None:
            return PageDirection.NEXT
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @model_validator(mode="after")
    def derive_has_more(self):
        # hasMore always follows the cursor for the requested direction.
        cursor = (
            self.next_cursor
            if self.direction == PageDirection.NEXT
            else self.previous_cursor
        )
        self.has_more = bool(cursor)
        return self

    @computed_field
    @property
    def count(self) -> int:
        return len(self.items)
