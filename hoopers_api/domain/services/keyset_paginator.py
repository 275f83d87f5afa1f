from collections.abc import Iterable, Sequence
from functools import cmp_to_key
from typing import Any, Generic, TypeVar

from hoopers_api.config.resources import ResourceDefinition, SortField
from hoopers_api.domain.exceptions import InvalidArgumentError
from hoopers_api.utils.logging import make_logger
from hoopers_api.utils.model_utils import BaseModel, normalize_key
from hoopers_api.utils.pagination import (
    CursorPaginatedResult,
    PageDirection,
    SortValue,
    decode_cursor,
    encode_cursor,
    normalize_sort_value,
)

logger = make_logger(__name__)

R = TypeVar("R", bound=BaseModel)

SortKey = tuple[SortValue, str]


def compare_sort_values(left: SortValue, right: SortValue, descending: bool) -> int:
    """
    Three-way comparison of two normalized sort values.

    Nulls sort after every non-null value whichever way the field is ordered.
    """
    if left is None and right is None:
        return 0
    if left is None:
        return 1
    if right is None:
        return -1
    if left == right:
        return 0
    try:
        result = -1 if left < right else 1
    except TypeError:
        result = -1 if str(left) < str(right) else 1
    return -result if descending else result


def compare_keys(left: SortKey, right: SortKey, descending: bool) -> int:
    result = compare_sort_values(left[0], right[0], descending)
    if result:
        return result
    # Ties break on id, ascending in both directions.
    if left[1] == right[1]:
        return 0
    return -1 if left[1] < right[1] else 1


class KeysetPaginator(Generic[R]):
    """
    Cursor pagination over an in-memory collection.

    Records are ordered by the sort field in its own direction, then by id
    ascending. A cursor anchors a page edge to a record's (sort value, id) pair
    rather than to an offset, so pages stay stable while records are inserted
    or removed elsewhere in the collection. A record inserted right next to the
    anchor may still be skipped or repeated once.
    """

    def __init__(self, definition: ResourceDefinition):
        self.definition = definition

    def sort_key(self, record: R, field: SortField) -> SortKey:
        value = normalize_sort_value(getattr(record, field.attribute, None))
        return value, self.definition.id_of(record) or ""

    def order(self, records: Iterable[R], field: SortField) -> list[R]:
        def compare(left: R, right: R) -> int:
            return compare_keys(
                self.sort_key(left, field),
                self.sort_key(right, field),
                field.descending,
            )

        return sorted(records, key=cmp_to_key(compare))

    def cursor_for(self, record: R, field: SortField) -> str:
        value, record_id = self.sort_key(record, field)
        return encode_cursor(field.name, value, record_id)

    def paginate(
        self,
        records: Iterable[R],
        cursor: str | None = None,
        limit: int = 20,
        direction: str | PageDirection = PageDirection.NEXT,
        sort_by: str | None = None,
    ) -> CursorPaginatedResult[R]:
        """
        Return one page of `records`.

        `next` without a cursor starts at the beginning of the collection.
        `next` with a cursor returns the records strictly after the anchor;
        `previous` returns the last `limit` records strictly before it, still in
        forward order.

        Raises:
            InvalidArgumentError: For a non-positive limit, an unknown direction
                or sort field, a malformed cursor, a cursor minted under another
                sort field, or a `previous` request without a cursor
        """
        if isinstance(limit, bool) or not isinstance(limit, int) or limit <= 0:
            raise InvalidArgumentError(f"limit must be a positive integer, got {limit!r}")
        page_direction = PageDirection.parse(direction)
        field = self.definition.resolve_sort(sort_by)
        if cursor is not None and not cursor.strip():
            cursor = None
        if cursor is None and page_direction == PageDirection.PREVIOUS:
            raise InvalidArgumentError(
                "A cursor is required to request the previous page"
            )

        ordered = self.order(records, field)
        keys = [self.sort_key(record, field) for record in ordered]
        total = len(ordered)

        if cursor is None:
            start, end = 0, min(limit, total)
        else:
            anchor = self._anchor(cursor, field)
            if page_direction == PageDirection.NEXT:
                start = self._first_index(
                    keys, lambda key: compare_keys(key, anchor, field.descending) > 0
                )
                end = min(start + limit, total)
            else:
                end = self._first_index(
                    keys, lambda key: compare_keys(key, anchor, field.descending) >= 0
                )
                start = max(0, end - limit)

        page = ordered[start:end]
        next_cursor = None
        previous_cursor = None
        if page:
            if end < total:
                next_cursor = self.cursor_for(page[-1], field)
            if start > 0:
                previous_cursor = self.cursor_for(page[0], field)

        logger.debug(
            f"Paginated {self.definition.plural_name}: {len(page)} of {total} "
            f"(direction={page_direction.value}, sortBy={field.name})"
        )
        return CursorPaginatedResult[Any](
            items=page,
            next_cursor=next_cursor,
            previous_cursor=previous_cursor,
            direction=page_direction,
            sort_by=field.name,
        )

    def _anchor(self, cursor: str, field: SortField) -> SortKey:
        cursor_data = decode_cursor(cursor)
        if normalize_key(cursor_data.sort_by) != normalize_key(field.name):
            raise InvalidArgumentError(
                f"Cursor was issued for sortBy {cursor_data.sort_by!r}, "
                f"not {field.name!r}"
            )
        return cursor_data.value, cursor_data.id

    @staticmethod
    def _first_index(keys: Sequence[SortKey], predicate) -> int:
        for index, key in enumerate(keys):
            if predicate(key):
                return index
        return len(keys)
