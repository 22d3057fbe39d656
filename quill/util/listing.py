"""List result builders.

Every list endpoint shapes its output through these helpers so the
``{data, meta}`` envelope stays identical across the API.

Usage:
    comments = await repo.find_children(parent_id, limit=limit, offset=page_offset(page, limit))
    total = await repo.count_children(parent_id)
    return build_paginated_list(comments, total, page, limit)
"""

import math
from typing import Optional, Sequence, Tuple, TypeVar

from quill.domain.error import InvalidArgumentError
from quill.domain.value.pagination import (
    ListResult,
    NestedList,
    NestedListResult,
    PaginationMeta,
)

T = TypeVar("T")
N = TypeVar("N")


def _check_page(page: int, limit: int) -> None:
    if limit <= 0:
        raise InvalidArgumentError(f"limit must be positive, got {limit}")
    if page <= 0:
        raise InvalidArgumentError(f"page must be positive, got {page}")


def page_offset(page: int, limit: int) -> int:
    """Number of rows preceding ``page``.

    Raises:
        InvalidArgumentError: If page or limit is not positive
    """
    _check_page(page, limit)
    return (page - 1) * limit


def build_pagination_meta(total: int, page: int, limit: int) -> PaginationMeta:
    """Build pagination metadata.

    Args:
        total: Number of items in the whole collection
        page: Current page (1-based)
        limit: Items per page

    Returns:
        Metadata with ``total_pages = ceil(total / limit)``

    Raises:
        InvalidArgumentError: If page or limit is not positive
    """
    _check_page(page, limit)
    return PaginationMeta(
        total=total,
        page=page,
        limit=limit,
        total_pages=math.ceil(total / limit),
    )


def build_paginated_list(
    data: Sequence[T], total: int, page: int, limit: int
) -> ListResult[T]:
    """Build a paginated list result.

    Args:
        data: Items of the current page
        total: Number of items in the whole collection
        page: Current page (1-based)
        limit: Items per page

    Returns:
        ``{data, meta}`` list result

    Raises:
        InvalidArgumentError: If page or limit is not positive
    """
    return ListResult(
        data=list(data),
        meta=build_pagination_meta(total, page, limit),
    )


def build_simple_list(data: Sequence[T]) -> ListResult[T]:
    """Build an unpaginated list result (no meta)."""
    return ListResult(data=list(data))


def build_nested_list(
    item: T,
    nested_data: Optional[Sequence[N]] = None,
    nested_total: Optional[int] = None,
    nested_page: Optional[int] = None,
    nested_limit: Optional[int] = None,
) -> NestedListResult[T, N]:
    """Build an item with one paginated child collection.

    The nested list is attached only when all four nested arguments are
    given; with any of them missing the result carries the item alone.

    Args:
        item: Parent item
        nested_data: Children on the current page
        nested_total: Number of children overall
        nested_page: Current child page (1-based)
        nested_limit: Children per page

    Returns:
        ``{item, nestedList?}`` result

    Raises:
        InvalidArgumentError: If the nested list is built with a
            non-positive page or limit
    """
    if (
        nested_data is None
        or nested_total is None
        or nested_page is None
        or nested_limit is None
    ):
        return NestedListResult(item=item)

    return NestedListResult(
        item=item,
        nested_list=NestedList(
            data=list(nested_data),
            meta=build_pagination_meta(nested_total, nested_page, nested_limit),
        ),
    )


def from_find_and_count(
    result: Tuple[Sequence[T], int], page: int, limit: int
) -> ListResult[T]:
    """Build a paginated list from a ``(rows, total)`` pair."""
    data, total = result
    return build_paginated_list(data, total, page, limit)
