"""Pagination value objects.

Every list-returning operation answers with a ``ListResult``:

    {"data": [...], "meta": {"total": 42, "page": 1, "limit": 10, "totalPages": 5}}

A ``NestedListResult`` pairs one item with a paginated child collection,
e.g. a root comment and the replies of its thread.
"""

from typing import Generic, TypeVar

from pydantic import Field

from quill.domain.value.common import WireValueObject

T = TypeVar("T")
N = TypeVar("N")


class PaginationMeta(WireValueObject):
    """Position of a page within a collection."""

    total: int = Field(ge=0)
    page: int = Field(ge=1)
    limit: int = Field(ge=1)
    total_pages: int = Field(ge=0)


class ListResult(WireValueObject, Generic[T]):
    """A list of items with optional pagination metadata."""

    data: list[T]
    meta: PaginationMeta | None = None


class NestedList(WireValueObject, Generic[N]):
    """Paginated child collection of a ``NestedListResult``."""

    data: list[N]
    meta: PaginationMeta


class NestedListResult(WireValueObject, Generic[T, N]):
    """One item plus, optionally, one page of its children."""

    item: T
    nested_list: NestedList[N] | None = None
