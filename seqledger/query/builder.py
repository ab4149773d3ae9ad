# seqledger/query/builder.py
"""
Query builders shared by every resource.

Resource modules subclass ListBuilder / SumBuilder and set ``path`` and
``decode_item``; everything else (filters, dispatch, iteration) lives here.
"""

from typing import Any, Callable, ClassVar, Dict, Generic, Iterable, List, Optional, TypeVar

from seqledger.core.types import ItemDecoder, Page, Query
from seqledger.http import BaseClient
from .iterable import ItemIterable, PageIterable

T = TypeVar("T")
B = TypeVar("B", bound="QueryBuilder")


class QueryBuilder(Generic[T]):
    """
    Mutable accumulator for filter / page size state.

    ``build()`` hands out an immutable Query snapshot, so anything created from
    the builder (pages, iterables) is unaffected by later changes to it.
    Not thread-safe: keep one builder per thread.
    """

    path: ClassVar[str] = ""
    decode_item: ClassVar[Callable[[Dict[str, Any]], Any]]

    def __init__(self):
        self._filter: Optional[str] = None
        self._filter_params: List[Any] = []
        self._page_size: Optional[int] = None

    def set_filter(self: B, expr: str) -> B:
        """Filter template with positional placeholders $1, $2, ..."""
        self._filter = expr
        return self

    def add_filter_parameter(self: B, value: Any) -> B:
        """Append a value; the n-th call binds placeholder $n."""
        self._filter_params.append(value)
        return self

    def set_filter_parameters(self: B, values: Iterable[Any]) -> B:
        self._filter_params = list(values)
        return self

    def set_page_size(self: B, n: int) -> B:
        if isinstance(n, bool) or not isinstance(n, int) or n <= 0:
            raise ValueError(f"page size must be a positive integer, got {n!r}")
        self._page_size = n
        return self

    def build(self) -> Query:
        return Query(
            filter=self._filter,
            filter_params=tuple(self._filter_params),
            page_size=self._page_size,
        )

    def _decode(self) -> ItemDecoder:
        return type(self).decode_item

    def get_page(self, client: BaseClient, cursor: Optional[str] = None) -> Page[T]:
        """
        Fetch one page. With ``cursor``, only the cursor is sent and the
        builder's filter/page size are ignored (resume from a known position).
        """
        query = Query.continuation(cursor) if cursor is not None else self.build()
        return client.request(self.path, query, self._decode())

    def get_iterable(self, client: BaseClient) -> ItemIterable[T]:
        return ItemIterable(client, self.path, self.build(), self._decode())

    def get_page_iterable(self, client: BaseClient) -> PageIterable[T]:
        return PageIterable(client, self.path, self.build(), self._decode())


class ListBuilder(QueryBuilder[T]):
    """Builder for ``list-*`` endpoints returning raw records."""


class SumBuilder(QueryBuilder[T]):
    """Builder for ``sum-*`` endpoints; adds group-by fields."""

    def __init__(self):
        super().__init__()
        self._group_by: Optional[List[str]] = None

    def set_group_by(self, fields: Iterable[str]) -> "SumBuilder[T]":
        self._group_by = list(fields)
        return self

    def add_group_by_field(self, field: str) -> "SumBuilder[T]":
        if self._group_by is None:
            self._group_by = []
        self._group_by.append(field)
        return self

    def build(self) -> Query:
        q = super().build()
        if self._group_by is None:
            return q
        return Query(
            filter=q.filter,
            filter_params=q.filter_params,
            group_by=tuple(self._group_by),
            page_size=q.page_size,
        )
