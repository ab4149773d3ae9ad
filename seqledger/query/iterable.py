# seqledger/query/iterable.py
import logging
from collections import deque
from typing import Deque, Generic, Optional, TypeVar

from seqledger.core.types import ItemDecoder, Page, Query
from seqledger.http import BaseClient

logger = logging.getLogger(__name__)

T = TypeVar("T")


class _Paginator(Generic[T]):
    """Shared state: client, endpoint and the next query to issue (None once done)."""

    def __init__(self, client: BaseClient, path: str, next_query: Query, decode_item: ItemDecoder):
        self.client = client
        self.path = path
        self.decode_item = decode_item
        self._next: Optional[Query] = next_query

    @property
    def exhausted(self) -> bool:
        return self._next is None

    def _fetch(self) -> Page[T]:
        page = self.client.request(self.path, self._next, self.decode_item)
        # continuation carries the cursor only
        self._next = None if page.last_page else Query.continuation(page.cursor)
        return page


class ItemIterable(_Paginator[T]):
    """
    Lazy, forward-only iterator over individual items.

    Pages are fetched one at a time as the consumer advances. Empty pages
    that are not the last page are skipped transparently. Once exhausted,
    further ``next()`` calls stop immediately without touching the network.
    """

    def __init__(self, client: BaseClient, path: str, next_query: Query, decode_item: ItemDecoder):
        super().__init__(client, path, next_query, decode_item)
        self._buffer: Deque[T] = deque()

    def __iter__(self) -> "ItemIterable[T]":
        return self

    def __next__(self) -> T:
        while not self._buffer:
            if self.exhausted:
                raise StopIteration
            page = self._fetch()
            if not page.items and not page.last_page:
                logger.debug("empty intermediate page from %s, fetching next", self.path)
            self._buffer.extend(page.items)
        return self._buffer.popleft()


class PageIterable(_Paginator[T]):
    """Lazy iterator over whole pages; one request per ``next()``."""

    def __iter__(self) -> "PageIterable[T]":
        return self

    def __next__(self) -> Page[T]:
        if self.exhausted:
            raise StopIteration
        return self._fetch()
