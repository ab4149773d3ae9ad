# seqledger/core/types.py
from dataclasses import dataclass
from typing import Any, Callable, Dict, Generic, Mapping, Optional, Tuple, TypeVar

from seqledger.exceptions import JSONError

T = TypeVar("T")

ItemDecoder = Callable[[Dict[str, Any]], T]


@dataclass(frozen=True)
class Query:
    """Request descriptor sent as the body of every list/sum call.

    Once a cursor is set the server ignores everything else, so a
    continuation query carries the cursor alone (see ``continuation``).
    """
    filter: Optional[str] = None
    filter_params: Optional[Tuple[Any, ...]] = None   # $1 -> filter_params[0]
    group_by: Optional[Tuple[str, ...]] = None        # sum queries only
    cursor: Optional[str] = None
    page_size: Optional[int] = None

    @classmethod
    def continuation(cls, cursor: str) -> "Query":
        return cls(cursor=cursor)

    def to_dict(self) -> dict:
        """Wire form; only fields that are present are emitted."""
        d: dict = {}
        if self.filter is not None:
            d["filter"] = self.filter
        if self.filter_params:
            d["filter_params"] = list(self.filter_params)
        if self.group_by is not None:
            d["group_by"] = list(self.group_by)
        if self.cursor is not None:
            d["cursor"] = self.cursor
        if self.page_size is not None:
            d["page_size"] = self.page_size
        return d


@dataclass(frozen=True)
class Page(Generic[T]):
    """One batch of results plus continuation metadata."""
    items: Tuple[T, ...]
    cursor: str = ""
    last_page: bool = True

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):
        return iter(self.items)

    @classmethod
    def decode(cls, data: Any, decode_item: ItemDecoder) -> "Page[T]":
        """
        Build a page from a decoded response body ``{items, cursor, last_page}``.
        Raises JSONError if the shape is wrong or any item fails to decode;
        no partial page is ever returned.
        """
        if not isinstance(data, Mapping):
            raise JSONError(f"Expected a JSON object for page, got {type(data).__name__}")

        raw_items = data.get("items")
        if not isinstance(raw_items, list):
            raise JSONError("Page is missing 'items' list")

        last_page = data.get("last_page")
        if not isinstance(last_page, bool):
            raise JSONError("Page is missing boolean 'last_page'")

        cursor = data.get("cursor", "")
        if cursor is None:
            cursor = ""
        if not isinstance(cursor, str):
            raise JSONError("Page 'cursor' must be a string")
        if not last_page and not cursor:
            # an empty cursor would restart the listing from scratch
            raise JSONError("Page is not the last page but has no cursor")

        items = []
        for i, raw in enumerate(raw_items):
            if not isinstance(raw, Mapping):
                raise JSONError(f"Page item {i} is not a JSON object")
            try:
                items.append(decode_item(dict(raw)))
            except (KeyError, TypeError, ValueError) as e:
                raise JSONError(f"Could not decode page item {i}: {e}") from e

        return cls(items=tuple(items), cursor=cursor, last_page=last_page)
