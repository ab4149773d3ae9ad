# seqledger/http/__init__.py
"""
Client interface used by builders and iterables.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional

from seqledger.core.types import ItemDecoder, Page, Query

logger = logging.getLogger(__name__)


class BaseClient(ABC):
    """Anything that can POST a JSON body to a ledger endpoint."""

    @abstractmethod
    def post(self, path: str, body: Mapping[str, Any]) -> Any:
        """Send ``body`` to ``path`` and return the decoded JSON response.

        Must raise ConnectivityError, JSONError or APIError on failure.
        """

    def request(self, path: str, query: Query, decode_item: ItemDecoder) -> Page:
        logger.debug("fetching page from %s (cursor=%s)", path, query.cursor is not None)
        page = Page.decode(self.post(path, query.to_dict()), decode_item)
        logger.debug("%s returned %d items, last_page=%s", path, len(page.items), page.last_page)
        return page

    def close(self) -> None:
        pass

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()


def create_client(
    url: Optional[str] = None,
    ledger: Optional[str] = None,
    credential: Optional[str] = None,
    timeout: Optional[float] = None,
) -> "Client":
    from seqledger.config import ClientConfig
    from .client import Client

    return Client(ClientConfig.resolve(url=url, ledger=ledger, credential=credential, timeout=timeout))


from .client import Client

__all__ = ["BaseClient", "Client", "create_client"]
