# seqledger/__init__.py
"""
seqledger — Python client for the Sequence ledger API.

Typed resource models, query builders and lazy cursor pagination over the
ledger's JSON endpoints.
"""

__version__ = "0.1.0"

from seqledger.config import ClientConfig
from seqledger.core.types import Page, Query
from seqledger.exceptions import (
    APIError,
    ChainError,
    ConfigurationError,
    ConnectivityError,
    JSONError,
)
from seqledger.http import BaseClient, Client, create_client

__all__ = [
    "APIError",
    "BaseClient",
    "ChainError",
    "Client",
    "ClientConfig",
    "ConfigurationError",
    "ConnectivityError",
    "JSONError",
    "Page",
    "Query",
    "create_client",
]
