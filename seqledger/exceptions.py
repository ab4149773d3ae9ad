# seqledger/exceptions.py
"""
Error taxonomy for ledger API calls.

Every request either returns a decoded value or raises one of
ConnectivityError, JSONError or APIError. Nothing here is retried.
"""

from typing import Any, Optional


class ChainError(Exception):
    """Base class for all errors raised by seqledger."""


class ConfigurationError(ChainError):
    """Client configuration is incomplete (no ledger name, bad URL...)."""


class ConnectivityError(ChainError):
    """The transport could not reach the server or timed out."""


class JSONError(ChainError):
    """The response body could not be decoded into the expected shape."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class APIError(ChainError):
    """Structured error payload returned by the ledger API."""

    def __init__(
        self,
        seq_code: Optional[str],
        message: str,
        detail: Optional[str] = None,
        temporary: bool = False,
        status_code: Optional[int] = None,
        request_id: Optional[str] = None,
        data: Any = None,
    ):
        self.seq_code = seq_code
        self.message = message
        self.detail = detail
        self.temporary = temporary
        self.status_code = status_code
        self.request_id = request_id
        self.data = data
        super().__init__(str(self))

    def __str__(self):
        s = f"Code: {self.seq_code} Message: {self.message}"
        if self.detail:
            s += f" Detail: {self.detail}"
        if self.request_id:
            s += f" Request-ID: {self.request_id}"
        return s
