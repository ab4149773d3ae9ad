# seqledger/http/client.py
import logging
import uuid
from typing import Any, Mapping, Optional

import httpx

from seqledger.config import ClientConfig
from seqledger.core.canon import request_body
from seqledger.exceptions import APIError, ConnectivityError, JSONError
from . import BaseClient

logger = logging.getLogger(__name__)


class Client(BaseClient):
    """httpx-backed connection to a single ledger.

    Stateless apart from its connection pool, so one instance can be shared
    by any number of builders and iterables.
    """

    def __init__(self, config: ClientConfig, transport: Optional[httpx.BaseTransport] = None):
        self.config = config
        headers = {
            "Accept": "application/json",
            "Content-Type": "application/json",
            "User-Agent": config.user_agent,
        }
        if config.credential:
            headers["Credential"] = config.credential

        self._http: Optional[httpx.Client] = httpx.Client(
            base_url=config.base_url,
            headers=headers,
            timeout=config.timeout,
            transport=transport,
        )

    @property
    def http(self) -> httpx.Client:
        if self._http is None:
            raise RuntimeError("Client is closed")
        return self._http

    def post(self, path: str, body: Mapping[str, Any]) -> Any:
        try:
            resp = self.http.post(
                f"/{path}",
                content=request_body(body),
                headers={"Idempotency-Key": str(uuid.uuid4())},
            )
        except httpx.DecodingError as e:
            raise JSONError(f"Could not decode response body from {path}: {e}") from e
        except httpx.RequestError as e:
            logger.debug("request to %s failed: %s", path, e)
            raise ConnectivityError(f"Could not reach {self.config.base_url}/{path}: {e}") from e

        request_id = resp.headers.get("Seq-Request-Id")

        try:
            data = resp.json()
        except (ValueError, httpx.DecodingError) as e:
            raise JSONError(
                f"Response from {path} is not valid JSON (status {resp.status_code})",
                status_code=resp.status_code,
            ) from e

        if resp.is_success:
            return data

        if isinstance(data, dict) and "code" in data:
            raise APIError(
                seq_code=data.get("code"),
                message=data.get("message", ""),
                detail=data.get("detail"),
                temporary=bool(data.get("temporary", False)),
                status_code=resp.status_code,
                request_id=request_id,
                data=data.get("data"),
            )

        raise JSONError(
            f"Unexpected error response from {path} (status {resp.status_code})",
            status_code=resp.status_code,
        )

    def close(self) -> None:
        if self._http is not None:
            self._http.close()
            self._http = None
