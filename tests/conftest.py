# tests/conftest.py
from typing import Any, Dict, List, Mapping, Tuple

from seqledger.http import BaseClient


class ScriptedClient(BaseClient):
    """In-memory client: serves queued responses per path and records every request body."""

    def __init__(self, responses: Dict[str, List[Any]] = None):
        self.responses = {k: list(v) for k, v in (responses or {}).items()}
        self.calls: List[Tuple[str, dict]] = []
        self.closed = False

    def post(self, path: str, body: Mapping[str, Any]) -> Any:
        self.calls.append((path, dict(body)))
        queue = self.responses.get(path)
        if not queue:
            raise AssertionError(f"unexpected request to {path}: {body}")
        resp = queue.pop(0)
        if isinstance(resp, Exception):
            raise resp
        return resp

    def close(self) -> None:
        self.closed = True


def page(items, cursor="", last_page=False) -> dict:
    return {"items": list(items), "cursor": cursor, "last_page": last_page}


def action_json(id: str, amount: int = 1, type: str = "issue", **extra) -> dict:
    d = {
        "id": id,
        "type": type,
        "amount": amount,
        "flavor_id": "usd",
        "transaction_id": "tx-" + id,
        "timestamp": "2026-01-31T12:00:00.000Z",
        "destination_account_id": "alice",
        "tags": {},
        "snapshot": {},
    }
    d.update(extra)
    return d
