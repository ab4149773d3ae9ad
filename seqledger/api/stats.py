# seqledger/api/stats.py
from dataclasses import dataclass
from typing import Any, Dict

from seqledger.core.encoding import rename_legacy
from seqledger.exceptions import JSONError
from seqledger.http import BaseClient


@dataclass(frozen=True)
class Stats:
    """Usage counters for the ledger."""
    flavor_count: int
    account_count: int
    tx_count: int

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Stats":
        data = rename_legacy(data)
        return cls(
            flavor_count=int(data.get("flavor_count", 0)),
            account_count=int(data.get("account_count", 0)),
            tx_count=int(data.get("tx_count", 0)),
        )


def get(client: BaseClient) -> Stats:
    data = client.post("stats", {})
    if not isinstance(data, dict):
        raise JSONError("stats response is not a JSON object")
    try:
        return Stats.from_dict(data)
    except (TypeError, ValueError) as e:
        raise JSONError(f"Could not decode stats: {e}") from e
