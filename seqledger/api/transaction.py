# seqledger/api/transaction.py
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional, Tuple

from seqledger.core.encoding import parse_timestamp
from seqledger.query import builder
from .action import Action


@dataclass(frozen=True)
class Transaction:
    id: str
    timestamp: Optional[datetime] = None
    sequence_number: int = 0
    actions: Tuple[Action, ...] = ()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Transaction":
        return cls(
            id=data["id"],
            timestamp=parse_timestamp(data.get("timestamp")),
            sequence_number=int(data.get("sequence_number", 0)),
            actions=tuple(Action.from_dict(a) for a in data.get("actions") or []),
        )


class ListBuilder(builder.ListBuilder[Transaction]):
    path = "list-transactions"
    decode_item = Transaction.from_dict
