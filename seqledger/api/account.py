# seqledger/api/account.py
from dataclasses import dataclass, field
from typing import Any, Dict, Tuple

from seqledger.core.encoding import rename_legacy
from seqledger.query import builder


@dataclass(frozen=True)
class Account:
    id: str
    key_ids: Tuple[str, ...] = ()
    quorum: int = 1
    tags: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Account":
        data = rename_legacy(data)
        return cls(
            id=data["id"],
            key_ids=key_ids(data.get("key_ids")),
            quorum=int(data.get("quorum", 1)),
            tags=data.get("tags") or {},
        )


def key_ids(raw: Any) -> Tuple[str, ...]:
    """Key references arrive either as plain ids or, in older responses, as {"id": ...} objects."""
    if not raw:
        return ()
    return tuple(k["id"] if isinstance(k, dict) else k for k in raw)


class ListBuilder(builder.ListBuilder[Account]):
    path = "list-accounts"
    decode_item = Account.from_dict
