# seqledger/api/flavor.py
"""Flavors are the unit types held by accounts (called "assets" in older API versions)."""

from dataclasses import dataclass, field
from typing import Any, Dict, Tuple

from seqledger.core.encoding import rename_legacy
from seqledger.query import builder
from .account import key_ids


@dataclass(frozen=True)
class Flavor:
    id: str
    key_ids: Tuple[str, ...] = ()
    quorum: int = 1
    tags: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Flavor":
        data = rename_legacy(data)
        return cls(
            id=data["id"],
            key_ids=key_ids(data.get("key_ids")),
            quorum=int(data.get("quorum", 1)),
            tags=data.get("tags") or {},
        )


class ListBuilder(builder.ListBuilder[Flavor]):
    path = "list-flavors"
    decode_item = Flavor.from_dict
