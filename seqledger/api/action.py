# seqledger/api/action.py
"""
Actions are the individual issue / transfer / retire movements recorded in
the ledger. Two queries run against them: ``ListBuilder`` returns matching
Action records, ``SumBuilder`` sums their amounts grouped by ``group_by``
fields and returns ActionSum records.

List all actions after a certain time::

    actions = (
        ListBuilder()
        .set_filter("timestamp > $1")
        .add_filter_parameter("1985-10-26T01:21:00Z")
        .get_iterable(client)
    )
    for a in actions:
        print(a.timestamp, a.amount)
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Optional

from seqledger.core.encoding import parse_timestamp, rename_legacy
from seqledger.http import BaseClient
from seqledger.query import builder

Tags = Dict[str, Any]


@dataclass(frozen=True)
class ActionSnapshot:
    """Copy of the related tags as they were when the transaction happened."""
    action_tags: Tags = field(default_factory=dict)
    flavor_tags: Tags = field(default_factory=dict)
    source_account_tags: Tags = field(default_factory=dict)
    destination_account_tags: Tags = field(default_factory=dict)
    token_tags: Tags = field(default_factory=dict)
    transaction_tags: Tags = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "ActionSnapshot":
        data = rename_legacy(data or {})
        return cls(
            action_tags=data.get("action_tags") or {},
            flavor_tags=data.get("flavor_tags") or {},
            source_account_tags=data.get("source_account_tags") or {},
            destination_account_tags=data.get("destination_account_tags") or {},
            token_tags=data.get("token_tags") or {},
            transaction_tags=data.get("transaction_tags") or {},
        )


@dataclass(frozen=True)
class Action:
    id: str
    type: str                                   # "issue", "transfer" or "retire"
    amount: int
    flavor_id: Optional[str] = None
    transaction_id: Optional[str] = None
    timestamp: Optional[datetime] = None
    source_account_id: Optional[str] = None
    destination_account_id: Optional[str] = None
    tags: Tags = field(default_factory=dict)
    snapshot: ActionSnapshot = field(default_factory=ActionSnapshot)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Action":
        data = rename_legacy(data)
        return cls(
            id=data["id"],
            type=data["type"],
            amount=int(data["amount"]),
            flavor_id=data.get("flavor_id"),
            transaction_id=data.get("transaction_id"),
            timestamp=parse_timestamp(data.get("timestamp")),
            source_account_id=data.get("source_account_id"),
            destination_account_id=data.get("destination_account_id"),
            tags=data.get("tags") or {},
            snapshot=ActionSnapshot.from_dict(data.get("snapshot")),
        )


@dataclass(frozen=True)
class ActionSum:
    """Summed amount for one combination of the grouped fields.

    Only the fields named in ``group_by`` are set; ``fields`` keeps all of
    them as returned, including nested tag paths.
    """
    amount: int
    type: Optional[str] = None
    flavor_id: Optional[str] = None
    source_account_id: Optional[str] = None
    destination_account_id: Optional[str] = None
    tags: Optional[Tags] = None
    fields: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ActionSum":
        data = rename_legacy(data)
        return cls(
            amount=int(data["amount"]),
            type=data.get("type"),
            flavor_id=data.get("flavor_id"),
            source_account_id=data.get("source_account_id"),
            destination_account_id=data.get("destination_account_id"),
            tags=data.get("tags"),
            fields={k: v for k, v in data.items() if k != "amount"},
        )


class ListBuilder(builder.ListBuilder[Action]):
    path = "list-actions"
    decode_item = Action.from_dict


class SumBuilder(builder.SumBuilder[ActionSum]):
    path = "sum-actions"
    decode_item = ActionSum.from_dict


class TagUpdateBuilder:
    """Replaces the tags on a single action."""

    def __init__(self):
        self._id: Optional[str] = None
        self._tags: Tags = {}

    def for_id(self, id: str) -> "TagUpdateBuilder":
        self._id = id
        return self

    def set_tags(self, tags: Tags) -> "TagUpdateBuilder":
        self._tags = dict(tags)
        return self

    def to_dict(self) -> dict:
        return {"id": self._id, "tags": self._tags}

    def update(self, client: BaseClient) -> None:
        if not self._id:
            raise ValueError("action id is required (call for_id first)")
        client.post("update-action-tags", self.to_dict())
