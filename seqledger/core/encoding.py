# seqledger/core/encoding.py
from datetime import datetime
from typing import Any, Dict, Optional

from dateutil.parser import isoparse

# Older API versions used these names; responses may still carry them.
LEGACY_FIELDS = {
    "asset_id": "flavor_id",
    "asset_tags": "flavor_tags",
    "asset_count": "flavor_count",
    "keys": "key_ids",
}


def rename_legacy(data: Dict[str, Any]) -> Dict[str, Any]:
    """Map deprecated response fields onto their current names.

    A current field always wins over its legacy counterpart.
    """
    out = dict(data)
    for old, new in LEGACY_FIELDS.items():
        if old in out:
            value = out.pop(old)
            out.setdefault(new, value)
    return out


def parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    """Parse an RFC 3339 timestamp as sent by the API.

    Accepts a "Z" suffix and any fractional-second precision (digits past
    microseconds are truncated).
    """
    if value is None:
        return None
    if not isinstance(value, str):
        raise TypeError(f"timestamp must be a string, got {type(value).__name__}")
    return isoparse(value)
