# seqledger/core/canon.py
from datetime import date, datetime, timezone
from typing import Any, Mapping

try:
    import jcs
except ImportError:
    raise ImportError("Please install jcs: pip install jcs")


def to_wire(value: Any) -> Any:
    """
    Convert a request value into plain JSON types.
    Datetimes become RFC 3339 strings (naive ones are taken as UTC), dates
    become YYYY-MM-DD and tuples become lists, at any nesting depth.
    """
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, Mapping):
        return {str(k): to_wire(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_wire(v) for v in value]
    return value


def request_body(body: Mapping[str, Any]) -> bytes:
    """
    RFC 8785 canonical UTF-8 bytes for a request body, so identical queries
    always go over the wire byte-for-byte identical.
    """
    try:
        return jcs.canonicalize(to_wire(body))
    except TypeError as e:
        raise TypeError(f"request body is not JSON-serializable: {e}") from e
