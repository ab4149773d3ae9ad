# tests/test_core.py
from datetime import date, datetime, timedelta, timezone

import pytest

from seqledger.core.canon import request_body, to_wire
from seqledger.core.encoding import parse_timestamp, rename_legacy
from seqledger.core.types import Page, Query
from seqledger.exceptions import JSONError


def test_query_immutable():
    q = Query(filter="type=$1")
    with pytest.raises(AttributeError):
        q.cursor = "abc"


def test_query_to_dict_only_present_fields():
    q = Query(filter="type=$1", filter_params=("issue",), page_size=2)
    assert q.to_dict() == {"filter": "type=$1", "filter_params": ["issue"], "page_size": 2}


def test_query_empty_params_omitted():
    assert Query(filter="x", filter_params=()).to_dict() == {"filter": "x"}
    assert Query().to_dict() == {}


def test_continuation_is_cursor_only():
    q = Query.continuation("c1")
    assert q.to_dict() == {"cursor": "c1"}
    assert q.filter is None and q.filter_params is None
    assert q.group_by is None and q.page_size is None


def test_group_by_kept_even_if_empty():
    assert Query(group_by=()).to_dict() == {"group_by": []}


def test_page_decode():
    p = Page.decode({"items": [{"n": 1}, {"n": 2}], "cursor": "c", "last_page": False}, lambda d: d["n"])
    assert p.items == (1, 2)
    assert p.cursor == "c"
    assert p.last_page is False
    assert list(p) == [1, 2]
    assert len(p) == 2


def test_page_decode_null_cursor():
    p = Page.decode({"items": [], "cursor": None, "last_page": True}, dict)
    assert p.cursor == ""
    assert p.items == ()


@pytest.mark.parametrize("body", [
    [],
    {"cursor": "c", "last_page": True},
    {"items": {}, "cursor": "c", "last_page": True},
    {"items": [], "cursor": "c"},
    {"items": [], "cursor": "c", "last_page": "yes"},
    {"items": [], "cursor": 5, "last_page": True},
    {"items": [1], "cursor": "c", "last_page": True},
    {"items": [], "cursor": None, "last_page": False},
    {"items": [], "cursor": "", "last_page": False},
    {"items": [{"id": "A"}], "last_page": False},
])
def test_page_decode_rejects_bad_shape(body):
    with pytest.raises(JSONError):
        Page.decode(body, dict)


def test_page_decode_wraps_item_errors():
    with pytest.raises(JSONError, match="item 1"):
        Page.decode({"items": [{"id": "a"}, {}], "cursor": "", "last_page": True}, lambda d: d["id"])


def test_request_body_sorted_and_compact():
    body = request_body({"page_size": 2, "filter": "type=$1", "filter_params": ("issue",)})
    assert body == b'{"filter":"type=$1","filter_params":["issue"],"page_size":2}'


def test_request_body_encodes_datetime_params():
    q = Query(
        filter="timestamp > $1 AND timestamp < $2",
        filter_params=(datetime(1985, 10, 26, 1, 21), date(2026, 1, 31)),
    )
    assert request_body(q.to_dict()) == (
        b'{"filter":"timestamp > $1 AND timestamp < $2",'
        b'"filter_params":["1985-10-26T01:21:00Z","2026-01-31"]}'
    )


def test_to_wire_normalizes_offsets_to_utc():
    ts = datetime(2026, 1, 31, 14, 0, tzinfo=timezone(timedelta(hours=2)))
    assert to_wire({"t": ts}) == {"t": "2026-01-31T12:00:00Z"}


def test_request_body_rejects_unserializable_values():
    with pytest.raises(TypeError):
        request_body({"filter_params": [object()]})


def test_rename_legacy_prefers_current_field():
    assert rename_legacy({"asset_id": "old"}) == {"flavor_id": "old"}
    assert rename_legacy({"asset_id": "old", "flavor_id": "new"}) == {"flavor_id": "new"}


def test_parse_timestamp():
    ts = parse_timestamp("1985-10-26T01:21:00Z")
    assert ts == datetime(1985, 10, 26, 1, 21, tzinfo=timezone.utc)
    assert parse_timestamp(None) is None
    with pytest.raises(ValueError):
        parse_timestamp("not a time")


@pytest.mark.parametrize("raw, micros", [
    ("2017-01-01T00:00:00.1Z", 100000),
    ("2017-01-01T00:00:00.1234Z", 123400),
    ("2017-01-01T00:00:00.123456789Z", 123456),
    ("2017-01-01T00:00:00.1234+00:00", 123400),
])
def test_parse_timestamp_any_fraction_precision(raw, micros):
    ts = parse_timestamp(raw)
    assert ts == datetime(2017, 1, 1, 0, 0, 0, micros, tzinfo=timezone.utc)


def test_page_with_nanosecond_timestamp_decodes():
    from seqledger.api.action import Action

    p = Page.decode(
        {"items": [{"id": "a", "type": "issue", "amount": 1, "timestamp": "2017-01-01T00:00:00.123456789Z"}],
         "cursor": "", "last_page": True},
        Action.from_dict,
    )
    assert p.items[0].timestamp.microsecond == 123456
