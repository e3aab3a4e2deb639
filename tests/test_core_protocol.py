"""Tests for zkdispatch.core.protocol."""

from __future__ import annotations

import pytest

from zkdispatch.core.protocol import NULL_STAT, AclEntry, ResultBundle, Stat


def test_coerce_lifts_status_and_req_id_from_raw_hash():
    bundle = ResultBundle.coerce({"rc": 0, "req_id": 7, "data": b"hi", "stat": None})
    assert bundle.status == 0
    assert bundle.req_id == 7
    assert dict(bundle.fields) == {"data": b"hi", "stat": None}


def test_coerce_accepts_long_key_names():
    bundle = ResultBundle.coerce({"status": -101, "request_id": "abc"})
    assert bundle.status == -101
    assert bundle.req_id == "abc"
    assert dict(bundle.fields) == {}


def test_coerce_maps_legacy_field_names():
    bundle = ResultBundle.coerce({"rc": 0, "strings": ["a", "b"], "path": "/a"})
    assert bundle.get("children") == ["a", "b"]
    assert bundle.get("string") == "/a"


def test_coerce_passes_bundle_through():
    bundle = ResultBundle(status=0)
    assert ResultBundle.coerce(bundle) is bundle


def test_coerce_rejects_hash_without_status():
    with pytest.raises(ValueError, match="no status code"):
        ResultBundle.coerce({"req_id": 1})


def test_coerce_rejects_non_mapping():
    with pytest.raises(TypeError):
        ResultBundle.coerce(None)  # type: ignore[arg-type]


def test_bundle_fields_are_read_only():
    bundle = ResultBundle(status=0, fields={"data": b"x"})
    with pytest.raises(TypeError):
        bundle.fields["data"] = b"y"  # type: ignore[index]


def test_values_at_keeps_order_and_fills_missing():
    bundle = ResultBundle(status=0, fields={"stat": "S", "data": b"D"})
    assert bundle.values_at(("data", "stat", "acl")) == (b"D", "S", None)


def test_stat_from_raw_accepts_camel_case_keys():
    stat = Stat.from_raw({"version": 3, "numChildren": 2, "ephemeralOwner": 99, "unknown": 1})
    assert stat.version == 3
    assert stat.num_children == 2
    assert stat.ephemeral_owner == 99
    assert stat.exists is True


def test_stat_from_raw_none_is_null_sentinel():
    assert Stat.from_raw(None) is NULL_STAT
    assert NULL_STAT.exists is False
    assert not NULL_STAT


def test_stat_from_raw_rejects_other_types():
    with pytest.raises(TypeError):
        Stat.from_raw(42)


def test_acl_entry_fields():
    entry = AclEntry(perms=31, scheme="world", id="anyone")
    assert (entry.perms, entry.scheme, entry.id) == (31, "world", "anyone")


def test_stat_from_raw_keeps_exists_flag():
    stat = Stat.from_raw({"exists": False, "version": 0})
    assert stat.exists is False
    assert not stat
