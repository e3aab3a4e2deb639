"""Tests for handle factories, driven through a fake transport."""

from __future__ import annotations

from typing import Any

import pytest

from zkdispatch import (
    FACTORIES,
    NULL_STAT,
    AclEntry,
    AsyncHandle,
    Stat,
    StatusCode,
    UnknownStatusError,
    factory_for,
    new_acl_handle,
    new_children_handle,
    new_create_handle,
    new_data_handle,
    new_delete_handle,
    new_exists_handle,
    new_get_acl_handle,
    new_get_handle,
    new_handle,
    new_set_acl_handle,
    new_set_handle,
    new_stat_handle,
    new_string_handle,
    new_void_handle,
)
from zkdispatch.core.errors import NoNodeError, UnknownOperationError
from zkdispatch.core.kinds import CHILDREN, CREATE, EXISTS, GET, GET_ACL, SET, STAT, VOID


class FakeTransport:
    """Records submitted calls; completes them when the test says so."""

    def __init__(self, submit_rc: int = 0):
        self.submit_rc = submit_rc
        self.next_req_id = 1
        self.inflight: dict[int, AsyncHandle] = {}

    def submit(self, handle: AsyncHandle) -> dict[str, Any]:
        req_id = self.next_req_id
        self.next_req_id += 1
        if self.submit_rc == 0:
            self.inflight[req_id] = handle
        return {"rc": self.submit_rc, "req_id": req_id}

    def complete(self, req_id: int, rc: int = 0, **fields: Any) -> None:
        handle = self.inflight.pop(req_id)
        handle({"rc": rc, "req_id": req_id, **fields})


class Recorder:
    def __init__(self) -> None:
        self.calls: list[tuple] = []

    def __call__(self, *args) -> None:
        self.calls.append(args)


@pytest.fixture
def transport():
    return FakeTransport()


def test_create_scenario(transport, inline_reactor):
    observer = Recorder()
    handle = new_create_handle(transport.submit, observer, reactor=inline_reactor)
    assert handle.req_id == 1
    assert not handle.done()
    transport.complete(1, string="/a")
    assert observer.calls == [(None, "/a")]
    assert handle.result() == ("/a",)


def test_get_missing_scenario(transport, inline_reactor):
    observer = Recorder()
    failures: list[Exception] = []
    handle = new_get_handle(transport.submit, observer, reactor=inline_reactor)
    handle.on_failure(failures.append)
    transport.complete(1, rc=StatusCode.NO_NODE)
    assert len(failures) == 1
    assert isinstance(failures[0], NoNodeError)
    assert observer.calls == [(failures[0],)]


def test_exists_missing_scenario(transport, inline_reactor):
    observer = Recorder()
    handle = new_exists_handle(transport.submit, observer, reactor=inline_reactor)
    transport.complete(1, rc=StatusCode.NO_NODE, stat=None)
    assert handle.result() == (False,)
    assert observer.calls == [(None, False)]


def test_get_unknown_status_scenario(transport, inline_reactor):
    observer = Recorder()
    handle = new_get_handle(transport.submit, observer, reactor=inline_reactor)
    with pytest.raises(UnknownStatusError):
        transport.complete(1, rc=-31337)
    assert observer.calls == []
    assert not handle.done()


def test_stat_missing_delivers_null_stat(transport, inline_reactor):
    handle = new_stat_handle(transport.submit, reactor=inline_reactor)
    transport.complete(1, rc=StatusCode.NO_NODE, stat=None)
    assert handle.result() == (NULL_STAT,)


def test_set_missing_is_an_error(transport, inline_reactor):
    handle = new_set_handle(transport.submit, reactor=inline_reactor)
    transport.complete(1, rc=StatusCode.NO_NODE)
    with pytest.raises(NoNodeError):
        handle.result()


def test_result_shapes(transport, inline_reactor):
    stat = Stat(version=1)
    acl = [AclEntry(31, "world", "anyone")]
    get = new_get_handle(transport.submit, reactor=inline_reactor)
    children = new_children_handle(transport.submit, reactor=inline_reactor)
    delete = new_delete_handle(transport.submit, reactor=inline_reactor)
    get_acl = new_get_acl_handle(transport.submit, reactor=inline_reactor)
    transport.complete(1, data=b"d", stat=stat)
    transport.complete(2, strings=["x", "y"], stat=stat)
    transport.complete(3)
    transport.complete(4, acl=acl, stat=stat)
    assert get.result() == (b"d", stat)
    assert children.result() == (["x", "y"], stat)
    assert delete.result() == ()
    assert get_acl.result() == (acl, stat)


def test_rejected_submission_fails_without_completion(inline_reactor):
    transport = FakeTransport(submit_rc=StatusCode.BAD_ARGUMENTS)
    observer = Recorder()
    handle = new_get_handle(transport.submit, observer, reactor=inline_reactor)
    assert transport.inflight == {}
    assert handle.failed
    assert observer.calls[0][0].code == "BAD_ARGUMENTS"


def test_submit_receives_the_returned_handle(inline_reactor):
    seen: list[AsyncHandle] = []

    def submit(handle: AsyncHandle) -> dict[str, Any]:
        seen.append(handle)
        return {"rc": 0, "req_id": 3}

    handle = new_void_handle(submit, reactor=inline_reactor)
    assert seen == [handle]


def test_factory_returns_before_delivery(transport, manual_reactor):
    observer = Recorder()
    handle = new_create_handle(transport.submit, observer, reactor=manual_reactor)
    transport.complete(1, string="/a")
    assert observer.calls == []
    manual_reactor.run_pending()
    assert observer.calls == [(None, "/a")]
    assert handle.done()


@pytest.mark.parametrize(
    ("factory", "kind"),
    [
        (new_get_handle, GET),
        (new_data_handle, GET),
        (new_children_handle, CHILDREN),
        (new_create_handle, CREATE),
        (new_string_handle, CREATE),
        (new_stat_handle, STAT),
        (new_exists_handle, EXISTS),
        (new_set_handle, SET),
        (new_void_handle, VOID),
        (new_delete_handle, VOID),
        (new_set_acl_handle, VOID),
        (new_get_acl_handle, GET_ACL),
        (new_acl_handle, GET_ACL),
    ],
)
def test_factory_kinds(factory, kind, transport, inline_reactor):
    assert factory(transport.submit, reactor=inline_reactor).kind is kind


def test_factories_by_name(transport, inline_reactor):
    assert factory_for("delete") is new_delete_handle
    assert set(FACTORIES) >= {"get", "children", "create", "stat", "exists", "set", "delete", "set_acl", "get_acl"}
    assert new_handle("exists", transport.submit, reactor=inline_reactor).kind is EXISTS


def test_unknown_factory_name():
    with pytest.raises(UnknownOperationError):
        factory_for("multi")
