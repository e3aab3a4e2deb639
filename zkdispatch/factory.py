"""Handle factories, one per public operation name.

Each factory builds a handle, passes it to ``submit`` so the caller can issue
the network call with the handle as its completion callback, checks the
submission status ``submit`` returns, and hands the handle back without
waiting for the result::

    handle = new_get_handle(lambda h: zk.aget("/a", h), observer)
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from zkdispatch.core.errors import UnknownOperationError
from zkdispatch.core.kinds import CHILDREN, CREATE, EXISTS, GET, GET_ACL, SET, STAT, VOID, OperationKind
from zkdispatch.core.protocol import ResultBundle
from zkdispatch.handles import AsyncHandle, Observer
from zkdispatch.reactor import Reactor

Submit = Callable[[AsyncHandle], "ResultBundle | Mapping[str, Any]"]


def new_handle(
    kind: OperationKind | str,
    submit: Submit,
    observer: Observer | None = None,
    *,
    reactor: Reactor | None = None,
) -> AsyncHandle:
    """Create a handle for ``kind`` and submit the call through ``submit``."""
    handle = AsyncHandle(kind, observer, reactor=reactor)
    handle.check_submission(submit(handle))
    return handle


def new_get_handle(submit: Submit, observer: Observer | None = None, *, reactor: Reactor | None = None) -> AsyncHandle:
    """Delivers ``(data, stat)``."""
    return new_handle(GET, submit, observer, reactor=reactor)


def new_children_handle(submit: Submit, observer: Observer | None = None, *, reactor: Reactor | None = None) -> AsyncHandle:
    """Delivers ``(children, stat)``."""
    return new_handle(CHILDREN, submit, observer, reactor=reactor)


def new_create_handle(submit: Submit, observer: Observer | None = None, *, reactor: Reactor | None = None) -> AsyncHandle:
    """Delivers ``(path,)``."""
    return new_handle(CREATE, submit, observer, reactor=reactor)


def new_stat_handle(submit: Submit, observer: Observer | None = None, *, reactor: Reactor | None = None) -> AsyncHandle:
    """Delivers ``(stat,)``; a missing node yields NULL_STAT."""
    return new_handle(STAT, submit, observer, reactor=reactor)


def new_exists_handle(submit: Submit, observer: Observer | None = None, *, reactor: Reactor | None = None) -> AsyncHandle:
    """Delivers ``(exists,)`` as a bool."""
    return new_handle(EXISTS, submit, observer, reactor=reactor)


def new_set_handle(submit: Submit, observer: Observer | None = None, *, reactor: Reactor | None = None) -> AsyncHandle:
    """Delivers ``(stat,)``; a missing node is an error."""
    return new_handle(SET, submit, observer, reactor=reactor)


def new_void_handle(submit: Submit, observer: Observer | None = None, *, reactor: Reactor | None = None) -> AsyncHandle:
    """Delivers ``()``."""
    return new_handle(VOID, submit, observer, reactor=reactor)


def new_get_acl_handle(submit: Submit, observer: Observer | None = None, *, reactor: Reactor | None = None) -> AsyncHandle:
    """Delivers ``(acl, stat)``."""
    return new_handle(GET_ACL, submit, observer, reactor=reactor)


# Result-shape names and client API names for the same factories.
new_data_handle = new_get_handle
new_string_handle = new_create_handle
new_delete_handle = new_void_handle
new_set_acl_handle = new_void_handle
new_acl_handle = new_get_acl_handle

FACTORIES: dict[str, Callable[..., AsyncHandle]] = {
    "get": new_get_handle,
    "data": new_data_handle,
    "children": new_children_handle,
    "create": new_create_handle,
    "string": new_string_handle,
    "stat": new_stat_handle,
    "exists": new_exists_handle,
    "set": new_set_handle,
    "void": new_void_handle,
    "delete": new_delete_handle,
    "set_acl": new_set_acl_handle,
    "get_acl": new_get_acl_handle,
    "acl": new_acl_handle,
}


def factory_for(name: str) -> Callable[..., AsyncHandle]:
    """Return the factory registered under an operation name."""
    try:
        return FACTORIES[name]
    except KeyError:
        raise UnknownOperationError(name) from None
