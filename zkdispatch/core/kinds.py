"""Operation kinds: which result fields matter and what counts as success."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from .errors import KeeperError, StatusCode, UnknownOperationError, lookup
from .protocol import (
    FIELD_ACL,
    FIELD_CHILDREN,
    FIELD_DATA,
    FIELD_STAT,
    FIELD_STRING,
    NULL_STAT,
    ResultBundle,
    Stat,
)


def status_ok(status: int) -> bool:
    """Default predicate: only OK is a success."""
    return status == StatusCode.OK


def status_ok_or_no_node(status: int) -> bool:
    """Stat-like calls treat a missing node as a null stat, not an error."""
    return status in (StatusCode.OK, StatusCode.NO_NODE)


def _null_stat_for_missing(status: int, values: tuple[Any, ...]) -> tuple[Any, ...]:
    # NO_NODE wins over whatever stat payload the transport left in the bundle
    if status == StatusCode.NO_NODE:
        return (NULL_STAT,)
    (stat,) = values
    return (Stat.from_raw(stat),)


def _stat_presence(status: int, values: tuple[Any, ...]) -> tuple[Any, ...]:
    (stat,) = _null_stat_for_missing(status, values)
    return (stat.exists,)


@dataclass(frozen=True, slots=True)
class Classification:
    """Outcome of evaluating one bundle against one operation kind."""

    succeeded: bool
    values: tuple[Any, ...] = ()
    error: KeeperError | None = None


@dataclass(frozen=True, slots=True)
class OperationKind:
    """Static description of one asynchronous operation's result shape."""

    name: str
    result_keys: tuple[str, ...] = ()
    is_success: Callable[[int], bool] = status_ok
    transform: Callable[[int, tuple[Any, ...]], tuple[Any, ...]] | None = field(default=None, compare=False)

    def success(self, status: int) -> bool:
        return self.is_success(status)

    def classify(self, bundle: ResultBundle) -> Classification:
        """Classify ``bundle`` once for both consumption styles.

        Raises:
            UnknownStatusError: a failing status has no catalog entry.
        """
        if not self.is_success(bundle.status):
            return Classification(succeeded=False, error=lookup(bundle.status))
        values = bundle.values_at(self.result_keys)
        if self.transform is not None:
            values = self.transform(bundle.status, values)
        return Classification(succeeded=True, values=values)


GET = OperationKind("get", (FIELD_DATA, FIELD_STAT))
CHILDREN = OperationKind("children", (FIELD_CHILDREN, FIELD_STAT))
CREATE = OperationKind("create", (FIELD_STRING,))
STAT = OperationKind("stat", (FIELD_STAT,), status_ok_or_no_node, _null_stat_for_missing)
EXISTS = OperationKind("exists", (FIELD_STAT,), status_ok_or_no_node, _stat_presence)
# set returns a stat too, but a missing node is an error here
SET = OperationKind("set", (FIELD_STAT,))
VOID = OperationKind("void")
GET_ACL = OperationKind("get_acl", (FIELD_ACL, FIELD_STAT))

OPERATION_KINDS: dict[str, OperationKind] = {
    "get": GET,
    "data": GET,
    "children": CHILDREN,
    "create": CREATE,
    "string": CREATE,
    "stat": STAT,
    "exists": EXISTS,
    "set": SET,
    "void": VOID,
    "delete": VOID,
    "set_acl": VOID,
    "get_acl": GET_ACL,
    "acl": GET_ACL,
}


def get_kind(name: str) -> OperationKind:
    """Resolve an operation or result-shape name to its kind."""
    try:
        return OPERATION_KINDS[name]
    except KeyError:
        raise UnknownOperationError(name) from None


def classify(kind: OperationKind | str, bundle: ResultBundle) -> Classification:
    if isinstance(kind, str):
        kind = get_kind(kind)
    return kind.classify(bundle)
