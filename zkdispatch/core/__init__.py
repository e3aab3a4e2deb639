"""Result shapes, error catalog and operation kinds."""

from .errors import (
    ERROR_CATALOG,
    ErrorCategory,
    KeeperError,
    NoNodeError,
    ObserverAlreadySetError,
    ReactorStoppedError,
    StatusCode,
    UnknownOperationError,
    UnknownStatusError,
    ZkDispatchError,
    lookup,
)
from .kinds import OPERATION_KINDS, Classification, OperationKind, classify, get_kind
from .protocol import NULL_STAT, AclEntry, ResultBundle, Stat

__all__ = [
    "AclEntry",
    "Classification",
    "ERROR_CATALOG",
    "ErrorCategory",
    "KeeperError",
    "NULL_STAT",
    "NoNodeError",
    "OPERATION_KINDS",
    "ObserverAlreadySetError",
    "OperationKind",
    "ReactorStoppedError",
    "ResultBundle",
    "Stat",
    "StatusCode",
    "UnknownOperationError",
    "UnknownStatusError",
    "ZkDispatchError",
    "classify",
    "get_kind",
    "lookup",
]
