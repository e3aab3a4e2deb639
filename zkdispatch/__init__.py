"""
zkdispatch - dual-style dispatch of asynchronous coordination-service results.
"""

__version__ = "0.1.0"

from zkdispatch.core import (
    NULL_STAT,
    AclEntry,
    ErrorCategory,
    KeeperError,
    OperationKind,
    ResultBundle,
    Stat,
    StatusCode,
    UnknownStatusError,
    ZkDispatchError,
    classify,
    lookup,
)
from zkdispatch.factory import (
    FACTORIES,
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
from zkdispatch.handles import AsyncHandle

__all__ = [
    "__version__",
    "AclEntry",
    "AsyncHandle",
    "ErrorCategory",
    "FACTORIES",
    "KeeperError",
    "NULL_STAT",
    "OperationKind",
    "ResultBundle",
    "Stat",
    "StatusCode",
    "UnknownStatusError",
    "ZkDispatchError",
    "classify",
    "factory_for",
    "lookup",
    "new_acl_handle",
    "new_children_handle",
    "new_create_handle",
    "new_data_handle",
    "new_delete_handle",
    "new_exists_handle",
    "new_get_acl_handle",
    "new_get_handle",
    "new_handle",
    "new_set_acl_handle",
    "new_set_handle",
    "new_stat_handle",
    "new_string_handle",
    "new_void_handle",
]
