"""
Error catalog and exception hierarchy for zkdispatch.

Provides:
- Status codes reported by the coordination service
- One KeeperError subclass per non-OK status code, with a category
- Status code -> structured error lookup
- Dispatch errors raised by this package itself
"""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import Any


class StatusCode(IntEnum):
    """Return codes of the ZooKeeper C client."""

    OK = 0
    SYSTEM_ERROR = -1
    RUNTIME_INCONSISTENCY = -2
    DATA_INCONSISTENCY = -3
    CONNECTION_LOSS = -4
    MARSHALLING_ERROR = -5
    UNIMPLEMENTED = -6
    OPERATION_TIMEOUT = -7
    BAD_ARGUMENTS = -8
    INVALID_STATE = -9
    API_ERROR = -100
    NO_NODE = -101
    NO_AUTH = -102
    BAD_VERSION = -103
    NO_CHILDREN_FOR_EPHEMERALS = -108
    NODE_EXISTS = -110
    NOT_EMPTY = -111
    SESSION_EXPIRED = -112
    INVALID_CALLBACK = -113
    INVALID_ACL = -114
    AUTH_FAILED = -115
    CLOSING = -116
    NOTHING = -117
    SESSION_MOVED = -118


class ErrorCategory(Enum):
    """Error categories for classification."""
    RETRYABLE = "retryable"
    FATAL = "fatal"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    PERMISSION = "permission"
    VALIDATION = "validation"
    STATE = "state"


class ZkDispatchError(Exception):
    """Base exception for all zkdispatch errors."""

    def __init__(
        self,
        message: str,
        code: str = "UNKNOWN_ERROR",
        category: ErrorCategory = ErrorCategory.FATAL,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.code,
            "message": self.message,
            "category": self.category.value,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


# ---------------------------------------------------------------------------
# Errors reported by the coordination service
# ---------------------------------------------------------------------------


class KeeperError(ZkDispatchError):
    """A non-OK status code returned for an asynchronous call.

    Subclasses set ``status``, ``category`` and a default message; use
    :func:`lookup` to get the right one for a status code.
    """

    status: StatusCode = StatusCode.API_ERROR
    category_default: ErrorCategory = ErrorCategory.FATAL
    default_message: str = "coordination service error"

    def __init__(self, message: str | None = None, details: dict[str, Any] | None = None):
        super().__init__(
            message or self.default_message,
            code=self.status.name,
            category=self.category_default,
            details={"status": int(self.status), **(details or {})},
        )

    @property
    def retryable(self) -> bool:
        return self.category is ErrorCategory.RETRYABLE

    @staticmethod
    def by_status(status: int) -> type[KeeperError]:
        """Return the KeeperError subclass for ``status``.

        Raises:
            UnknownStatusError: the status code is not in the catalog.
        """
        try:
            return ERROR_CATALOG[int(status)]
        except KeyError:
            raise UnknownStatusError(status) from None


class ZkSystemError(KeeperError):
    status = StatusCode.SYSTEM_ERROR
    default_message = "system error"


class RuntimeInconsistencyError(KeeperError):
    status = StatusCode.RUNTIME_INCONSISTENCY
    default_message = "runtime inconsistency"


class DataInconsistencyError(KeeperError):
    status = StatusCode.DATA_INCONSISTENCY
    default_message = "data inconsistency"


class ConnectionLossError(KeeperError):
    status = StatusCode.CONNECTION_LOSS
    category_default = ErrorCategory.RETRYABLE
    default_message = "connection to the server was lost"


class MarshallingError(KeeperError):
    status = StatusCode.MARSHALLING_ERROR
    default_message = "error while marshalling or unmarshalling data"


class UnimplementedError(KeeperError):
    status = StatusCode.UNIMPLEMENTED
    default_message = "operation is unimplemented"


class OperationTimeoutError(KeeperError):
    status = StatusCode.OPERATION_TIMEOUT
    category_default = ErrorCategory.RETRYABLE
    default_message = "operation timed out"


class BadArgumentsError(KeeperError):
    status = StatusCode.BAD_ARGUMENTS
    category_default = ErrorCategory.VALIDATION
    default_message = "invalid arguments"


class InvalidStateError(KeeperError):
    status = StatusCode.INVALID_STATE
    category_default = ErrorCategory.STATE
    default_message = "invalid handle state"


class ApiError(KeeperError):
    status = StatusCode.API_ERROR
    default_message = "api error"


class NoNodeError(KeeperError):
    status = StatusCode.NO_NODE
    category_default = ErrorCategory.NOT_FOUND
    default_message = "node does not exist"


class NoAuthError(KeeperError):
    status = StatusCode.NO_AUTH
    category_default = ErrorCategory.PERMISSION
    default_message = "not authenticated"


class BadVersionError(KeeperError):
    status = StatusCode.BAD_VERSION
    category_default = ErrorCategory.CONFLICT
    default_message = "version conflict"


class NoChildrenForEphemeralsError(KeeperError):
    status = StatusCode.NO_CHILDREN_FOR_EPHEMERALS
    category_default = ErrorCategory.VALIDATION
    default_message = "ephemeral nodes may not have children"


class NodeExistsError(KeeperError):
    status = StatusCode.NODE_EXISTS
    category_default = ErrorCategory.CONFLICT
    default_message = "node already exists"


class NotEmptyError(KeeperError):
    status = StatusCode.NOT_EMPTY
    category_default = ErrorCategory.CONFLICT
    default_message = "node has children"


class SessionExpiredError(KeeperError):
    status = StatusCode.SESSION_EXPIRED
    category_default = ErrorCategory.STATE
    default_message = "session expired"


class InvalidCallbackError(KeeperError):
    status = StatusCode.INVALID_CALLBACK
    category_default = ErrorCategory.VALIDATION
    default_message = "invalid callback specified"


class InvalidAclError(KeeperError):
    status = StatusCode.INVALID_ACL
    category_default = ErrorCategory.VALIDATION
    default_message = "invalid ACL specified"


class AuthFailedError(KeeperError):
    status = StatusCode.AUTH_FAILED
    category_default = ErrorCategory.PERMISSION
    default_message = "client authentication failed"


class ClosingError(KeeperError):
    status = StatusCode.CLOSING
    category_default = ErrorCategory.STATE
    default_message = "session is closing"


class NothingError(KeeperError):
    status = StatusCode.NOTHING
    default_message = "no server responses to process"


class SessionMovedError(KeeperError):
    status = StatusCode.SESSION_MOVED
    category_default = ErrorCategory.STATE
    default_message = "session moved to another server"


ERROR_CATALOG: dict[int, type[KeeperError]] = {
    int(cls.status): cls
    for cls in (
        ZkSystemError,
        RuntimeInconsistencyError,
        DataInconsistencyError,
        ConnectionLossError,
        MarshallingError,
        UnimplementedError,
        OperationTimeoutError,
        BadArgumentsError,
        InvalidStateError,
        ApiError,
        NoNodeError,
        NoAuthError,
        BadVersionError,
        NoChildrenForEphemeralsError,
        NodeExistsError,
        NotEmptyError,
        SessionExpiredError,
        InvalidCallbackError,
        InvalidAclError,
        AuthFailedError,
        ClosingError,
        NothingError,
        SessionMovedError,
    )
}


def lookup(status: int) -> KeeperError:
    """Return a structured error instance for a non-OK status code.

    Raises:
        UnknownStatusError: the code is OK or not in the catalog. Either case
            means this package and the transport disagree about status codes.
    """
    return KeeperError.by_status(status)()


# ---------------------------------------------------------------------------
# Errors raised by the dispatch layer
# ---------------------------------------------------------------------------


class UnknownStatusError(ZkDispatchError):
    """Status code missing from the error catalog."""

    def __init__(self, status: int):
        super().__init__(
            f"no error registered for status code {status!r}; "
            "the transport and zkdispatch disagree about status codes",
            code="UNKNOWN_STATUS",
            category=ErrorCategory.FATAL,
            details={"status": status},
        )
        self.status = status


class ObserverAlreadySetError(ZkDispatchError):
    """A node-style observer was registered twice on one handle."""

    def __init__(self, kind: str):
        super().__init__(
            f"{kind} handle already has a result observer",
            code="OBSERVER_ALREADY_SET",
            category=ErrorCategory.VALIDATION,
            details={"kind": kind},
        )


class UnknownOperationError(ZkDispatchError):
    """No operation kind is registered under the requested name."""

    def __init__(self, name: str):
        super().__init__(
            f"unknown operation: {name}",
            code="UNKNOWN_OPERATION",
            category=ErrorCategory.VALIDATION,
            details={"operation": name},
        )


class ReactorStoppedError(ZkDispatchError):
    """Work was scheduled on a reactor that is no longer running."""

    def __init__(self, reason: str = "reactor is not running"):
        super().__init__(reason, code="REACTOR_STOPPED", category=ErrorCategory.STATE)
