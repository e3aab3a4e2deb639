"""Result payloads handed to handles by the coordination-service transport."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

# Field names a transport may populate in a completion bundle.
FIELD_DATA = "data"
FIELD_STAT = "stat"
FIELD_CHILDREN = "children"
FIELD_STRING = "string"
FIELD_ACL = "acl"

_STATUS_KEYS = ("rc", "status")
_REQ_ID_KEYS = ("req_id", "request_id")

# Older transports report child lists under "strings".
_FIELD_ALIASES: dict[str, str] = {
    "strings": FIELD_CHILDREN,
    "path": FIELD_STRING,
}


@dataclass(frozen=True, slots=True)
class Stat:
    """Znode metadata as reported by the server."""

    czxid: int = 0
    mzxid: int = 0
    ctime: int = 0
    mtime: int = 0
    version: int = 0
    cversion: int = 0
    aversion: int = 0
    ephemeral_owner: int = 0
    data_length: int = 0
    num_children: int = 0
    pzxid: int = 0
    exists: bool = True

    @classmethod
    def from_raw(cls, raw: Any) -> Stat:
        """Build a Stat from a transport mapping, or NULL_STAT for None.

        An ``exists`` key in the mapping is kept, so a transport can report a
        placeholder stat for a missing node.
        """
        if raw is None:
            return NULL_STAT
        if isinstance(raw, Stat):
            return raw
        if not isinstance(raw, Mapping):
            raise TypeError(f"cannot build Stat from {type(raw).__name__}")
        values: dict[str, Any] = {}
        for key, value in raw.items():
            name = _snake(str(key))
            if name == "exists":
                values[name] = bool(value)
            elif name in _STAT_FIELDS:
                values[name] = value
        return cls(**values)

    def __bool__(self) -> bool:
        return self.exists


NULL_STAT = Stat(exists=False)

_STAT_FIELDS = frozenset(Stat.__dataclass_fields__)


@dataclass(frozen=True, slots=True)
class AclEntry:
    """One access-control entry on a znode."""

    perms: int
    scheme: str
    id: str


@dataclass(frozen=True, slots=True)
class ResultBundle:
    """Raw completion payload for one asynchronous call.

    ``fields`` holds only the operation-specific values; ``status`` and
    ``req_id`` are lifted out of the transport hash.
    """

    status: int
    req_id: int | None = None
    fields: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))

    def get(self, name: str, default: Any = None) -> Any:
        return self.fields.get(name, default)

    def values_at(self, names: tuple[str, ...]) -> tuple[Any, ...]:
        """Return field values in the given order; missing names yield None."""
        return tuple(self.fields.get(name) for name in names)

    @classmethod
    def coerce(cls, value: ResultBundle | Mapping[str, Any]) -> ResultBundle:
        """Accept a ResultBundle or a raw transport hash such as ``{"rc": 0, "req_id": 3}``."""
        if isinstance(value, ResultBundle):
            return value
        if not isinstance(value, Mapping):
            raise TypeError(f"expected ResultBundle or mapping, got {type(value).__name__}")
        status: Any = None
        req_id: Any = None
        fields: dict[str, Any] = {}
        for key, item in value.items():
            name = str(key)
            if name in _STATUS_KEYS:
                status = item
            elif name in _REQ_ID_KEYS:
                req_id = item
            else:
                fields[_FIELD_ALIASES.get(name, name)] = item
        if status is None:
            raise ValueError(f"result hash has no status code: {dict(value)!r}")
        return cls(status=int(status), req_id=req_id, fields=fields)


def _snake(name: str) -> str:
    out = []
    for i, char in enumerate(name):
        if char.isupper() and i > 0:
            out.append("_")
        out.append(char.lower())
    return "".join(out)
