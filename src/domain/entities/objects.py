"""
Object namespace entities.

The object store is a flat mapping of dot-delimited identifiers to metadata
entries. Hierarchy is implicit in the identifiers themselves.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Union


class ObjectKind(str, Enum):
    """Kind of an object namespace entry."""

    STATE = "state"
    CHANNEL = "channel"
    DEVICE = "device"
    ENUM = "enum"
    INSTANCE = "instance"
    HOST = "host"
    OTHER = "other"

    @classmethod
    def parse(cls, value: Any) -> "ObjectKind":
        try:
            return cls(str(value))
        except ValueError:
            return cls.OTHER


GROUPING_KINDS = (ObjectKind.CHANNEL, ObjectKind.DEVICE)


@dataclass(frozen=True, slots=True)
class PlainName:
    """A display name given as a single string."""

    text: str


@dataclass(frozen=True, slots=True)
class LocalizedMap:
    """A display name given as language code -> translation."""

    translations: Dict[str, str]


LocalizedName = Union[PlainName, LocalizedMap]


def parse_name(raw: Any) -> Optional[LocalizedName]:
    """Turn a raw ``common.name`` value into a :data:`LocalizedName`."""
    if isinstance(raw, str):
        return PlainName(raw) if raw else None
    if isinstance(raw, Mapping):
        translations = {
            str(lang): text
            for lang, text in raw.items()
            if isinstance(text, str) and text
        }
        return LocalizedMap(translations) if translations else None
    return None


def name_variants(name: Optional[LocalizedName]) -> List[str]:
    """Every spelling of a name, default language first."""
    if name is None:
        return []
    if isinstance(name, PlainName):
        return [name.text]
    return list(name.translations.values())


def _optional_str(value: Any) -> Optional[str]:
    if isinstance(value, str) and value:
        return value
    return None


@dataclass(slots=True)
class ObjectCommon:
    """The ``common`` part of an object, with typed access to known fields."""

    name: Optional[LocalizedName] = None
    role: Optional[str] = None
    unit: Optional[str] = None
    value_type: Optional[str] = None
    members: List[str] = field(default_factory=list)
    raw: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_raw(cls, raw: Any) -> "ObjectCommon":
        if not isinstance(raw, Mapping):
            return cls()
        members = raw.get("members")
        return cls(
            name=parse_name(raw.get("name")),
            role=_optional_str(raw.get("role")),
            unit=_optional_str(raw.get("unit")),
            value_type=_optional_str(raw.get("type")),
            members=[m for m in members if isinstance(m, str)]
            if isinstance(members, list)
            else [],
            raw=dict(raw),
        )

    def get_str(self, key: str) -> Optional[str]:
        """Capability-checked lookup: only non-empty strings are returned."""
        return _optional_str(self.raw.get(key))


@dataclass(slots=True)
class ObjectEntry:
    """A single entry of the object namespace."""

    id: str
    kind: ObjectKind
    common: ObjectCommon = field(default_factory=ObjectCommon)
    native: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_raw(cls, object_id: str, raw: Mapping[str, Any]) -> "ObjectEntry":
        native = raw.get("native")
        return cls(
            id=object_id,
            kind=ObjectKind.parse(raw.get("type")),
            common=ObjectCommon.from_raw(raw.get("common")),
            native=dict(native) if isinstance(native, Mapping) else {},
        )

    @property
    def vendor(self) -> Optional[str]:
        return self.common.get_str("vendor")

    @property
    def model(self) -> Optional[str]:
        return self.common.get_str("model")


@dataclass(slots=True)
class LiveValue:
    """Current value of a state as reported by the store."""

    val: Any = None
    ack: bool = False
    ts: Optional[int] = None
    lc: Optional[int] = None
    source: Optional[str] = None
    quality: Optional[int] = None

    @classmethod
    def from_raw(cls, raw: Mapping[str, Any]) -> "LiveValue":
        return cls(
            val=raw.get("val"),
            ack=bool(raw.get("ack", False)),
            ts=raw.get("ts"),
            lc=raw.get("lc"),
            source=raw.get("from"),
            quality=raw.get("q"),
        )


Snapshot = Dict[str, ObjectEntry]


def is_descendant(candidate: str, ancestor: str) -> bool:
    """True when ``candidate`` equals ``ancestor`` or lives below it."""
    return candidate == ancestor or candidate.startswith(f"{ancestor}.")


def parent_of(object_id: str) -> str:
    """Identifier one level up (``""`` for top-level ids)."""
    head, _, _ = (object_id or "").rpartition(".")
    return head


def namespace_of(object_id: str) -> Optional[str]:
    """Leading segment of a dotted identifier, if the id has more than one."""
    head, sep, _ = object_id.partition(".")
    return head if sep and head else None
