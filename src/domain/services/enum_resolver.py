"""
Enumeration membership resolution.

Rooms and functions are enumeration objects (``enum.rooms.*`` and
``enum.functions.*``) holding member identifiers. A member covers its whole
subtree: membership tests are prefix based, never exact-match only.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Set

from src.domain.entities.objects import (
    ObjectEntry,
    ObjectKind,
    Snapshot,
    is_descendant,
    name_variants,
    parent_of,
)
from src.domain.services.naming import (
    DEFAULT_FALLBACK_LANGUAGE,
    DEFAULT_LANGUAGE,
    resolve_name,
)
from src.shared.consts import FUNCTION_ENUM_PREFIX, ROOM_ENUM_PREFIX


def covers(member: str, object_id: str) -> bool:
    """True when ``member`` and ``object_id`` lie on one branch of the tree."""
    return is_descendant(member, object_id) or is_descendant(object_id, member)


def is_group_in_members(group_id: str, members: Iterable[str]) -> bool:
    """Membership test for grouping entries.

    Besides the ancestor/descendant relation, a group also belongs to an
    enumeration when a member sits next to it under the same parent.
    """
    parent = parent_of(group_id)
    sibling_prefix = f"{parent}." if parent else None
    for member in members:
        if covers(member, group_id):
            return True
        if sibling_prefix and member.startswith(sibling_prefix):
            return True
    return False


class EnumResolver:
    """Index of the enumerations below one reserved prefix.

    Entries are ordered by identifier so that "first match wins" does not
    depend on the order the store happened to return them in.
    """

    def __init__(
        self,
        snapshot: Snapshot,
        prefix: str,
        language: str = DEFAULT_LANGUAGE,
        fallback_language: str = DEFAULT_FALLBACK_LANGUAGE,
    ) -> None:
        self._prefix = prefix
        self._language = language
        self._fallback_language = fallback_language
        self._entries: List[ObjectEntry] = sorted(
            (
                entry
                for entry in snapshot.values()
                if entry.kind == ObjectKind.ENUM and entry.id.startswith(prefix)
            ),
            key=lambda entry: entry.id,
        )

    @property
    def entries(self) -> List[ObjectEntry]:
        return list(self._entries)

    def display_name(self, entry: ObjectEntry) -> str:
        return resolve_name(
            entry.common.name, entry.id, self._language, self._fallback_language
        )

    def find(self, name: str) -> Optional[ObjectEntry]:
        """First enumeration whose name matches ``name`` in any language."""
        wanted = name.lower()
        for entry in self._entries:
            variants = name_variants(entry.common.name)
            if any(variant.lower() == wanted for variant in variants):
                return entry
        return None

    def resolve_members(self, name: str) -> Set[str]:
        entry = self.find(name)
        return set(entry.common.members) if entry else set()

    def enum_of_object(self, object_id: str) -> Optional[str]:
        """Display name of the first enumeration covering ``object_id``."""
        for entry in self._entries:
            if any(covers(member, object_id) for member in entry.common.members):
                return self.display_name(entry)
        return None


class RoomResolver(EnumResolver):
    """Room membership for objects and grouping entries."""

    def __init__(
        self,
        snapshot: Snapshot,
        language: str = DEFAULT_LANGUAGE,
        fallback_language: str = DEFAULT_FALLBACK_LANGUAGE,
    ) -> None:
        super().__init__(snapshot, ROOM_ENUM_PREFIX, language, fallback_language)

    def resolve_room_members(self, room_name: str) -> Set[str]:
        return self.resolve_members(room_name)

    def room_of_object(self, object_id: str) -> Optional[str]:
        return self.enum_of_object(object_id)


class FunctionResolver(EnumResolver):
    """Function (light, heating, ...) membership."""

    def __init__(
        self,
        snapshot: Snapshot,
        language: str = DEFAULT_LANGUAGE,
        fallback_language: str = DEFAULT_FALLBACK_LANGUAGE,
    ) -> None:
        super().__init__(snapshot, FUNCTION_ENUM_PREFIX, language, fallback_language)
