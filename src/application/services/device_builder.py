"""
Device Grouper & Classifier - Application Layer

Turns channel and device entries of a snapshot into ``Device`` views:
classification, naming, room, vendor/model, tags and live states.
"""

from __future__ import annotations

from typing import List, Optional, Set

from src.application.services.state_enricher import StateEnricher
from src.domain.entities.device import (
    UNKNOWN_DEVICE_TYPE,
    Device,
    DeviceControl,
    DeviceState,
)
from src.domain.entities.objects import (
    GROUPING_KINDS,
    ObjectEntry,
    Snapshot,
    namespace_of,
)
from src.domain.ports.classifier import IDeviceClassifier
from src.domain.services.enum_resolver import RoomResolver, is_group_in_members
from src.domain.services.naming import (
    DEFAULT_FALLBACK_LANGUAGE,
    DEFAULT_LANGUAGE,
    resolve_name,
)
from src.shared import DEVICE_ID_PREFIX, get_logger

logger = get_logger(__name__)


def collect_state_ids(controls: List[DeviceControl]) -> List[str]:
    """Ordered union of the state identifiers of all controls."""
    seen: Set[str] = set()
    state_ids: List[str] = []
    for control in controls:
        for state_id in control.state_ids:
            if state_id and state_id not in seen:
                seen.add(state_id)
                state_ids.append(state_id)
    return state_ids


def collect_roles(states: List[DeviceState]) -> List[str]:
    roles: List[str] = []
    for state in states:
        if state.role and state.role not in roles:
            roles.append(state.role)
    return roles


class DeviceBuilder:
    """Builds the ordered device list for a snapshot."""

    def __init__(
        self,
        classifier: IDeviceClassifier,
        state_enricher: StateEnricher,
        language: str = DEFAULT_LANGUAGE,
        fallback_language: str = DEFAULT_FALLBACK_LANGUAGE,
    ) -> None:
        self._classifier = classifier
        self._state_enricher = state_enricher
        self._language = language
        self._fallback_language = fallback_language

    async def build_devices(
        self, snapshot: Snapshot, room_filter: Optional[str] = None
    ) -> List[Device]:
        """
        Build devices in snapshot order.

        Args:
            snapshot: Full object snapshot
            room_filter: Optional room name; only groups in that room are kept

        Returns:
            List[Device]: Devices with at least one attached state
        """
        rooms = RoomResolver(snapshot, self._language, self._fallback_language)
        room_members: Optional[Set[str]] = None
        if room_filter:
            room_members = rooms.resolve_room_members(room_filter)
            logger.debug(
                "devices.room_filter",
                room=room_filter,
                member_count=len(room_members),
            )

        devices: List[Device] = []
        for entry in list(snapshot.values()):
            if entry.kind not in GROUPING_KINDS:
                continue
            if room_members is not None and not is_group_in_members(
                entry.id, room_members
            ):
                continue

            device = await self._build_device(entry, snapshot, rooms)
            if device is not None:
                devices.append(device)

        return devices

    def _classify(self, snapshot: Snapshot, object_id: str) -> List[DeviceControl]:
        return list(self._classifier.classify(snapshot, object_id) or [])

    async def _build_device(
        self, entry: ObjectEntry, snapshot: Snapshot, rooms: RoomResolver
    ) -> Optional[Device]:
        controls = self._classify(snapshot, entry.id)
        device_type = UNKNOWN_DEVICE_TYPE
        if controls and controls[0].type:
            device_type = controls[0].type

        states = await self._state_enricher.enrich_states(
            collect_state_ids(controls), snapshot
        )
        if not states:
            logger.debug("devices.skip_without_states", object_id=entry.id)
            return None

        namespace = namespace_of(entry.id)
        return Device(
            id=f"{DEVICE_ID_PREFIX}{entry.id}",
            name=resolve_name(
                entry.common.name, entry.id, self._language, self._fallback_language
            ),
            type=device_type,
            room=rooms.room_of_object(entry.id),
            vendor=entry.vendor,
            model=entry.model,
            roles=collect_roles(states),
            states=states,
            tags=[namespace] if namespace else [],
        )
