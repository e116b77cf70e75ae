"""Role-pattern device classifier - Infrastructure layer."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Optional, Pattern, Sequence, Set, Tuple

from src.domain.entities.device import DeviceControl
from src.domain.entities.objects import (
    GROUPING_KINDS,
    ObjectEntry,
    ObjectKind,
    Snapshot,
    parent_of,
)
from src.domain.ports.classifier import IDeviceClassifier

INFO_CONTROL_TYPE = "info"


def _role(prefix: str) -> Pattern[str]:
    return re.compile(rf"^{re.escape(prefix)}(\..*)?$")


@dataclass(frozen=True)
class ControlPattern:
    """A control type recognised by the roles of a group's states.

    Every ``required`` pattern must match a distinct state for the control
    to be detected; ``optional`` patterns attach further states to it.
    """

    type: str
    required: Tuple[Pattern[str], ...]
    optional: Tuple[Pattern[str], ...] = ()


DEFAULT_PATTERNS: Tuple[ControlPattern, ...] = (
    ControlPattern(
        "thermostat",
        required=(_role("level.temperature"),),
        optional=(
            _role("value.temperature"),
            _role("switch.mode"),
            _role("value.valve"),
        ),
    ),
    ControlPattern(
        "blind",
        required=(_role("level.blind"),),
        optional=(_role("value.blind"), _role("button.stop"), _role("action.stop")),
    ),
    ControlPattern(
        "dimmer",
        required=(re.compile(r"^level\.(dimmer|brightness)$"),),
        optional=(_role("switch.light"), re.compile(r"^switch$")),
    ),
    ControlPattern("light", required=(_role("switch.light"),)),
    ControlPattern("lock", required=(_role("switch.lock"),)),
    ControlPattern(
        "socket",
        required=(re.compile(r"^switch$"),),
        optional=(_role("value.power"), _role("value.energy")),
    ),
    ControlPattern("window", required=(_role("sensor.window"),)),
    ControlPattern("door", required=(_role("sensor.door"),)),
    ControlPattern("motion", required=(_role("sensor.motion"),)),
    ControlPattern("fire_alarm", required=(_role("sensor.alarm.fire"),)),
    ControlPattern("flood_alarm", required=(_role("sensor.alarm.flood"),)),
    ControlPattern(
        "temperature",
        required=(_role("value.temperature"),),
        optional=(_role("value.humidity"),),
    ),
    ControlPattern("humidity", required=(_role("value.humidity"),)),
    ControlPattern("volume", required=(_role("level.volume"),)),
    ControlPattern("button", required=(_role("button"),)),
)


class RolePatternClassifier(IDeviceClassifier):
    """Detects controls from the ``common.role`` of a group's own states."""

    def __init__(self, patterns: Optional[Sequence[ControlPattern]] = None):
        self._patterns = tuple(patterns) if patterns is not None else DEFAULT_PATTERNS

    def classify(self, snapshot: Snapshot, object_id: str) -> List[DeviceControl]:
        states = self._owned_states(snapshot, object_id)
        if not states:
            return []

        claimed: Set[str] = set()
        controls: List[DeviceControl] = []
        for pattern in self._patterns:
            matched = self._match(pattern, states, claimed)
            if matched is None:
                continue
            claimed.update(matched)
            controls.append(
                DeviceControl(
                    type=pattern.type,
                    state_ids=[entry.id for entry in states if entry.id in matched],
                )
            )

        leftovers = [entry.id for entry in states if entry.id not in claimed]
        if leftovers:
            controls.append(DeviceControl(type=INFO_CONTROL_TYPE, state_ids=leftovers))
        return controls

    def _owned_states(self, snapshot: Snapshot, object_id: str) -> List[ObjectEntry]:
        prefix = f"{object_id}."
        return [
            entry
            for entry in snapshot.values()
            if entry.kind == ObjectKind.STATE
            and entry.id.startswith(prefix)
            and self._owner_of(snapshot, entry.id) == object_id
        ]

    def _owner_of(self, snapshot: Snapshot, state_id: str) -> Optional[str]:
        """Nearest channel or device entry above ``state_id``."""
        current = parent_of(state_id)
        while current:
            entry = snapshot.get(current)
            if entry is not None and entry.kind in GROUPING_KINDS:
                return current
            current = parent_of(current)
        return None

    def _match(
        self,
        pattern: ControlPattern,
        states: List[ObjectEntry],
        claimed: Set[str],
    ) -> Optional[Set[str]]:
        available = [entry for entry in states if entry.id not in claimed]
        matched: Set[str] = set()

        for required in pattern.required:
            hit = next(
                (
                    entry
                    for entry in available
                    if entry.id not in matched and self._role_matches(required, entry)
                ),
                None,
            )
            if hit is None:
                return None
            matched.add(hit.id)

        for optional in pattern.optional:
            matched.update(
                entry.id for entry in available if self._role_matches(optional, entry)
            )
        return matched

    def _role_matches(self, pattern: Pattern[str], entry: ObjectEntry) -> bool:
        return bool(entry.common.role and pattern.match(entry.common.role))
