"""Merges live values into the states attached to a device."""

from __future__ import annotations

import asyncio
from typing import List, Optional, Sequence

from src.domain.entities.device import DeviceState
from src.domain.entities.objects import LiveValue, ObjectEntry, ObjectKind, Snapshot
from src.domain.gateways.object_store_gateway import IObjectStoreGateway
from src.shared import get_logger

logger = get_logger(__name__)

DEFAULT_VALUE_TYPE = "mixed"


def build_device_state(
    entry: ObjectEntry,
    live: Optional[LiveValue],
    error: Optional[str] = None,
) -> DeviceState:
    """Combine static state metadata with its live value."""
    state = DeviceState(
        id=entry.id,
        role=entry.common.role or "",
        type=entry.common.value_type or DEFAULT_VALUE_TYPE,
        unit=entry.common.unit,
        error=error,
    )
    if live is not None:
        state.value = live.val
        state.ack = live.ack
        state.ts = live.ts
        if live.lc != live.ts:
            state.lc = live.lc
    return state


class StateEnricher:
    """State Enricher."""

    def __init__(self, object_store_gateway: IObjectStoreGateway) -> None:
        self._gateway = object_store_gateway

    async def enrich_states(
        self, attached_ids: Sequence[str], snapshot: Snapshot
    ) -> List[DeviceState]:
        """
        Build one ``DeviceState`` per attached state identifier.

        Identifiers that are not state entries of the snapshot are skipped.
        A failing live-value fetch is recorded on that state only.
        """
        entries = [
            snapshot[state_id]
            for state_id in attached_ids
            if state_id in snapshot and snapshot[state_id].kind == ObjectKind.STATE
        ]
        results = await asyncio.gather(
            *(self._gateway.get_state(entry.id) for entry in entries),
            return_exceptions=True,
        )

        states: List[DeviceState] = []
        for entry, result in zip(entries, results):
            if isinstance(result, BaseException):
                if not isinstance(result, Exception):
                    raise result
                logger.warning(
                    "devices.state_fetch_failed",
                    state_id=entry.id,
                    error=str(result),
                )
                states.append(build_device_state(entry, None, error=str(result)))
            else:
                states.append(build_device_state(entry, result))
        return states
