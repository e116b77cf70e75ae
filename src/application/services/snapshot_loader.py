"""Loads the object namespace from the store into one flat mapping."""

from __future__ import annotations

import asyncio
from typing import Tuple

from src.domain.entities.errors import SnapshotConflictError
from src.domain.entities.objects import ObjectKind, Snapshot
from src.domain.gateways.object_store_gateway import IObjectStoreGateway
from src.shared import get_logger

logger = get_logger(__name__)

SNAPSHOT_KINDS: Tuple[ObjectKind, ...] = (
    ObjectKind.STATE,
    ObjectKind.CHANNEL,
    ObjectKind.DEVICE,
    ObjectKind.ENUM,
)


class SnapshotLoader:
    """Object Snapshot Loader."""

    def __init__(self, object_store_gateway: IObjectStoreGateway) -> None:
        self._gateway = object_store_gateway

    async def load_snapshot(self) -> Snapshot:
        """
        Read states, channels, devices and enumerations and merge them.

        Returns:
            Snapshot: Entries keyed by identifier, kinds merged in the order
            above and store order within each kind

        Raises:
            SnapshotConflictError: If an identifier is reported by two kinds
            ExternalStoreError: If any of the views cannot be read
        """
        views = await asyncio.gather(
            *(self._gateway.get_object_view(kind) for kind in SNAPSHOT_KINDS)
        )

        snapshot: Snapshot = {}
        for kind, view in zip(SNAPSHOT_KINDS, views):
            for object_id, entry in view.items():
                existing = snapshot.get(object_id)
                if existing is not None:
                    logger.error(
                        "snapshot.duplicate_id",
                        object_id=object_id,
                        first_kind=existing.kind.value,
                        second_kind=kind.value,
                    )
                    raise SnapshotConflictError(
                        object_id, existing.kind.value, kind.value
                    )
                snapshot[object_id] = entry

        logger.debug(
            "snapshot.loaded",
            total=len(snapshot),
            **{kind.value: len(view) for kind, view in zip(SNAPSHOT_KINDS, views)},
        )
        return snapshot
