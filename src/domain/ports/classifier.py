"""Domain port for the pluggable device classifier."""

from __future__ import annotations

from typing import List, Protocol

from src.domain.entities.device import DeviceControl
from src.domain.entities.objects import Snapshot


class IDeviceClassifier(Protocol):
    """Detects typed controls below a channel or device entry."""

    def classify(self, snapshot: Snapshot, object_id: str) -> List[DeviceControl]:
        """
        Classify the grouping entry ``object_id``.

        Must be free of side effects. The first control is the primary one.
        """
        ...
