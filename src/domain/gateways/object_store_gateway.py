"""
Object Store Gateway Interface - Domain Layer

This module defines the interface for reading and writing the external
object/state store. Every call is asynchronous and may fail with
``ExternalStoreError``; single-item reads return ``None`` for absent items.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from src.domain.entities.host import LogEntry
from src.domain.entities.objects import LiveValue, ObjectEntry, ObjectKind


class IObjectStoreGateway(ABC):
    """Interface for Object Store Gateway."""

    @abstractmethod
    async def get_object_view(self, kind: ObjectKind) -> Dict[str, ObjectEntry]:
        """
        Retrieve every object of one kind.

        Args:
            kind: Object kind to list (state, channel, device, enum, ...)

        Returns:
            Dict[str, ObjectEntry]: Objects keyed by identifier, in store order

        Raises:
            ExternalStoreError: If communication with the store fails
        """
        pass

    @abstractmethod
    async def get_objects(
        self, pattern: str, kind: Optional[ObjectKind] = None
    ) -> Dict[str, ObjectEntry]:
        """Retrieve objects whose identifier matches a glob pattern."""
        pass

    @abstractmethod
    async def get_object(self, object_id: str) -> Optional[ObjectEntry]:
        """Retrieve one object, ``None`` when it does not exist."""
        pass

    @abstractmethod
    async def get_state(self, state_id: str) -> Optional[LiveValue]:
        """Retrieve the live value of a state, ``None`` when never written."""
        pass

    @abstractmethod
    async def set_state(self, state_id: str, value: Any, ack: bool = False) -> None:
        """Write a value to a state."""
        pass

    @abstractmethod
    async def query_logs(self, host: str, size: int) -> List[LogEntry]:
        """Retrieve up to ``size`` of the most recent log records of a host."""
        pass
