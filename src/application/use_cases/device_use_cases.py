"""
Device Use Cases - Application Layer

This module defines the ``list_devices`` use case. It loads a fresh
snapshot of the object store, groups and classifies devices, enriches
them with live values and paginates the room-filtered result.
"""

from dependency_injector.wiring import Provide, inject

from src.application.dtos.device_dto import DeviceListDTO, ListDevicesParamsDTO
from src.application.services.device_builder import DeviceBuilder
from src.application.services.snapshot_loader import SnapshotLoader
from src.domain.entities.device import DevicePage
from src.shared import get_logger

logger = get_logger(__name__)


class ListDevicesUseCase:
    """Use case for listing the devices inferred from the object store."""

    @inject
    def __init__(
        self,
        snapshot_loader: SnapshotLoader = Provide["snapshot_loader"],
        device_builder: DeviceBuilder = Provide["device_builder"],
    ):
        """
        Initialize the use case with its dependencies.

        Args:
            snapshot_loader: Loads the object namespace
            device_builder: Groups, classifies and enriches devices
        """
        self._snapshot_loader = snapshot_loader
        self._device_builder = device_builder

    async def execute(self, params: ListDevicesParamsDTO) -> DeviceListDTO:
        """
        Build the device list and return the requested page.

        Args:
            params: Room filter and pagination

        Returns:
            DeviceListDTO: Room-filtered total and the page of devices

        Raises:
            ExternalStoreError: If the snapshot cannot be loaded
        """
        logger.info(
            "devices.list_started",
            room=params.room,
            limit=params.limit,
            offset=params.offset,
        )

        try:
            snapshot = await self._snapshot_loader.load_snapshot()
            devices = await self._device_builder.build_devices(
                snapshot, room_filter=params.room
            )

            page = DevicePage(
                total=len(devices),
                devices=devices[params.offset : params.offset + params.limit],
            )

            logger.info(
                "devices.listed",
                total=page.total,
                returned=len(page.devices),
                room=params.room,
            )
            return DeviceListDTO.from_domain(page)

        except Exception as e:
            logger.error(
                "devices.list_failed",
                room=params.room,
                error=str(e),
                exc_info=e,
            )
            raise
