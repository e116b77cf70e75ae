"""Use cases for batch state reads and single state writes."""

from __future__ import annotations

import asyncio
import time
from typing import Optional

from src.application.dtos.state_dto import (
    GetStatesParamsDTO,
    SetStateParamsDTO,
    SetStateResultDTO,
    StatesResponseDTO,
    StateValueDTO,
)
from src.domain.entities.objects import LiveValue
from src.domain.gateways.object_store_gateway import IObjectStoreGateway
from src.shared import get_logger

logger = get_logger(__name__)


def _now_ms() -> int:
    return int(time.time() * 1000)


class GetStatesUseCase:
    """Reads the live values of a batch of states."""

    def __init__(self, object_store_gateway: IObjectStoreGateway) -> None:
        self._gateway = object_store_gateway

    async def execute(self, params: GetStatesParamsDTO) -> StatesResponseDTO:
        results = await asyncio.gather(
            *(self._gateway.get_state(state_id) for state_id in params.ids),
            return_exceptions=True,
        )

        records = []
        for state_id, result in zip(params.ids, results):
            if isinstance(result, BaseException):
                if not isinstance(result, Exception):
                    raise result
                logger.warning(
                    "states.fetch_failed", state_id=state_id, error=str(result)
                )
                records.append(self._missing(state_id, error=str(result)))
            elif result is None:
                records.append(self._missing(state_id))
            else:
                records.append(self._record(state_id, result))

        logger.debug("states.fetched", requested=len(params.ids))
        return StatesResponseDTO(states=records)

    def _record(self, state_id: str, live: LiveValue) -> StateValueDTO:
        return StateValueDTO(
            id=state_id,
            val=live.val,
            ack=live.ack,
            ts=live.ts,
            lc=live.lc,
            from_=live.source,
            q=live.quality,
        )

    def _missing(self, state_id: str, error: Optional[str] = None) -> StateValueDTO:
        return StateValueDTO(
            id=state_id, val=None, ack=False, ts=_now_ms(), error=error
        )


class SetStateUseCase:
    """Writes one value to the store, once."""

    def __init__(self, object_store_gateway: IObjectStoreGateway) -> None:
        self._gateway = object_store_gateway

    async def execute(self, params: SetStateParamsDTO) -> SetStateResultDTO:
        logger.info("states.set", state_id=params.id, ack=params.ack)
        await self._gateway.set_state(params.id, params.value, ack=params.ack)
        return SetStateResultDTO(id=params.id, value=params.value, ack=params.ack)
