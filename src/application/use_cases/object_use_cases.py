"""Use cases for object search and room/function enumeration listings."""

from __future__ import annotations

import asyncio
from typing import Callable, List, Optional, Set

from src.application.dtos.object_dto import (
    EnumerationDTO,
    EnumerationsResponseDTO,
    ObjectSummaryDTO,
    SearchObjectsParamsDTO,
    SearchObjectsResponseDTO,
)
from src.domain.entities.objects import ObjectEntry, ObjectKind, Snapshot
from src.domain.gateways.object_store_gateway import IObjectStoreGateway
from src.domain.services.enum_resolver import (
    EnumResolver,
    FunctionResolver,
    RoomResolver,
    covers,
)
from src.domain.services.naming import (
    DEFAULT_FALLBACK_LANGUAGE,
    DEFAULT_LANGUAGE,
    resolve_name,
)
from src.shared import get_logger

logger = get_logger(__name__)


class SearchObjectsUseCase:
    """Searches state entries by identifier substring, role and room."""

    def __init__(
        self,
        object_store_gateway: IObjectStoreGateway,
        language: str = DEFAULT_LANGUAGE,
        fallback_language: str = DEFAULT_FALLBACK_LANGUAGE,
    ) -> None:
        self._gateway = object_store_gateway
        self._language = language
        self._fallback_language = fallback_language

    async def execute(self, params: SearchObjectsParamsDTO) -> SearchObjectsResponseDTO:
        states, enums = await asyncio.gather(
            self._gateway.get_object_view(ObjectKind.STATE),
            self._gateway.get_object_view(ObjectKind.ENUM),
        )

        room_members: Optional[Set[str]] = None
        if params.room:
            room_members = RoomResolver(
                enums, self._language, self._fallback_language
            ).resolve_room_members(params.room)

        needle = params.query.lower() if params.query else None
        matches: List[ObjectSummaryDTO] = []
        for entry in states.values():
            if len(matches) >= params.limit:
                break
            if entry.kind != ObjectKind.STATE:
                continue
            if needle and needle not in entry.id.lower():
                continue
            if params.role and entry.common.role != params.role:
                continue
            if room_members is not None and not any(
                covers(member, entry.id) for member in room_members
            ):
                continue
            matches.append(self._summary(entry))

        logger.info(
            "objects.searched",
            query=params.query,
            role=params.role,
            room=params.room,
            count=len(matches),
        )
        return SearchObjectsResponseDTO(count=len(matches), objects=matches)

    def _summary(self, entry: ObjectEntry) -> ObjectSummaryDTO:
        return ObjectSummaryDTO(
            id=entry.id,
            name=resolve_name(
                entry.common.name, entry.id, self._language, self._fallback_language
            ),
            role=entry.common.role,
            type=entry.common.value_type,
            unit=entry.common.unit,
        )


class _ListEnumerationsUseCase:
    """Lists the enumerations below one reserved prefix."""

    resolver_factory: Callable[[Snapshot, str, str], EnumResolver]

    def __init__(
        self,
        object_store_gateway: IObjectStoreGateway,
        language: str = DEFAULT_LANGUAGE,
        fallback_language: str = DEFAULT_FALLBACK_LANGUAGE,
    ) -> None:
        self._gateway = object_store_gateway
        self._language = language
        self._fallback_language = fallback_language

    async def execute(self) -> EnumerationsResponseDTO:
        enums = await self._gateway.get_object_view(ObjectKind.ENUM)
        resolver = type(self).resolver_factory(
            enums, self._language, self._fallback_language
        )
        return EnumerationsResponseDTO(
            items=[
                EnumerationDTO(
                    id=entry.id,
                    name=resolver.display_name(entry),
                    members=list(entry.common.members),
                )
                for entry in resolver.entries
            ]
        )


class ListRoomsUseCase(_ListEnumerationsUseCase):
    resolver_factory = RoomResolver


class ListFunctionsUseCase(_ListEnumerationsUseCase):
    resolver_factory = FunctionResolver
