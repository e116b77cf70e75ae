from __future__ import annotations

import pytest

from src.application.dtos.object_dto import SearchObjectsParamsDTO
from src.application.use_cases.object_use_cases import (
    ListFunctionsUseCase,
    ListRoomsUseCase,
    SearchObjectsUseCase,
)


@pytest.fixture()
def store_with_lamps(fake_store):
    for index in range(3):
        fake_store.add_object(
            f"hue.0.lamp{index}.on",
            "state",
            name=f"Lamp {index}",
            role="switch.light",
            type="boolean",
        )
    return fake_store


@pytest.mark.asyncio
async def test_search_by_identifier_substring_is_case_insensitive(
    store_with_lamps,
) -> None:
    result = await SearchObjectsUseCase(store_with_lamps).execute(
        SearchObjectsParamsDTO(query="TEMPERATURE")
    )

    assert result.count == 1
    summary = result.objects[0]
    assert summary.id == "zigbee.0.dev1.temperature"
    assert summary.name == "Temperature"
    assert summary.role == "value.temperature"
    assert summary.type == "number"
    assert summary.unit == "°C"


@pytest.mark.asyncio
async def test_search_by_exact_role_with_limit(store_with_lamps) -> None:
    result = await SearchObjectsUseCase(store_with_lamps).execute(
        SearchObjectsParamsDTO(role="switch.light", limit=2)
    )

    assert [item.id for item in result.objects] == ["hue.0.lamp0.on", "hue.0.lamp1.on"]


@pytest.mark.asyncio
async def test_search_by_room_uses_prefix_membership(store_with_lamps) -> None:
    result = await SearchObjectsUseCase(store_with_lamps).execute(
        SearchObjectsParamsDTO(room="Living Room")
    )

    assert {item.id for item in result.objects} == {
        "zigbee.0.dev1.temperature",
        "zigbee.0.dev1.humidity",
    }


@pytest.mark.asyncio
async def test_search_in_unknown_room_is_empty(store_with_lamps) -> None:
    result = await SearchObjectsUseCase(store_with_lamps).execute(
        SearchObjectsParamsDTO(room="Attic")
    )

    assert result.count == 0


@pytest.mark.asyncio
async def test_list_rooms_resolves_names(fake_store) -> None:
    result = await ListRoomsUseCase(fake_store, language="de").execute()

    assert [item.model_dump() for item in result.items] == [
        {
            "id": "enum.rooms.living_room",
            "name": "Wohnzimmer",
            "members": ["zigbee.0.dev1"],
        }
    ]


@pytest.mark.asyncio
async def test_list_functions_only_returns_functions(fake_store) -> None:
    result = await ListFunctionsUseCase(fake_store).execute()

    assert [item.id for item in result.items] == ["enum.functions.climate"]
    assert result.items[0].name == "Climate"
