from __future__ import annotations

import pytest

from src.domain.entities.errors import ExternalStoreError
from src.domain.entities.objects import ObjectKind
from tests.conftest import StubHostMetrics, build_dispatcher


@pytest.mark.asyncio
async def test_unknown_method_envelope(method_dispatcher) -> None:
    result = await method_dispatcher.dispatch("bogus_method", {})

    assert result == {"ok": False, "error": "Unknown method: bogus_method"}


@pytest.mark.asyncio
@pytest.mark.parametrize("method", [None, ""])
async def test_missing_method_name(method_dispatcher, method) -> None:
    result = await method_dispatcher.dispatch(method, {})

    assert result == {"ok": False, "error": "Method name is required"}


@pytest.mark.asyncio
async def test_invalid_parameters_stop_before_execution(
    method_dispatcher, fake_store
) -> None:
    result = await method_dispatcher.dispatch("set_state", {"value": 1})

    assert result["ok"] is False
    assert result["error"] == "Invalid parameters"
    assert "id" in result["message"]
    assert fake_store.writes == []


@pytest.mark.asyncio
async def test_empty_id_list_is_rejected(method_dispatcher, fake_store) -> None:
    result = await method_dispatcher.dispatch("get_states", {"ids": []})

    assert result["error"] == "Invalid parameters"
    assert fake_store.state_reads == []


@pytest.mark.asyncio
async def test_non_object_params_are_rejected(method_dispatcher) -> None:
    result = await method_dispatcher.dispatch("list_devices", ["room"])

    assert result == {
        "ok": False,
        "error": "Invalid parameters",
        "message": "params must be an object",
    }


@pytest.mark.asyncio
async def test_operation_failure_becomes_internal_error(
    method_dispatcher, fake_store
) -> None:
    fake_store.failing_views[ObjectKind.STATE] = ExternalStoreError(
        "Failed to communicate with object store: refused"
    )

    result = await method_dispatcher.dispatch("list_devices", {})

    assert result == {
        "ok": False,
        "error": "Internal error",
        "message": "Failed to communicate with object store: refused",
    }


@pytest.mark.asyncio
async def test_list_devices_payload_drops_absent_fields(method_dispatcher) -> None:
    result = await method_dispatcher.dispatch("list_devices", None)

    assert result["ok"] is True
    device = result["data"]["devices"][0]
    assert result["data"]["total"] == 1
    assert device["type"] == "temperature"
    temperature = device["states"][0]
    assert "lc" not in temperature
    assert "error" not in temperature
    assert device["states"][1]["lc"] == 900


@pytest.mark.asyncio
async def test_get_states_payload_keeps_null_values(method_dispatcher) -> None:
    result = await method_dispatcher.dispatch(
        "get_states", {"ids": ["zigbee.0.dev1.temperature", "nope.0.x"]}
    )

    first, missing = result["data"]["states"]
    assert first["val"] == 21.5
    assert "from" in first
    assert missing["val"] is None
    assert missing["ack"] is False
    assert isinstance(missing["ts"], int)


@pytest.mark.asyncio
async def test_system_info_failure_is_reported(fake_store, gateway_info) -> None:
    dispatcher = build_dispatcher(
        fake_store, gateway_info, host_metrics=StubHostMetrics(OSError("no proc"))
    )

    result = await dispatcher.dispatch("system_info", {})

    assert result == {"ok": False, "error": "Internal error", "message": "no proc"}


def test_methods_lists_every_capability(method_dispatcher) -> None:
    assert method_dispatcher.methods() == [
        "list_devices",
        "get_states",
        "set_state",
        "search_objects",
        "list_adapters",
        "list_instances",
        "system_info",
        "get_logs",
        "list_rooms",
        "list_functions",
        "list_hosts",
    ]


@pytest.mark.asyncio
async def test_dispatch_is_idempotent_without_writes(method_dispatcher) -> None:
    first = await method_dispatcher.dispatch("list_devices", {"room": "Living Room"})
    second = await method_dispatcher.dispatch("list_devices", {"room": "Living Room"})

    assert first == second


@pytest.mark.asyncio
async def test_unserializable_result_becomes_internal_error(method_dispatcher) -> None:
    result = await method_dispatcher.dispatch(
        "set_state", {"id": "zigbee.0.dev1.temperature", "value": object()}
    )

    assert result["ok"] is False
    assert result["error"] == "Internal error"
