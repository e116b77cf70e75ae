from __future__ import annotations

import pytest

from src.application.services.device_builder import (
    DeviceBuilder,
    collect_roles,
    collect_state_ids,
)
from src.application.services.state_enricher import StateEnricher
from src.domain.entities.device import DeviceControl, DeviceState
from src.infrastructure.services.role_classifier import RolePatternClassifier
from tests.conftest import StubClassifier, build_dispatcher


def test_collect_state_ids_deduplicates_in_order() -> None:
    controls = [
        DeviceControl("a", ["x", "y"]),
        DeviceControl("b", ["y", "z", "x"]),
    ]

    assert collect_state_ids(controls) == ["x", "y", "z"]


def test_collect_roles_skips_empty_roles() -> None:
    states = [
        DeviceState(id="1", role="value.temperature", type="number"),
        DeviceState(id="2", role="", type="mixed"),
        DeviceState(id="3", role="value.temperature", type="number"),
        DeviceState(id="4", role="value.humidity", type="number"),
    ]

    assert collect_roles(states) == ["value.temperature", "value.humidity"]


def _builder(fake_store, classifier=None) -> DeviceBuilder:
    return DeviceBuilder(
        classifier=classifier or RolePatternClassifier(),
        state_enricher=StateEnricher(fake_store),
    )


@pytest.mark.asyncio
async def test_climate_sensor_is_built_end_to_end(fake_store, snapshot) -> None:
    devices = await _builder(fake_store).build_devices(snapshot)

    assert len(devices) == 1
    device = devices[0]
    assert device.id == "device:zigbee.0.dev1"
    assert device.name == "Climate sensor"
    assert device.type == "temperature"
    assert device.room == "Living Room"
    assert device.vendor == "Aqara"
    assert device.model == "WSDCGQ11LM"
    assert device.roles == ["value.temperature", "value.humidity"]
    assert device.tags == ["zigbee"]
    assert [state.id for state in device.states] == [
        "zigbee.0.dev1.temperature",
        "zigbee.0.dev1.humidity",
    ]


@pytest.mark.asyncio
async def test_unknown_room_yields_no_devices(fake_store, snapshot) -> None:
    devices = await _builder(fake_store).build_devices(
        snapshot, room_filter="Nonexistent"
    )

    assert devices == []


@pytest.mark.asyncio
async def test_first_control_decides_type_but_all_controls_attach_states(
    fake_store, snapshot
) -> None:
    classifier = StubClassifier(
        {
            "zigbee.0.dev1": [
                DeviceControl("humidity", ["zigbee.0.dev1.humidity"]),
                DeviceControl("temperature", ["zigbee.0.dev1.temperature"]),
            ]
        }
    )

    devices = await _builder(fake_store, classifier).build_devices(snapshot)

    assert devices[0].type == "humidity"
    assert devices[0].roles == ["value.humidity", "value.temperature"]


@pytest.mark.asyncio
async def test_group_without_controls_is_skipped(fake_store, snapshot) -> None:
    devices = await _builder(fake_store, StubClassifier()).build_devices(snapshot)

    assert devices == []


class _BrokenClassifier:
    def classify(self, snapshot, object_id):
        raise RuntimeError("detector crashed")


@pytest.mark.asyncio
async def test_classifier_failure_propagates(fake_store, snapshot) -> None:
    with pytest.raises(RuntimeError, match="detector crashed"):
        await _builder(fake_store, _BrokenClassifier()).build_devices(snapshot)


@pytest.mark.asyncio
async def test_classifier_failure_fails_list_devices(fake_store, gateway_info) -> None:
    dispatcher = build_dispatcher(
        fake_store, gateway_info, classifier=_BrokenClassifier()
    )

    envelope = await dispatcher.dispatch("list_devices", {})

    assert envelope == {
        "ok": False,
        "error": "Internal error",
        "message": "detector crashed",
    }


@pytest.mark.asyncio
async def test_missing_name_and_vendor_fall_back(fake_store) -> None:
    fake_store.add_object("hue.0.lamp", "channel", vendor="")
    fake_store.add_object("hue.0.lamp.on", "state", role="switch.light", type="boolean")
    fake_store.add_state("hue.0.lamp.on", True)
    snapshot = await fake_store.get_objects("hue.*")

    devices = await _builder(fake_store).build_devices(snapshot)

    assert len(devices) == 1
    assert devices[0].name == "hue.0.lamp"
    assert devices[0].type == "light"
    assert devices[0].vendor is None
    assert devices[0].room is None


@pytest.mark.asyncio
async def test_unreadable_state_keeps_device(fake_store, snapshot) -> None:
    fake_store.failing_states["zigbee.0.dev1.temperature"] = RuntimeError("boom")

    devices = await _builder(fake_store).build_devices(snapshot)

    states = {state.id: state for state in devices[0].states}
    assert states["zigbee.0.dev1.temperature"].error == "boom"
    assert states["zigbee.0.dev1.humidity"].value == 40


@pytest.mark.asyncio
async def test_device_in_two_rooms_reports_first_room_by_id(fake_store) -> None:
    fake_store.add_object(
        "enum.rooms.bath", "enum", name="Bath", members=["zigbee.0.dev1"]
    )
    snapshot = await fake_store.get_objects("*")

    devices = await _builder(fake_store).build_devices(
        snapshot, room_filter="Living Room"
    )

    assert [device.id for device in devices] == ["device:zigbee.0.dev1"]
    assert devices[0].room == "Bath"
