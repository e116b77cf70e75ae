from __future__ import annotations

import pytest
from dependency_injector import providers

from src.main import app as module_app
from src.main.app import create_app
from src.main.container import get_container
from tests.conftest import FakeObjectStoreGateway


@pytest.mark.asyncio
async def test_create_app_initializes_lifespan() -> None:
    app = create_app()
    get_container().object_store_gateway.override(
        providers.Object(FakeObjectStoreGateway())
    )
    assert app.title == "ioBroker MCP Gateway"

    async with app.router.lifespan_context(app):
        assert app.state.started_at is not None
        assert app.state.container is get_container()

    # Ensure module-level app is instantiated
    assert isinstance(module_app.app, type(app))


def test_routes_are_registered() -> None:
    paths = {route.path for route in create_app().routes}

    assert {"/", "/status", "/api/info", "/api/capabilities", "/api"} <= paths
    assert "/api/{method}" in paths
