"""
Dependency container injection module - Main Layer

This module implements the dependency injection container
to simplify the management and lifecycle of dependencies
in the application.
"""

from contextlib import asynccontextmanager

from dependency_injector import containers, providers

from src.application.models import GatewayInfo
from src.application.services.device_builder import DeviceBuilder
from src.application.services.method_dispatcher import MethodDispatcher
from src.application.services.snapshot_loader import SnapshotLoader
from src.application.services.state_enricher import StateEnricher
from src.application.use_cases.device_use_cases import ListDevicesUseCase
from src.application.use_cases.host_use_cases import (
    GetGatewayInfoUseCase,
    GetLogsUseCase,
    ListAdaptersUseCase,
    ListHostsUseCase,
    SystemInfoUseCase,
)
from src.application.use_cases.object_use_cases import (
    ListFunctionsUseCase,
    ListRoomsUseCase,
    SearchObjectsUseCase,
)
from src.application.use_cases.state_use_cases import GetStatesUseCase, SetStateUseCase
from src.infrastructure.gateways.iobroker_rest_gateway import IoBrokerRestGateway
from src.infrastructure.services.host_metrics_service import HostMetricsService
from src.infrastructure.services.role_classifier import RolePatternClassifier
from src.shared import get_logger

from .config import AppSettings

logger = get_logger(__name__)


class AppContainer(containers.DeclarativeContainer):
    """Composition Root using dependecy-injector."""

    wiring_config = containers.WiringConfiguration(
        packages=["..presentation", "..application"]
    )

    # Settings
    config = providers.Configuration()

    # Infrastructure
    object_store_gateway = providers.Singleton(
        IoBrokerRestGateway,
        rest_url=config.iobroker.rest_url,
        username=config.iobroker.username,
        password=config.iobroker.password,
        timeout=config.iobroker.timeout,
    )

    device_classifier = providers.Singleton(RolePatternClassifier)

    host_metrics = providers.Singleton(HostMetricsService)

    gateway_info = providers.Singleton(
        GatewayInfo,
        title=config.server.title,
        description=config.server.description,
        version=config.server.version,
        environment=providers.Callable(
            lambda env: env.value if hasattr(env, "value") else str(env),
            config.environment,
        ),
        controller_host=config.iobroker.host,
        store_url=config.iobroker.rest_url,
    )

    # Application services
    snapshot_loader = providers.Factory(
        SnapshotLoader,
        object_store_gateway=object_store_gateway,
    )

    state_enricher = providers.Factory(
        StateEnricher,
        object_store_gateway=object_store_gateway,
    )

    device_builder = providers.Factory(
        DeviceBuilder,
        classifier=device_classifier,
        state_enricher=state_enricher,
        language=config.iobroker.language,
        fallback_language=config.iobroker.fallback_language,
    )

    # Application (use cases)
    list_devices_use_case = providers.Factory(
        ListDevicesUseCase,
        snapshot_loader=snapshot_loader,
        device_builder=device_builder,
    )

    get_states_use_case = providers.Factory(
        GetStatesUseCase,
        object_store_gateway=object_store_gateway,
    )

    set_state_use_case = providers.Factory(
        SetStateUseCase,
        object_store_gateway=object_store_gateway,
    )

    search_objects_use_case = providers.Factory(
        SearchObjectsUseCase,
        object_store_gateway=object_store_gateway,
        language=config.iobroker.language,
        fallback_language=config.iobroker.fallback_language,
    )

    list_rooms_use_case = providers.Factory(
        ListRoomsUseCase,
        object_store_gateway=object_store_gateway,
        language=config.iobroker.language,
        fallback_language=config.iobroker.fallback_language,
    )

    list_functions_use_case = providers.Factory(
        ListFunctionsUseCase,
        object_store_gateway=object_store_gateway,
        language=config.iobroker.language,
        fallback_language=config.iobroker.fallback_language,
    )

    list_adapters_use_case = providers.Factory(
        ListAdaptersUseCase,
        object_store_gateway=object_store_gateway,
    )

    list_hosts_use_case = providers.Factory(
        ListHostsUseCase,
        object_store_gateway=object_store_gateway,
    )

    system_info_use_case = providers.Factory(
        SystemInfoUseCase,
        object_store_gateway=object_store_gateway,
        host_metrics=host_metrics,
        gateway_info=gateway_info,
    )

    get_logs_use_case = providers.Factory(
        GetLogsUseCase,
        object_store_gateway=object_store_gateway,
        gateway_info=gateway_info,
    )

    method_dispatcher = providers.Singleton(
        MethodDispatcher,
        list_devices_use_case=list_devices_use_case,
        get_states_use_case=get_states_use_case,
        set_state_use_case=set_state_use_case,
        search_objects_use_case=search_objects_use_case,
        list_adapters_use_case=list_adapters_use_case,
        system_info_use_case=system_info_use_case,
        get_logs_use_case=get_logs_use_case,
        list_rooms_use_case=list_rooms_use_case,
        list_functions_use_case=list_functions_use_case,
        list_hosts_use_case=list_hosts_use_case,
    )

    get_gateway_info_use_case = providers.Factory(
        GetGatewayInfoUseCase,
        gateway_info=gateway_info,
        methods=providers.Callable(
            lambda dispatcher: dispatcher.methods(), method_dispatcher
        ),
    )


# -------------------------
# Global Container Instance
# -------------------------
_app_container: AppContainer | None = None


def init_container(settings: AppSettings) -> AppContainer:
    """Initialize global container with application settings."""

    global _app_container

    container = AppContainer()
    container.config.from_pydantic(settings)
    _app_container = container
    return container


def get_container() -> AppContainer:
    """Get the initialized global container."""

    if _app_container is None:
        raise RuntimeError("Container has not been initialized yet")

    return _app_container


@asynccontextmanager
async def app_lifespan():
    """
    Centralized lifecycle management for the container.

    The gateway opens one HTTP client per call, so there is nothing to
    connect on startup; the dispatcher is built eagerly so that wiring
    errors surface before the first request.
    """
    container = get_container()

    try:
        dispatcher = container.method_dispatcher()
        logger.info(
            "container.resources.initialized",
            store_url=container.gateway_info().store_url,
            methods=dispatcher.methods(),
        )
        yield container

    finally:
        logger.info("container.resources.shutdown")
