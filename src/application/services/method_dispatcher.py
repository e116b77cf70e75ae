"""
Method Dispatcher - Application Layer

Routes a method name and a parameter mapping to the matching use case and
wraps every outcome in the uniform ``{ok, data | error, message}``
envelope. Transports (HTTP, tool protocols) only ever talk to this class.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, List, Optional, Sequence, Type

from pydantic import BaseModel, ValidationError

from src.application.dtos.device_dto import ListDevicesParamsDTO
from src.application.dtos.envelope_dto import EnvelopeDTO
from src.application.dtos.host_dto import GetLogsParamsDTO
from src.application.dtos.object_dto import SearchObjectsParamsDTO
from src.application.dtos.state_dto import GetStatesParamsDTO, SetStateParamsDTO
from src.domain.entities.errors import ParameterValidationError, UnknownMethodError
from src.shared import get_logger

logger = get_logger(__name__)

ERROR_METHOD_REQUIRED = "Method name is required"
ERROR_INVALID_PARAMETERS = "Invalid parameters"
ERROR_INTERNAL = "Internal error"
UNKNOWN_METHOD_PREFIX = "Unknown method:"


@dataclass(frozen=True)
class MethodBinding:
    """A registered method: its handler and how its input/output are shaped."""

    handler: Callable[..., Awaitable[BaseModel]]
    params_model: Optional[Type[BaseModel]] = None
    exclude_none: bool = False


def describe_validation_errors(errors: Sequence[Dict[str, Any]]) -> str:
    """Flatten pydantic error records into ``loc: msg`` pairs."""
    parts = []
    for error in errors:
        location = ".".join(str(item) for item in error.get("loc", ())) or "params"
        parts.append(f"{location}: {error.get('msg')}")
    return "; ".join(parts)


class MethodDispatcher:
    """Stateless name-to-use-case router producing result envelopes."""

    def __init__(
        self,
        list_devices_use_case,
        get_states_use_case,
        set_state_use_case,
        search_objects_use_case,
        list_adapters_use_case,
        system_info_use_case,
        get_logs_use_case,
        list_rooms_use_case,
        list_functions_use_case,
        list_hosts_use_case,
    ) -> None:
        adapters = MethodBinding(list_adapters_use_case.execute)
        self._methods: Dict[str, MethodBinding] = {
            "list_devices": MethodBinding(
                list_devices_use_case.execute,
                ListDevicesParamsDTO,
                exclude_none=True,
            ),
            "get_states": MethodBinding(
                get_states_use_case.execute, GetStatesParamsDTO
            ),
            "set_state": MethodBinding(set_state_use_case.execute, SetStateParamsDTO),
            "search_objects": MethodBinding(
                search_objects_use_case.execute, SearchObjectsParamsDTO
            ),
            "list_adapters": adapters,
            "list_instances": adapters,
            "system_info": MethodBinding(system_info_use_case.execute),
            "get_logs": MethodBinding(get_logs_use_case.execute, GetLogsParamsDTO),
            "list_rooms": MethodBinding(list_rooms_use_case.execute),
            "list_functions": MethodBinding(list_functions_use_case.execute),
            "list_hosts": MethodBinding(list_hosts_use_case.execute),
        }

    def methods(self) -> List[str]:
        """Names accepted by :meth:`dispatch`, in registration order."""
        return list(self._methods)

    async def dispatch(
        self, method: Optional[str], params: Optional[Dict[str, Any]] = None
    ) -> Dict[str, Any]:
        """
        Execute ``method`` with ``params`` and return the result envelope.

        Never raises: every failure is reported through the envelope.
        """
        if not method:
            return EnvelopeDTO.failure(ERROR_METHOD_REQUIRED).to_payload()

        binding = self._methods.get(method)
        if binding is None:
            error = UnknownMethodError(method)
            logger.warning("dispatch.unknown_method", method=method)
            return EnvelopeDTO.failure(error.message).to_payload()

        try:
            arguments = self._parse_params(binding, params)
        except ParameterValidationError as exc:
            logger.info("dispatch.invalid_params", method=method, error=exc.message)
            return EnvelopeDTO.failure(
                ERROR_INVALID_PARAMETERS, exc.message
            ).to_payload()

        try:
            result = await binding.handler(*arguments)
            data = result.model_dump(
                mode="json", by_alias=True, exclude_none=binding.exclude_none
            )
        except Exception as exc:
            logger.error(
                "dispatch.failed", method=method, error=str(exc), exc_info=True
            )
            return EnvelopeDTO.failure(ERROR_INTERNAL, str(exc)).to_payload()

        logger.debug("dispatch.completed", method=method)
        return EnvelopeDTO.success(data).to_payload()

    def _parse_params(
        self, binding: MethodBinding, params: Optional[Dict[str, Any]]
    ) -> List[BaseModel]:
        if params is None:
            params = {}
        if not isinstance(params, dict):
            raise ParameterValidationError("params must be an object")
        if binding.params_model is None:
            return []
        try:
            return [binding.params_model.model_validate(params)]
        except ValidationError as exc:
            raise ParameterValidationError(
                describe_validation_errors(exc.errors()), details={"errors": exc.errors()}
            ) from exc
