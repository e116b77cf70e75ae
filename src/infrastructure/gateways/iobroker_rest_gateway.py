"""ioBroker REST API gateway implementation - Infrastructure layer."""

from __future__ import annotations

import re
from datetime import datetime
from typing import Any, Dict, List, Optional
from urllib.parse import quote

import httpx

from src.domain.entities.errors import ExternalStoreError
from src.domain.entities.host import LogEntry
from src.domain.entities.objects import LiveValue, ObjectEntry, ObjectKind
from src.domain.gateways.object_store_gateway import IObjectStoreGateway
from src.shared import get_logger

logger = get_logger(__name__)

# "2024-05-01 10:15:00.123  - info: zigbee.0 (1234) message"
_LOG_LINE = re.compile(
    r"^(?P<ts>\d{4}-\d{2}-\d{2}[ T]\d{2}:\d{2}:\d{2}(?:\.\d+)?)\s+-\s+"
    r"(?P<level>[a-z]+):\s+"
    r"(?P<source>\S+)\s+(?P<message>.*)$",
    re.DOTALL,
)
_ANSI = re.compile(r"\x1b\[\d+m")


class IoBrokerRestGateway(IObjectStoreGateway):
    """HTTP client for the ioBroker ``rest-api`` adapter (``/v1`` routes)."""

    def __init__(
        self,
        rest_url: str,
        username: Optional[str] = None,
        password: Optional[str] = None,
        timeout: float = 30.0,
    ):
        """
        Initialize ioBroker REST Gateway.

        Args:
            rest_url: Base URL of the rest-api adapter, e.g. http://host:8093
            username: Optional basic-auth user
            password: Optional basic-auth password
            timeout: Per-request timeout in seconds
        """
        self.rest_url = rest_url.rstrip("/")
        self.timeout = timeout
        self._auth = httpx.BasicAuth(username, password or "") if username else None

    async def get_object_view(self, kind: ObjectKind) -> Dict[str, ObjectEntry]:
        """
        Retrieve every object of one kind.

        Args:
            kind: Object kind to list

        Returns:
            Dict[str, ObjectEntry]: Objects keyed by identifier, in store order

        Raises:
            ExternalStoreError: If communication with the store fails
        """
        return await self.get_objects("*", kind)

    async def get_objects(
        self, pattern: str, kind: Optional[ObjectKind] = None
    ) -> Dict[str, ObjectEntry]:
        params = {"filter": pattern}
        if kind is not None:
            params["type"] = kind.value

        response = await self._send("objects", "GET", "/v1/objects", params=params)
        payload = response.json() if response is not None else None
        if not isinstance(payload, dict):
            return {}

        objects = {
            object_id: ObjectEntry.from_raw(object_id, raw)
            for object_id, raw in payload.items()
            if isinstance(raw, dict)
        }
        logger.debug(
            "store.objects.response",
            pattern=pattern,
            kind=params.get("type"),
            count=len(objects),
        )
        return objects

    async def get_object(self, object_id: str) -> Optional[ObjectEntry]:
        response = await self._send(
            "object",
            "GET",
            f"/v1/object/{self._quote(object_id)}",
            allow_missing=True,
        )
        if response is None:
            return None
        payload = response.json()
        if not isinstance(payload, dict):
            return None
        return ObjectEntry.from_raw(object_id, payload)

    async def get_state(self, state_id: str) -> Optional[LiveValue]:
        response = await self._send(
            "state", "GET", f"/v1/state/{self._quote(state_id)}", allow_missing=True
        )
        if response is None:
            return None
        payload = response.json()
        if not isinstance(payload, dict):
            return None
        return LiveValue.from_raw(payload)

    async def set_state(self, state_id: str, value: Any, ack: bool = False) -> None:
        logger.info("store.state.write", state_id=state_id, ack=ack)
        await self._send(
            "state_write",
            "PATCH",
            f"/v1/state/{self._quote(state_id)}",
            json={"val": value, "ack": ack},
        )

    async def query_logs(self, host: str, size: int) -> List[LogEntry]:
        response = await self._send(
            "logs",
            "GET",
            "/v1/command/sendToHost",
            params={"host": host, "command": "getLogs", "message": str(size)},
        )
        payload = response.json() if response is not None else None
        return self._parse_logs(payload, host)

    async def _send(
        self,
        operation: str,
        method: str,
        path: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        json: Any = None,
        allow_missing: bool = False,
    ) -> Optional[httpx.Response]:
        url = f"{self.rest_url}{path}"
        logger.debug(f"store.{operation}.request", method=method, url=url)

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, auth=self._auth
            ) as client:
                response = await client.request(method, url, params=params, json=json)
                if allow_missing and response.status_code == httpx.codes.NOT_FOUND:
                    return None
                response.raise_for_status()
                return response

        except httpx.HTTPStatusError as e:
            logger.error(
                f"store.{operation}.http_error",
                status_code=e.response.status_code,
                response_text=e.response.text,
                url=url,
                exc_info=e,
            )
            raise ExternalStoreError(
                f"Object store returned HTTP {e.response.status_code}: "
                f"{e.response.text}",
                {"url": url, "status_code": e.response.status_code},
            ) from e

        except httpx.RequestError as e:
            logger.error(
                f"store.{operation}.request_error",
                error=str(e),
                url=url,
                exc_info=e,
            )
            raise ExternalStoreError(
                f"Failed to communicate with object store: {str(e)}", {"url": url}
            ) from e

    def _quote(self, object_id: str) -> str:
        return quote(object_id, safe="")

    def _parse_logs(self, payload: Any, host: str) -> List[LogEntry]:
        if isinstance(payload, dict):
            payload = payload.get("result", payload.get("list"))
        if not isinstance(payload, list):
            return []

        entries: List[LogEntry] = []
        for item in payload:
            entry = None
            if isinstance(item, dict):
                entry = self._parse_log_record(item, host)
            elif isinstance(item, str):
                entry = self._parse_log_line(item, host)
            if entry is not None:
                entries.append(entry)
        return entries

    def _parse_log_record(self, data: Dict[str, Any], host: str) -> LogEntry:
        ts = data.get("ts")
        return LogEntry(
            ts=int(ts) if isinstance(ts, (int, float)) else None,
            level=str(data.get("severity") or data.get("level") or "info"),
            source=str(data.get("from") or data.get("source") or ""),
            message=str(data.get("message", "")),
            host=host,
        )

    def _parse_log_line(self, line: str, host: str) -> Optional[LogEntry]:
        text = _ANSI.sub("", line).strip()
        if not text:
            return None

        match = _LOG_LINE.match(text)
        if match is None:
            return LogEntry(ts=None, level="info", source="", message=text, host=host)

        return LogEntry(
            ts=self._parse_timestamp(match.group("ts")),
            level=match.group("level"),
            source=match.group("source"),
            message=match.group("message").strip(),
            host=host,
        )

    def _parse_timestamp(self, value: str) -> Optional[int]:
        try:
            parsed = datetime.fromisoformat(value.replace(" ", "T", 1))
        except ValueError:
            return None
        return int(parsed.timestamp() * 1000)
