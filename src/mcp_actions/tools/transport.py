"""Transport boundary: deliver ``(toolkit_id, action_name, params)`` and return the envelope."""

from __future__ import annotations

import asyncio
import json
import logging
from collections.abc import Mapping
from typing import Any, Protocol
from urllib import error, request

from mcp_actions.config.settings import Settings

logger = logging.getLogger(__name__)


class ToolTransport(Protocol):
    async def invoke(
        self,
        toolkit_id: str,
        action_name: str,
        params: Mapping[str, Any],
    ) -> Any: ...


class ToolTransportError(RuntimeError):
    """Delivery failed before an envelope was received."""


class HttpToolTransport:
    """POST the wire triple to a remote executor as JSON.

    Each call runs the blocking request in its own worker thread, so
    concurrent invocations share nothing.
    """

    def __init__(self, *, url: str, timeout_s: float = 60.0) -> None:
        self.url = url
        self.timeout_s = timeout_s

    @classmethod
    def from_settings(cls, settings: Settings) -> HttpToolTransport:
        return cls(url=settings.executor_url(), timeout_s=settings.transport_timeout_s)

    async def invoke(
        self,
        toolkit_id: str,
        action_name: str,
        params: Mapping[str, Any],
    ) -> Any:
        body = {"toolkitId": toolkit_id, "toolName": action_name, "params": dict(params)}
        return await asyncio.to_thread(self._post, body)

    def _post(self, body: dict[str, Any]) -> Any:
        req = request.Request(
            url=self.url,
            data=json.dumps(body).encode("utf-8"),
            method="POST",
            headers={"Accept": "application/json", "Content-Type": "application/json"},
        )
        logger.debug("MCP executor request url=%s tool=%s", self.url, body["toolName"])
        try:
            with request.urlopen(req, timeout=self.timeout_s) as response:
                raw = response.read().decode("utf-8")
        except error.HTTPError as exc:
            message = exc.read().decode("utf-8", errors="replace")
            raise ToolTransportError(
                f"MCP executor request failed with status {exc.code}: {message[:400]}"
            ) from exc
        except error.URLError as exc:
            raise ToolTransportError(f"MCP executor request failed: {exc.reason}") from exc
        except TimeoutError as exc:
            raise ToolTransportError(
                f"MCP executor request failed: timed out after {self.timeout_s:.2f}s"
            ) from exc
        return _decode_body(raw)


def _decode_body(body: str) -> Any:
    if not body:
        return {}
    try:
        return json.loads(body)
    except json.JSONDecodeError:
        return {"raw": body}
