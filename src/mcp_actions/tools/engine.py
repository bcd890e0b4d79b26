"""Generic tool-invocation engine shared by every action facade."""

from __future__ import annotations

import logging
import time
from collections.abc import Mapping
from enum import Enum
from typing import Any

from mcp_actions.tools.descriptor import ToolDescriptor
from mcp_actions.tools.envelope import unwrap_envelope
from mcp_actions.tools.errors import ToolInvocationError
from mcp_actions.tools.outcome import resolve_outcome
from mcp_actions.tools.registry import DescriptorRegistry, default_registry
from mcp_actions.tools.transport import ToolTransport
from mcp_actions.tools.validator import build_request, validate_request

logger = logging.getLogger(__name__)


class InvocationState(str, Enum):
    VALIDATING = "validating"
    INVOKING = "invoking"
    UNWRAPPING = "unwrapping"
    RESOLVED = "resolved"
    FAILED = "failed"


class ToolEngine:
    """Validate, send, unwrap and resolve one remote action call.

    Every call either returns the remote ``data`` unchanged or raises exactly
    one ``ToolInvocationError``. Transport failures are re-raised as they are.
    Nothing is retried.
    """

    def __init__(
        self,
        transport: ToolTransport,
        *,
        registry: DescriptorRegistry | None = None,
    ) -> None:
        self.transport = transport
        self.registry = registry if registry is not None else default_registry()

    async def invoke(
        self,
        toolkit_id: str,
        action_name: str,
        params: Mapping[str, Any] | None = None,
    ) -> Any:
        descriptor = self.registry.require(toolkit_id, action_name)
        return await self.call(descriptor, params)

    async def call(self, descriptor: ToolDescriptor, params: Mapping[str, Any] | None) -> Any:
        started_at = time.perf_counter()
        tool = descriptor.action_name
        state = InvocationState.VALIDATING
        try:
            _log_state(tool, state)
            invocation = build_request(descriptor, params)
            validate_request(invocation)

            state = _advance(tool, InvocationState.INVOKING)
            envelope = await self.transport.invoke(
                descriptor.toolkit_id,
                descriptor.action_name,
                invocation.params,
            )

            state = _advance(tool, InvocationState.UNWRAPPING)
            data = resolve_outcome(unwrap_envelope(envelope))
        except ToolInvocationError as exc:
            _log_state(tool, InvocationState.FAILED)
            logger.warning(
                "MCP tool call failed tool=%s toolkit=%s state=%s kind=%s error=%s duration_ms=%s",
                tool,
                descriptor.toolkit_id,
                state.value,
                exc.kind.value,
                exc.message,
                _duration_ms(started_at),
            )
            raise
        except Exception as exc:
            _log_state(tool, InvocationState.FAILED)
            logger.warning(
                "MCP tool call failed tool=%s toolkit=%s state=%s kind=transport error=%s",
                tool,
                descriptor.toolkit_id,
                state.value,
                exc,
            )
            raise

        _log_state(tool, InvocationState.RESOLVED)
        logger.info(
            "MCP tool call tool=%s toolkit=%s status=ok duration_ms=%s",
            tool,
            descriptor.toolkit_id,
            _duration_ms(started_at),
        )
        return data

    async def execute(
        self,
        toolkit_id: str,
        action_name: str,
        params: Mapping[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Run ``invoke`` and report the outcome as a record instead of raising."""
        started_at = time.perf_counter()
        record: dict[str, Any] = {"tool": action_name, "toolkit_id": toolkit_id}
        try:
            output = await self.invoke(toolkit_id, action_name, params)
        except ToolInvocationError as exc:
            record.update(status="failed", error=exc.message, error_kind=exc.kind.value)
        except Exception as exc:  # noqa: BLE001
            record.update(status="failed", error=str(exc), error_kind="Transport")
        else:
            record.update(status="ok", output=output)
        record["duration_ms"] = _duration_ms(started_at)
        return record


def _advance(tool: str, state: InvocationState) -> InvocationState:
    _log_state(tool, state)
    return state


def _log_state(tool: str, state: InvocationState) -> None:
    logger.debug("MCP tool call tool=%s state=%s", tool, state.value)


def _duration_ms(started_at: float) -> float:
    return round((time.perf_counter() - started_at) * 1000.0, 2)
