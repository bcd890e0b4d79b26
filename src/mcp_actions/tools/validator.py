"""Pre-transport parameter validation."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from mcp_actions.tools.descriptor import InvocationRequest, ToolDescriptor
from mcp_actions.tools.errors import MISSING_PARAMETER_TEMPLATE, ToolValidationError
from mcp_actions.tools.rules import is_blank


def build_request(descriptor: ToolDescriptor, params: Mapping[str, Any] | None) -> InvocationRequest:
    """Copy caller params into a request owned by a single invocation."""
    if params is None:
        params = {}
    if not isinstance(params, Mapping):
        raise ToolValidationError("Tool parameters must be a JSON object")
    return InvocationRequest(descriptor=descriptor, params=dict(params))


def validate_request(request: InvocationRequest) -> None:
    """Raise ``ToolValidationError`` for the first violation found."""
    descriptor = request.descriptor
    params = request.params

    for name in descriptor.required_params:
        if is_blank(params.get(name)):
            raise ToolValidationError(MISSING_PARAMETER_TEMPLATE.format(name=name))

    for name, allowed in descriptor.param_constraints.items():
        value = params.get(name)
        if value is not None and not _is_allowed(value, allowed):
            raise _invalid_value(name, value, allowed)

    # Non-list values are left to the ListParam rule declared alongside.
    for name, allowed in descriptor.item_constraints.items():
        value = params.get(name)
        if not isinstance(value, (list, tuple)):
            continue
        for item in value:
            if not _is_allowed(item, allowed):
                raise _invalid_value(name, item, allowed)

    for rule in descriptor.rules:
        message = rule.check(params)
        if message:
            raise ToolValidationError(message)


def _is_allowed(value: Any, allowed: tuple[Any, ...]) -> bool:
    if isinstance(value, (list, tuple, dict, set)):
        return False
    return value in allowed


def _invalid_value(name: str, value: Any, allowed: tuple[Any, ...]) -> ToolValidationError:
    return ToolValidationError(
        f"Invalid {name}: {value}. Must be one of: {', '.join(str(item) for item in allowed)}"
    )
