"""Single decision point for whether a remote action succeeded."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from mcp_actions.tools.errors import (
    EMPTY_RESULT_MESSAGE,
    EXECUTION_FAILED_MESSAGE,
    EmptyResultError,
    RemoteExecutionError,
)


def resolve_outcome(inner: Any) -> Any:
    """Return ``data`` untouched, or raise the matching error.

    Anything that is not a JSON object cannot carry ``successful: true`` and is
    reported as a failed execution.
    """
    if not isinstance(inner, Mapping) or not inner.get("successful"):
        remote_error = inner.get("error") if isinstance(inner, Mapping) else None
        raise RemoteExecutionError(str(remote_error) if remote_error else EXECUTION_FAILED_MESSAGE)

    data = inner.get("data")
    if data is None:
        raise EmptyResultError(EMPTY_RESULT_MESSAGE)
    return data
