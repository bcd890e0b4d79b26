"""Error taxonomy shared by every tool invocation.

Each failure an invocation can end in is raised as exactly one subclass of
``ToolInvocationError``. The ``kind`` attribute names the category and the
message is the human-readable text callers pattern-match on, so the canonical
strings below must not change.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

MISSING_PARAMETER_TEMPLATE = "Missing required parameter: {name}"
MISSING_CONTENT_TEXT_MESSAGE = "Invalid MCP response format: missing content[0].text"
PARSE_FAILURE_TEMPLATE = "Failed to parse MCP response JSON: {reason}"
EXECUTION_FAILED_MESSAGE = "MCP tool execution failed"
EMPTY_RESULT_MESSAGE = "MCP tool returned successful response but no data"


class ErrorKind(str, Enum):
    VALIDATION = "Validation"
    ENVELOPE_FORMAT = "EnvelopeFormat"
    PARSE = "Parse"
    REMOTE_EXECUTION = "RemoteExecution"
    EMPTY_RESULT = "EmptyResult"


@dataclass(frozen=True)
class NormalizedError:
    kind: ErrorKind
    message: str

    def as_dict(self) -> dict[str, Any]:
        return {"kind": self.kind.value, "message": self.message}


class ToolInvocationError(Exception):
    """Base class for classified invocation failures."""

    kind: ErrorKind

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    @property
    def error(self) -> NormalizedError:
        return NormalizedError(kind=self.kind, message=self.message)

    def as_dict(self) -> dict[str, Any]:
        return self.error.as_dict()


class ToolValidationError(ToolInvocationError):
    """Parameters were rejected locally; nothing was sent."""

    kind = ErrorKind.VALIDATION


class UnknownToolError(ToolValidationError):
    def __init__(self, toolkit_id: str, action_name: str) -> None:
        super().__init__(f"Unknown tool: {toolkit_id}/{action_name}")
        self.toolkit_id = toolkit_id
        self.action_name = action_name


class EnvelopeFormatError(ToolInvocationError):
    """The transport replied, but not with ``content[0].text``."""

    kind = ErrorKind.ENVELOPE_FORMAT


class ToolParseError(ToolInvocationError):
    """``content[0].text`` was present but is not valid JSON."""

    kind = ErrorKind.PARSE


class RemoteExecutionError(ToolInvocationError):
    """The remote action reported ``successful: false``."""

    kind = ErrorKind.REMOTE_EXECUTION


class EmptyResultError(ToolInvocationError):
    """The remote action reported success without a ``data`` payload."""

    kind = ErrorKind.EMPTY_RESULT
