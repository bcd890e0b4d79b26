"""Tool invocation layer: descriptors, validation, transport and outcome resolution."""

from mcp_actions.tools.descriptor import InvocationRequest, ToolDescriptor
from mcp_actions.tools.engine import InvocationState, ToolEngine
from mcp_actions.tools.errors import (
    EmptyResultError,
    EnvelopeFormatError,
    ErrorKind,
    NormalizedError,
    RemoteExecutionError,
    ToolInvocationError,
    ToolParseError,
    ToolValidationError,
    UnknownToolError,
)
from mcp_actions.tools.registry import (
    DescriptorRegistry,
    build_registry,
    default_registry,
    list_tools,
)
from mcp_actions.tools.transport import HttpToolTransport, ToolTransport, ToolTransportError

__all__ = [
    "DescriptorRegistry",
    "EmptyResultError",
    "EnvelopeFormatError",
    "ErrorKind",
    "HttpToolTransport",
    "InvocationRequest",
    "InvocationState",
    "NormalizedError",
    "RemoteExecutionError",
    "ToolDescriptor",
    "ToolEngine",
    "ToolInvocationError",
    "ToolParseError",
    "ToolTransport",
    "ToolTransportError",
    "ToolValidationError",
    "UnknownToolError",
    "build_registry",
    "default_registry",
    "list_tools",
]
