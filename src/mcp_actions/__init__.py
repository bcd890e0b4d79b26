"""Generic invocation engine for remote MCP toolkit actions."""

__version__ = "0.1.0"
