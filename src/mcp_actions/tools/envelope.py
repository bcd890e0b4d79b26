"""Unwrap the transport envelope into the inner JSON result."""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from typing import Any

from mcp_actions.tools.errors import (
    MISSING_CONTENT_TEXT_MESSAGE,
    PARSE_FAILURE_TEMPLATE,
    EnvelopeFormatError,
    ToolParseError,
)


def extract_payload_text(envelope: Any) -> str:
    """Return ``content[0].text``; any other element is ignored.

    Accepts decoded JSON mappings as well as objects exposing ``content``
    items with a ``text`` attribute.
    """
    content = _field(envelope, "content")
    if isinstance(content, (str, bytes)) or not isinstance(content, Sequence) or not content:
        raise EnvelopeFormatError(MISSING_CONTENT_TEXT_MESSAGE)

    text = _field(content[0], "text")
    if not isinstance(text, str) or not text:
        raise EnvelopeFormatError(MISSING_CONTENT_TEXT_MESSAGE)
    return text


def unwrap_envelope(envelope: Any) -> Any:
    text = extract_payload_text(envelope)
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise ToolParseError(PARSE_FAILURE_TEMPLATE.format(reason=exc)) from exc


def _field(source: Any, name: str) -> Any:
    if source is None:
        return None
    if isinstance(source, Mapping):
        return source.get(name)
    return getattr(source, name, None)
