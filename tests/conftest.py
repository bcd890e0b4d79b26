from __future__ import annotations

import json
from collections.abc import Callable, Mapping
from typing import Any

import pytest


class RecordingTransport:
    """Test-only transport double that records calls and replays one envelope."""

    def __init__(self, envelope: Any = None, *, error: Exception | None = None) -> None:
        self.envelope = envelope
        self.error = error
        self.calls: list[tuple[str, str, dict[str, Any]]] = []

    async def invoke(
        self,
        toolkit_id: str,
        action_name: str,
        params: Mapping[str, Any],
    ) -> Any:
        self.calls.append((toolkit_id, action_name, dict(params)))
        if self.error is not None:
            raise self.error
        return self.envelope


def _text_envelope(payload: Any) -> dict[str, Any]:
    return {"content": [{"type": "text", "text": json.dumps(payload)}]}


@pytest.fixture
def text_envelope() -> Callable[[Any], dict[str, Any]]:
    return _text_envelope


@pytest.fixture
def make_transport() -> Callable[..., RecordingTransport]:
    def _make(envelope: Any = None, *, error: Exception | None = None) -> RecordingTransport:
        return RecordingTransport(envelope, error=error)

    return _make


@pytest.fixture
def inner_result_transport(
    make_transport: Callable[..., RecordingTransport],
) -> Callable[[Any], RecordingTransport]:
    """Transport whose envelope wraps the given inner result."""

    def _make(inner: Any) -> RecordingTransport:
        return make_transport(_text_envelope(inner))

    return _make


@pytest.fixture
def ok_transport(
    inner_result_transport: Callable[[Any], RecordingTransport],
) -> RecordingTransport:
    return inner_result_transport({"successful": True, "data": {"status": "cancelled"}})
