import pytest

from mcp_actions.tools.errors import EmptyResultError, ErrorKind, RemoteExecutionError
from mcp_actions.tools.outcome import resolve_outcome


def test_successful_result_returns_same_data_object() -> None:
    data = {"status": "cancelled", "nested": {"items": [1, 2]}}

    assert resolve_outcome({"successful": True, "data": data}) is data


def test_empty_but_present_data_is_returned() -> None:
    assert resolve_outcome({"successful": True, "data": {}}) == {}
    assert resolve_outcome({"successful": True, "data": []}) == []


def test_remote_error_is_reported_verbatim() -> None:
    with pytest.raises(RemoteExecutionError) as exc_info:
        resolve_outcome({"successful": False, "error": "channel_not_found"})

    assert str(exc_info.value) == "channel_not_found"
    assert exc_info.value.kind is ErrorKind.REMOTE_EXECUTION


@pytest.mark.parametrize(
    "inner",
    [
        {"successful": False},
        {"successful": False, "error": None},
        {"successful": False, "error": ""},
        {"data": {"ignored": True}},
        None,
        [1, 2, 3],
        "ok",
    ],
)
def test_failure_without_error_uses_generic_message(inner) -> None:
    with pytest.raises(RemoteExecutionError, match="^MCP tool execution failed$"):
        resolve_outcome(inner)


def test_failure_data_is_not_relied_upon() -> None:
    with pytest.raises(RemoteExecutionError, match="quota exceeded"):
        resolve_outcome({"successful": False, "error": "quota exceeded", "data": {"x": 1}})


@pytest.mark.parametrize("inner", [{"successful": True}, {"successful": True, "data": None}])
def test_success_without_data_is_empty_result(inner) -> None:
    with pytest.raises(EmptyResultError) as exc_info:
        resolve_outcome(inner)

    assert str(exc_info.value) == "MCP tool returned successful response but no data"
    assert exc_info.value.kind is ErrorKind.EMPTY_RESULT
