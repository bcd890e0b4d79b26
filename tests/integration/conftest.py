from __future__ import annotations

import json
import os
import socket
import subprocess
import sys
import time
from collections.abc import Iterator
from pathlib import Path
from urllib import error, request

import pytest

INTEGRATION_DIR = Path(__file__).resolve().parent
PROJECT_ROOT = INTEGRATION_DIR.parents[1]


def _reserve_port() -> int:
    try:
        sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        sock.bind(("127.0.0.1", 0))
    except PermissionError:
        pytest.skip("Binding a local port is not permitted here.")
    with sock:
        return sock.getsockname()[1]


def _await_ready(server: subprocess.Popen[str], base_url: str, timeout_s: float = 20.0) -> None:
    deadline = time.monotonic() + timeout_s
    last_error: Exception | None = None
    while time.monotonic() < deadline:
        if server.poll() is not None:
            raise RuntimeError(f"{base_url} exited with code {server.returncode} before serving")
        try:
            with request.urlopen(f"{base_url}/health", timeout=1.0) as response:
                if response.status == 200:
                    return
        except (error.URLError, ConnectionError, TimeoutError) as exc:
            last_error = exc
        time.sleep(0.2)
    raise TimeoutError(f"{base_url} not ready after {timeout_s:.1f}s: {last_error}")


def _start_server(app_path: str, port: int, env: dict[str, str], app_dir: Path) -> subprocess.Popen[str]:
    cmd = [
        sys.executable,
        "-m",
        "uvicorn",
        app_path,
        "--app-dir",
        str(app_dir),
        "--host",
        "127.0.0.1",
        "--port",
        str(port),
    ]
    return subprocess.Popen(  # noqa: S603
        cmd,
        cwd=str(PROJECT_ROOT),
        env=env,
        stdout=subprocess.DEVNULL,
        stderr=subprocess.DEVNULL,
        text=True,
    )


def _stop_server(server: subprocess.Popen[str]) -> None:
    server.terminate()
    try:
        server.wait(timeout=5)
    except subprocess.TimeoutExpired:
        server.kill()
        server.wait(timeout=5)


@pytest.fixture(scope="module")
def executor_base_url() -> Iterator[str]:
    port = _reserve_port()
    base_url = f"http://127.0.0.1:{port}"
    server = _start_server("mock_executor:app", port, os.environ.copy(), INTEGRATION_DIR)
    try:
        _await_ready(server, base_url)
        yield base_url
    finally:
        _stop_server(server)


@pytest.fixture(scope="module")
def gateway_base_url(executor_base_url: str) -> Iterator[str]:
    port = _reserve_port()
    base_url = f"http://127.0.0.1:{port}"
    env = os.environ.copy()
    env["MCP_ACTIONS_EXECUTOR_BASE_URL"] = executor_base_url
    env["MCP_ACTIONS_EXECUTOR_PATH"] = "/mcp/call"
    env["MCP_ACTIONS_TRANSPORT_TIMEOUT_S"] = "10"

    server = _start_server("mcp_actions.api.main:app", port, env, PROJECT_ROOT / "src")
    try:
        _await_ready(server, base_url)
        yield base_url
    finally:
        _stop_server(server)


def _post_json(base_url: str, path: str, payload: dict[str, object]) -> tuple[int, dict[str, object]]:
    """POST ``payload`` and return the status with the decoded body, error statuses included."""
    req = request.Request(
        url=f"{base_url}{path}",
        method="POST",
        data=json.dumps(payload).encode("utf-8"),
        headers={"Content-Type": "application/json"},
    )
    try:
        response = request.urlopen(req, timeout=20.0)
    except error.HTTPError as exc:
        response = exc
    with response:
        return response.status, json.load(response)


@pytest.fixture
def post_json():
    return _post_json
