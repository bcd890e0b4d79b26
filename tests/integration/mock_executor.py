"""Stand-in MCP executor that answers the gateway's wire triple with envelopes."""

from __future__ import annotations

import json
from typing import Any

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field


class ExecutorCall(BaseModel):
    toolkit_id: str = Field(..., alias="toolkitId")
    tool_name: str = Field(..., alias="toolName")
    params: dict[str, Any] = Field(default_factory=dict)


def _envelope(inner: Any) -> dict[str, Any]:
    return {"content": [{"type": "text", "text": json.dumps(inner)}]}


def _cancel_crawl(params: dict[str, Any]) -> dict[str, Any]:
    return _envelope({"successful": True, "data": {"id": params["id"], "status": "cancelled"}})


def _send_message(params: dict[str, Any]) -> dict[str, Any]:
    if params.get("channel") == "C404":
        return _envelope({"successful": False, "error": "channel_not_found"})
    return _envelope(
        {"successful": True, "data": {"ok": True, "channel": params["channel"], "ts": "1700000000.0001"}}
    )


def _create_sheet(params: dict[str, Any]) -> dict[str, Any]:
    if params.get("title") == "broken-envelope":
        return {"content": []}
    if params.get("title") == "broken-json":
        return {"content": [{"type": "text", "text": "{not json"}]}
    return _envelope({"successful": True})


HANDLERS = {
    "FIRECRAWL_CANCEL_A_CRAWL_JOB": _cancel_crawl,
    "SLACK_SENDS_A_MESSAGE_TO_A_SLACK_CHANNEL": _send_message,
    "GOOGLESHEETS_CREATE_GOOGLE_SHEET1": _create_sheet,
}

app = FastAPI(title="mock-mcp-executor")


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.post("/mcp/call")
def call_tool(payload: ExecutorCall) -> dict[str, Any]:
    handler = HANDLERS.get(payload.tool_name)
    if handler is None:
        raise HTTPException(status_code=404, detail=f"No handler for {payload.tool_name}")
    return handler(payload.params)
