"""FastAPI gateway exposing the tool registry and engine to UI callers."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, HTTPException, Query, Request
from pydantic import BaseModel, Field

from mcp_actions.config.settings import Settings, get_settings
from mcp_actions.tools import (
    ErrorKind,
    HttpToolTransport,
    ToolEngine,
    ToolInvocationError,
    ToolTransport,
    UnknownToolError,
)

logger = logging.getLogger(__name__)

_STATUS_BY_KIND = {
    ErrorKind.VALIDATION: 422,
    ErrorKind.ENVELOPE_FORMAT: 502,
    ErrorKind.PARSE: 502,
    ErrorKind.REMOTE_EXECUTION: 502,
    ErrorKind.EMPTY_RESULT: 502,
}


class InvokeToolRequest(BaseModel):
    params: dict[str, Any] = Field(default_factory=dict)


class InvokeToolResponse(BaseModel):
    data: Any


def create_app(
    *,
    transport: ToolTransport | None = None,
    settings_override: Settings | None = None,
) -> FastAPI:
    settings = settings_override or get_settings()
    engine = ToolEngine(transport or HttpToolTransport.from_settings(settings))

    app = FastAPI(title=settings.app_name)
    app.state.settings = settings
    app.state.engine = engine

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok", "service": settings.app_name}

    @app.get("/tools")
    def tools(toolkit_id: str | None = Query(None)) -> dict[str, list[dict[str, Any]]]:
        return {"tools": app.state.engine.registry.describe(toolkit_id)}

    @app.post(
        "/toolkits/{toolkit_id}/tools/{action_name}",
        response_model=InvokeToolResponse,
    )
    async def invoke_tool(
        toolkit_id: str,
        action_name: str,
        payload: InvokeToolRequest,
        request: Request,
    ) -> InvokeToolResponse:
        tool_engine: ToolEngine = request.app.state.engine
        try:
            data = await tool_engine.invoke(toolkit_id, action_name, payload.params)
        except UnknownToolError as exc:
            raise HTTPException(status_code=404, detail=exc.as_dict()) from exc
        except ToolInvocationError as exc:
            raise HTTPException(status_code=_STATUS_BY_KIND[exc.kind], detail=exc.as_dict()) from exc
        except Exception as exc:  # noqa: BLE001
            logger.warning("Tool transport failed tool=%s reason=%s", action_name, exc)
            raise HTTPException(
                status_code=503,
                detail={"kind": "Transport", "message": str(exc)},
            ) from exc
        return InvokeToolResponse(data=data)

    return app


app = create_app()
