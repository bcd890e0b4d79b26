"""Command-line entry point to list and invoke registered actions."""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from mcp_actions.config.settings import get_settings
from mcp_actions.tools import (
    HttpToolTransport,
    ToolEngine,
    ToolInvocationError,
    ToolTransport,
    default_registry,
)


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="mcp-actions",
        description="Invoke remote MCP toolkit actions through the shared engine.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    tools_parser = subparsers.add_parser("tools", help="List registered actions as JSON.")
    tools_parser.add_argument("--toolkit", default=None, help="Only list actions of this toolkit id.")

    invoke_parser = subparsers.add_parser("invoke", help="Invoke one action and print its data.")
    invoke_parser.add_argument("action", help="Action name, e.g. FIRECRAWL_SEARCH.")
    invoke_parser.add_argument(
        "--toolkit-id",
        default=None,
        help="Toolkit id. Inferred from the action name when omitted.",
    )
    params_group = invoke_parser.add_mutually_exclusive_group()
    params_group.add_argument("--params", default=None, help="Parameters as a JSON object.")
    params_group.add_argument(
        "--params-file",
        type=Path,
        default=None,
        help="Path to a JSON file holding the parameters.",
    )
    return parser.parse_args(argv)


def _load_params(args: argparse.Namespace) -> Any:
    if args.params_file is not None:
        return json.loads(args.params_file.read_text(encoding="utf-8"))
    if args.params is not None:
        return json.loads(args.params)
    return {}


def _resolve_toolkit_id(action: str, toolkit_id: str | None) -> str | None:
    if toolkit_id:
        return toolkit_id
    descriptor = default_registry().find_action(action)
    return descriptor.toolkit_id if descriptor else None


def main(argv: Sequence[str] | None = None, *, transport: ToolTransport | None = None) -> int:
    args = _parse_args(argv)
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    if args.command == "tools":
        print(json.dumps(default_registry().describe(args.toolkit), indent=2))
        return 0

    try:
        params = _load_params(args)
    except (OSError, json.JSONDecodeError) as exc:
        print(f"Could not read parameters: {exc}", file=sys.stderr)
        return 2

    toolkit_id = _resolve_toolkit_id(args.action, args.toolkit_id)
    if toolkit_id is None:
        print(f"Unknown action: {args.action}", file=sys.stderr)
        return 2

    engine = ToolEngine(transport or HttpToolTransport.from_settings(settings))
    try:
        data = asyncio.run(engine.invoke(toolkit_id, args.action, params))
    except ToolInvocationError as exc:
        print(f"{exc.kind.value}: {exc.message}", file=sys.stderr)
        return 1
    except Exception as exc:  # noqa: BLE001
        print(f"Transport: {exc}", file=sys.stderr)
        return 1

    print(json.dumps(data, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
