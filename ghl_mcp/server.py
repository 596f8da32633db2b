# server.py  –  MCP server exposing the GoHighLevel tool registry over stdio
#
# 1) pip install -e .
# 2) cp .env.example .env   and fill in GHL_API_KEY / GHL_LOCATION_ID
# 3) ghl-mcp-server          (Claude Desktop autostarts it via stdio)

import asyncio, json, sys
from typing import Any, Dict, List, Optional

import httpx
import mcp.types as types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from .client import GHLApiClient
from .config import GHLConfig, load_config, log
from .errors import GHLError
from .tools import ToolRegistry

SERVER_NAME = "ghl-mcp-server"
SERVER_VERSION = "1.0.0"


# ──────────────────────────────────────────────────────────────
# 0.  Wiring
# ──────────────────────────────────────────────────────────────
def build_registry(
    config: Optional[GHLConfig] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> ToolRegistry:
    config = config or load_config()
    log("[GHL MCP]", "Initializing GHL API client...", force=True)
    log("[GHL MCP]", f"Base URL: {config.base_url}", force=True)
    log("[GHL MCP]", f"Version: {config.version}", force=True)
    log("[GHL MCP]", f"Location ID: {config.location_id}", force=True)
    return ToolRegistry(GHLApiClient(config, transport=transport))


async def check_connection(registry: ToolRegistry) -> Dict[str, Any]:
    """One round trip to the configured location; raises if it fails."""
    log("[GHL MCP]", "Testing GHL API connection...", force=True)
    try:
        result = await registry.client.test_connection()
    except GHLError as exc:
        log("[GHL MCP]", "GHL API connection failed:", exc, force=True)
        raise GHLError(f"Failed to connect to GHL API: {exc}") from exc
    log("[GHL MCP]", f"Connected to location: {result['data']['locationId']}", force=True)
    return result


def log_inventory(registry: ToolRegistry) -> None:
    log("[GHL MCP]", f"Registered {len(registry)} tools total:", force=True)
    for label, count in registry.counts().items():
        log("[GHL MCP]", f"- {count} {label} tools", force=True)


# ──────────────────────────────────────────────────────────────
# 1.  MCP handlers
# ──────────────────────────────────────────────────────────────
def render(result: Any) -> List[types.TextContent]:
    return [types.TextContent(type="text", text=json.dumps(result, indent=2, default=str))]


def create_server(registry: ToolRegistry) -> Server:
    server = Server(SERVER_NAME, version=SERVER_VERSION)

    @server.list_tools()
    async def handle_list_tools() -> List[types.Tool]:
        log("[GHL MCP]", "Listing available tools...")
        return [types.Tool.model_validate(d) for d in registry.list_definitions()]

    # arguments go straight to the registry; required fields and location
    # defaults are handled there, everything else is left to the upstream API
    @server.call_tool(validate_input=False)
    async def handle_call_tool(name: str, arguments: Optional[Dict[str, Any]]) -> List[types.TextContent]:
        try:
            result = await registry.invoke(name, arguments or {})
        except GHLError as exc:
            log("[GHL MCP]", f"Error executing tool {name}:", exc, force=True)
            raise
        return render(result)

    return server


# ──────────────────────────────────────────────────────────────
# 2.  Entry point
# ──────────────────────────────────────────────────────────────
async def serve_stdio(registry: ToolRegistry) -> None:
    server = create_server(registry)
    await check_connection(registry)
    log_inventory(registry)
    async with stdio_server() as (read_stream, write_stream):
        log("[GHL MCP]", "GoHighLevel MCP server started on stdio", force=True)
        await server.run(read_stream, write_stream, server.create_initialization_options())


def main() -> None:
    try:
        registry = build_registry()
        asyncio.run(serve_stdio(registry))
    except GHLError as exc:
        sys.exit(f"❌  Failed to start GHL MCP Server: {exc}")
    except KeyboardInterrupt:
        log("[GHL MCP]", "Received SIGINT, shutting down gracefully...", force=True)


if __name__ == "__main__":
    main()
