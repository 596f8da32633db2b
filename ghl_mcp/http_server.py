# http_server.py  –  the same MCP server over HTTP + SSE, for remote hosts
#
#   GET  /             server info and endpoint map
#   GET  /health       liveness plus per-module tool counts
#   GET  /capabilities MCP capability summary
#   GET  /tools        every tool descriptor
#   GET  /sse          MCP event stream; clients POST to /messages/?session_id=
#
# PORT (or MCP_SERVER_PORT) picks the port, default 8000.

import asyncio, datetime as dt, os, sys
from typing import Dict

import uvicorn
from mcp.server.sse import SseServerTransport
from starlette.applications import Starlette
from starlette.middleware import Middleware
from starlette.middleware.cors import CORSMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse, Response
from starlette.routing import Mount, Route

from .config import log
from .errors import GHLError
from .server import SERVER_NAME, SERVER_VERSION, build_registry, check_connection, create_server
from .tools import ToolRegistry

CORS_ORIGINS = ["https://chatgpt.com", "https://chat.openai.com"]
CORS_ORIGIN_REGEX = r"http://localhost(:\d+)?"


def tool_counts(registry: ToolRegistry) -> Dict[str, int]:
    counts = registry.counts()
    counts["total"] = len(registry)
    return counts


def create_app(registry: ToolRegistry) -> Starlette:
    server = create_server(registry)
    sse = SseServerTransport("/messages/")

    async def root(request: Request):
        return JSONResponse({
            "name": "GoHighLevel MCP Server",
            "version": SERVER_VERSION,
            "status": "running",
            "endpoints": {
                "health": "/health",
                "capabilities": "/capabilities",
                "tools": "/tools",
                "sse": "/sse",
                "messages": "/messages/",
            },
            "tools": tool_counts(registry),
        })

    async def health(request: Request):
        return JSONResponse({
            "status": "healthy",
            "server": SERVER_NAME,
            "version": SERVER_VERSION,
            "timestamp": dt.datetime.now(dt.timezone.utc).isoformat(),
            "tools": tool_counts(registry),
        })

    async def capabilities(request: Request):
        return JSONResponse({
            "capabilities": {"tools": {}},
            "server": {"name": SERVER_NAME, "version": SERVER_VERSION},
        })

    async def tools(request: Request):
        definitions = registry.list_definitions()
        return JSONResponse({"tools": definitions, "count": len(definitions)})

    async def handle_sse(request: Request):
        log("[GHL MCP HTTP]", "New SSE connection from:", request.client.host if request.client else "unknown",
            force=True)
        async with sse.connect_sse(request.scope, request.receive, request._send) as (read_stream, write_stream):
            await server.run(read_stream, write_stream, server.create_initialization_options())
        log("[GHL MCP HTTP]", "SSE connection closed", force=True)
        return Response()

    return Starlette(
        routes=[
            Route("/", root),
            Route("/health", health),
            Route("/capabilities", capabilities),
            Route("/tools", tools),
            Route("/sse", handle_sse),
            Mount("/messages/", app=sse.handle_post_message),
        ],
        middleware=[
            Middleware(
                CORSMiddleware,
                allow_origins=CORS_ORIGINS,
                allow_origin_regex=CORS_ORIGIN_REGEX,
                allow_methods=["GET", "POST", "OPTIONS"],
                allow_headers=["Content-Type", "Authorization", "Accept"],
                allow_credentials=True,
            ),
        ],
    )


def main() -> None:
    port = int(os.environ.get("PORT") or os.environ.get("MCP_SERVER_PORT") or 8000)
    try:
        registry = build_registry()
        asyncio.run(check_connection(registry))
    except GHLError as exc:
        sys.exit(f"❌  Failed to start GHL MCP HTTP Server: {exc}")
    app = create_app(registry)
    print(f"🚀 GoHighLevel MCP HTTP server on http://0.0.0.0:{port}  (SSE: /sse, tools: {len(registry)})",
          file=sys.stderr)
    uvicorn.run(app, host="0.0.0.0", port=port)


if __name__ == "__main__":
    main()
