import contextlib
import logging
import os
import sys
from collections.abc import AsyncIterator

from mcp.server.streamable_http_manager import StreamableHTTPSessionManager
from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.routing import Mount, Route
from starlette.types import Receive, Scope, Send

from tech_bridge_mcp.catalog import read_catalog
from tech_bridge_mcp.config import SERVER_NAME, SERVER_VERSION, get_context_file
from tech_bridge_mcp.core import build_mcp_server

logging.basicConfig(stream=sys.stderr, level=logging.INFO, format='[%(levelname)s] %(message)s')


async def health_handler(request: Request) -> JSONResponse:
    """Health check reporting whether the endpoint document can be parsed"""
    path = get_context_file()
    try:
        catalog = read_catalog(path)
    except (OSError, UnicodeDecodeError) as e:
        logging.warning(f"[HTTP] Health check could not read {path}: {e}")
        return JSONResponse({
            "status": "degraded",
            "server": SERVER_NAME,
            "version": SERVER_VERSION,
            "contextFile": path,
            "message": f"Error reading context file: {e}",
        })

    return JSONResponse({
        "status": "healthy",
        "server": SERVER_NAME,
        "version": SERVER_VERSION,
        "contextFile": path,
        "domains": {domain.value: len(catalog.endpoints_for(domain)) for domain in catalog.domains()},
    })


def create_app(mcp_server=None) -> Starlette:
    """Build the Starlette app serving MCP at / and a health check at /health"""
    session_manager = StreamableHTTPSessionManager(
        app=mcp_server or build_mcp_server(),
        event_store=None,
        json_response=True,
        stateless=True,
    )

    async def handle_streamable_http(scope: Scope, receive: Receive, send: Send) -> None:
        await session_manager.handle_request(scope, receive, send)

    @contextlib.asynccontextmanager
    async def lifespan(app: Starlette) -> AsyncIterator[None]:
        """Context manager for session manager lifecycle."""
        async with session_manager.run():
            logging.info("[HTTP] Tech Bridge MCP Streamable HTTP Server started")
            logging.info("[HTTP] Resources: api://{funcionalidad}")
            logging.info("[HTTP] Tools: [determinar-contexto-de-la-reunion, procesar-texto-transcripto]")
            try:
                yield
            finally:
                logging.info("[HTTP] Tech Bridge MCP Server shutting down...")

    return Starlette(
        routes=[
            Route("/health", health_handler, methods=["GET"]),
            Mount("/", app=handle_streamable_http),
        ],
        lifespan=lifespan,
    )


def main():
    port = int(os.getenv("PORT", 8080))
    host = os.getenv("HOST", "0.0.0.0")

    logging.info(f"[HTTP] Serving on {host}:{port} (POST / for MCP, GET /health)")

    import uvicorn
    uvicorn.run(create_app(), host=host, port=port)

if __name__ == "__main__":
    main()
