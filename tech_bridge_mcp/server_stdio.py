import asyncio
import logging
import sys

from mcp.server.stdio import stdio_server

from tech_bridge_mcp.core import build_mcp_server

logging.basicConfig(stream=sys.stderr, level=logging.INFO, format='[%(levelname)s] %(message)s')


async def run() -> None:
    mcp_server = build_mcp_server()
    async with stdio_server() as (read_stream, write_stream):
        logging.info("Tech Bridge MCP server listening on stdio")
        await mcp_server.run(
            read_stream,
            write_stream,
            mcp_server.create_initialization_options(),
        )


def main():
    asyncio.run(run())

if __name__ == "__main__":
    main()
