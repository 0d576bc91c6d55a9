"""Core MCP server implementation for the tech-bridge endpoint catalog.

This module provides the TechBridgeMCPServer class which wires the MCP
protocol handlers (resources and tools) to a MeetingContextService.
"""

import json
import logging
from typing import Callable, Optional

from google.adk.tools.mcp_tool.conversion_utils import adk_to_mcp_tool_type
from mcp import types as mcp_types
from mcp.server.lowlevel import Server
from mcp.server.lowlevel.helper_types import ReadResourceContents
from pydantic import AnyUrl

from .catalog import Catalog, load_catalog
from .config import RESOURCE_NAME, RESOURCE_SCHEME, SERVER_NAME, SERVER_VERSION, get_context_file
from .service import MeetingContextService

MIME_TYPE = "text/plain"


def default_catalog_loader() -> Catalog:
    return load_catalog(get_context_file())


def domain_key_from_uri(uri: AnyUrl) -> str:
    """Extract ``reportes`` from ``api://reportes``"""
    return str(uri).split("://", 1)[-1].strip("/")


class TechBridgeMCPServer:
    """MCP server exposing catalog resources and transcript tools

    Args:
        catalog_loader: Callable returning a freshly parsed Catalog; defaults to
            reading the configured context file on every request
        service: Prebuilt MeetingContextService, mainly for tests
    """

    def __init__(
        self,
        catalog_loader: Optional[Callable[[], Catalog]] = None,
        service: Optional[MeetingContextService] = None,
    ):
        self.service = service or MeetingContextService(catalog_loader or default_catalog_loader)
        self.server = Server(SERVER_NAME, version=SERVER_VERSION)
        self._setup_server()
        logging.info(f"[MCP] Initialized MCP server '{SERVER_NAME}' v{SERVER_VERSION}")

    def _setup_server(self) -> None:
        """Register resource and tool handlers on the MCP server"""

        @self.server.list_resources()
        async def list_resources():
            resources = [
                mcp_types.Resource(
                    uri=entry["uri"],
                    name=RESOURCE_NAME,
                    description=entry["description"],
                    mimeType=MIME_TYPE,
                )
                for entry in self.service.list_domains()
            ]
            logging.info(f"[MCP] Listing {len(resources)} resources")
            return resources

        @self.server.list_resource_templates()
        async def list_resource_templates():
            return [
                mcp_types.ResourceTemplate(
                    uriTemplate=f"{RESOURCE_SCHEME}://{{funcionalidad}}",
                    name=RESOURCE_NAME,
                    description="Endpoints de API agrupados por funcionalidad",
                    mimeType=MIME_TYPE,
                )
            ]

        @self.server.read_resource()
        async def read_resource(uri: AnyUrl):
            logging.info(f"[MCP] read_resource invoked: uri={uri}")
            text = self.service.read_domain(domain_key_from_uri(uri))
            return [ReadResourceContents(content=text, mime_type=MIME_TYPE)]

        @self.server.list_tools()
        async def list_tools():
            tool_list = []
            for tool in self.service.tools.values():
                try:
                    tool_list.append(adk_to_mcp_tool_type(tool))
                except Exception as e:
                    logging.error(f"[MCP] Error converting tool {tool.name} to MCP type: {e}")
            logging.info(f"[MCP] Returning {len(tool_list)} tools to MCP client")
            return tool_list

        @self.server.call_tool()
        async def call_tool(name: str, arguments: dict):
            logging.info(f"[MCP] call_tool invoked: name={name}, args={json.dumps(arguments, ensure_ascii=False)}")

            tool = self.service.tools.get(name)
            if tool is None:
                logging.warning(f"[MCP] Unknown tool name: {name}")
                return [mcp_types.TextContent(type="text", text=f"❌ Tool not found: {name}")]

            try:
                result = await tool.run_async(args=arguments, tool_context=None)
            except Exception as e:
                logging.exception(f"[MCP] Exception during call_tool execution for '{name}': {e}")
                result = {"success": False, "message": f"❌ Unexpected error: {e}"}

            if not isinstance(result, dict):
                logging.error(f"[MCP] ⚠️ Invalid result from {name}: expected dict but got {type(result)}")
                result = {"success": False, "message": "❌ Internal error: invalid response format"}

            structured = {key: value for key, value in result.items() if key != "message"}
            text = result.get("message") or result.get("error") or "✅ Success"
            return [mcp_types.TextContent(type="text", text=text)], structured

    def get_server(self) -> Server:
        """Get the configured MCP server instance"""
        return self.server


def build_mcp_server(catalog_loader: Optional[Callable[[], Catalog]] = None) -> Server:
    return TechBridgeMCPServer(catalog_loader).get_server()


__all__ = [
    "TechBridgeMCPServer",
    "build_mcp_server",
    "default_catalog_loader",
    "domain_key_from_uri",
]
