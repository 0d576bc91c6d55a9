"""tech-bridge MCP server.

Exposes an API endpoint catalog, parsed from a semi-structured document, as
MCP resources and classifies meeting transcripts into functional domains.
"""

from .core import TechBridgeMCPServer, build_mcp_server
from .service import MeetingContextService

__all__ = [
    "TechBridgeMCPServer",
    "build_mcp_server",
    "MeetingContextService",
]
