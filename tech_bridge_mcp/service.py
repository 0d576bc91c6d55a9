"""Resource and tool logic of the tech-bridge server.

This module provides the MeetingContextService class which answers the
catalog resources and the two transcript tools. It receives the catalog
loader and keyword tables at construction time and holds no other state:
the catalog is loaded afresh on every call.
"""

import logging
from typing import Callable, Dict, List, Optional

from google.adk.tools.function_tool import FunctionTool

from .catalog import Catalog, EndpointRecord
from .config import resource_uri
from .context import (
    INLINE_CONTEXT_KEYWORDS,
    MEETING_CONTEXT_KEYWORDS,
    KeywordTable,
    classify,
)

AUTH_NOTICE = "🔐 Autenticación requerida: Bearer Token\nHeader: Authorization: Bearer <jwt_token>"
EXCERPT_LENGTH = 50
SIMULATED_STATUS = "simulated"

# Wire names of the tools, kept stable for existing MCP clients.
CONTEXT_TOOL_NAME = "determinar-contexto-de-la-reunion"
PROCESS_TOOL_NAME = "procesar-texto-transcripto"

CatalogLoader = Callable[[], Catalog]


def describe_domain(domain_key: str) -> str:
    return f"Endpoints para {domain_key.replace('-', ' ')}"


def format_endpoints(domain_key: str, endpoints: List[EndpointRecord]) -> str:
    """Render a domain's endpoints followed by the authentication notice"""
    listing = "\n\n".join(
        f"{ep.method.value} {ep.path}\n   {ep.description}" for ep in endpoints
    )
    return f'Endpoints de API para funcionalidad "{domain_key}":\n\n{listing}\n\n{AUTH_NOTICE}'


def simulate_execution(endpoint: EndpointRecord, transcript: str) -> dict:
    return {
        "endpoint": endpoint.path,
        "method": endpoint.method.value,
        "description": endpoint.description,
        "status": SIMULATED_STATUS,
        "result": (
            f"Ejecutado {endpoint.method.value} {endpoint.path} para procesar: "
            f'"{transcript[:EXCERPT_LENGTH]}..."'
        ),
    }


class MeetingContextService:
    """Serves catalog resources and the transcript tools

    Args:
        catalog_loader: Callable returning a freshly parsed Catalog
        context_table: Keyword table for the standalone classification tool
        inline_table: Keyword table for classification inside process_transcript
    """

    def __init__(
        self,
        catalog_loader: CatalogLoader,
        context_table: KeywordTable = MEETING_CONTEXT_KEYWORDS,
        inline_table: KeywordTable = INLINE_CONTEXT_KEYWORDS,
    ):
        self.catalog_loader = catalog_loader
        self.context_table = context_table
        self.inline_table = inline_table
        context_tool = FunctionTool(self.determine_meeting_context)
        context_tool.name = CONTEXT_TOOL_NAME
        process_tool = FunctionTool(self.process_transcript)
        process_tool.name = PROCESS_TOOL_NAME
        self.tools: Dict[str, FunctionTool] = {
            context_tool.name: context_tool,
            process_tool.name: process_tool,
        }
        logging.info(f"[Service] Initialized with tools: {list(self.tools)}")

    # ── resources ────────────────────────────────────────────────────────────

    def list_domains(self) -> List[dict]:
        """One resource entry per domain present in the catalog"""
        catalog = self.catalog_loader()
        return [
            {
                "uri": resource_uri(domain.value),
                "description": describe_domain(domain.value),
            }
            for domain in catalog.domains()
        ]

    def read_domain(self, domain_key: str) -> str:
        catalog = self.catalog_loader()
        endpoints = list(catalog.endpoints_for(domain_key))
        logging.info(f"[Service] Reading '{domain_key}': {len(endpoints)} endpoints")
        return format_endpoints(domain_key, endpoints)

    # ── tools ────────────────────────────────────────────────────────────────

    async def determine_meeting_context(self, texto: str) -> dict:
        """Determina el contexto de la reunión a partir del texto de un transcripto de una conversación y retorna qué recursos/endpoints usar.

        Args:
            texto: Texto de un transcripto de una conversación de una reunion de un cliente con un sales representative.
        """
        if not isinstance(texto, str):
            logging.warning("[Tool] determine_meeting_context called without a transcript.")
            return {"success": False, "message": "`texto` is required and must be a string."}

        result = classify(texto, self.context_table)
        domain = result.domain.value
        percent = f"{result.confidence * 100:.1f}%"
        recommended = resource_uri(domain)

        return {
            "success": True,
            "domain": domain,
            "confidence": result.confidence,
            "recommendedResourceId": recommended,
            "message": (
                f"Contexto determinado: {domain}\n"
                f"Confianza: {percent}\n\n"
                f"Para obtener los endpoints específicos, accede al recurso: {recommended}"
            ),
        }

    async def process_transcript(self, texto: str, contextoDeterminado: Optional[str] = None) -> dict:
        """Procesa un texto de un transcripto de una conversación y ejecuta dinámicamente los endpoints necesarios según el contexto determinado.

        Args:
            texto: Texto de un transcripto de una conversación.
            contextoDeterminado: Contexto previamente determinado (opcional).
        """
        if not isinstance(texto, str):
            logging.warning("[Tool] process_transcript called without a transcript.")
            return {"success": False, "message": "`texto` is required and must be a string."}

        domain = contextoDeterminado
        if not domain:
            domain = classify(texto, self.inline_table).domain.value
            logging.info(f"[Tool] Inline classification resolved domain '{domain}'")

        catalog = self.catalog_loader()
        executions = [simulate_execution(ep, texto) for ep in catalog.endpoints_for(domain)]
        resource = resource_uri(domain)

        report = "\n".join(
            f" • {ex['method']} {ex['endpoint']} [{ex['status']}] {ex['result']}"
            for ex in executions
        )
        message = (
            f"Procesado con contexto: {domain}\n"
            f"Endpoints ejecutados: {len(executions)}\n\n"
            f"Para ver los endpoints disponibles, accede al recurso: {resource}"
        )
        if report:
            message = f"{message}\n\n{report}"

        return {
            "success": True,
            "domain": domain,
            "endpointsExecutedCount": len(executions),
            "resourceUsed": resource,
            "executions": executions,
            "message": message,
        }


__all__ = [
    "AUTH_NOTICE",
    "CONTEXT_TOOL_NAME",
    "PROCESS_TOOL_NAME",
    "MeetingContextService",
    "describe_domain",
    "format_endpoints",
    "simulate_execution",
]
