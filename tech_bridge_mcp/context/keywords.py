"""Keyword tables used to classify meeting transcripts.

Two tables exist and are kept apart on purpose: the full table backs the
standalone classification tool, the reduced one is used inline when a
transcript is processed without a pre-determined domain.
"""

from dataclasses import dataclass
from typing import Mapping, Tuple

from ..catalog.models import Domain


@dataclass(frozen=True)
class KeywordTable:
    """Named, versioned mapping of domain to lowercase keywords

    Iteration order of ``keywords`` is the classifier's tie-break order.
    """
    name: str
    version: str
    keywords: Mapping[Domain, Tuple[str, ...]]


MEETING_CONTEXT_KEYWORDS = KeywordTable(
    name="meeting-context",
    version="1",
    keywords={
        Domain.AGENT_MANAGEMENT: (
            "agente", "chatbot", "bot", "crear agente", "configurar agente",
            "eliminar agente", "clonar agente", "replicar", "estadísticas",
            "métricas", "proyecto",
        ),
        Domain.CONVERSATIONS: (
            "conversación", "chat", "mensaje", "prompt", "feedback", "like",
            "dislike", "sesión", "historial", "completions", "llm",
        ),
        Domain.DATA_SOURCES: (
            "fuente", "datos", "sitemap", "archivo", "página", "indexar",
            "reindexar", "sincronizar", "metadata", "preview",
        ),
        Domain.REPORTS: (
            "reporte", "analytics", "estadísticas", "métricas", "tráfico",
            "consultas", "gráfico", "análisis", "geo", "browser", "referral",
        ),
        Domain.SETTINGS: (
            "configurar", "ajustes", "settings", "persona", "prompts",
            "colores", "perfil", "usuario", "metadata", "título", "descripción",
        ),
    },
)

# Subset of the meeting-context table; not kept in sync with it.
INLINE_CONTEXT_KEYWORDS = KeywordTable(
    name="inline-context",
    version="1",
    keywords={
        Domain.AGENT_MANAGEMENT: ("agente", "chatbot", "bot", "crear agente", "configurar agente"),
        Domain.CONVERSATIONS: ("conversación", "chat", "mensaje", "prompt"),
        Domain.DATA_SOURCES: ("fuente", "datos", "sitemap", "archivo"),
        Domain.REPORTS: ("reporte", "analytics", "estadísticas", "métricas"),
        Domain.SETTINGS: ("configurar", "ajustes", "settings", "persona"),
    },
)


__all__ = [
    "KeywordTable",
    "MEETING_CONTEXT_KEYWORDS",
    "INLINE_CONTEXT_KEYWORDS",
]
