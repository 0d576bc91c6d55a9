"""Data models for the endpoint catalog.

This module contains the structures produced by the catalog parser: the
functional domains, the endpoint records and the immutable Catalog mapping.
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple, Union


class HTTPMethod(Enum):
    """HTTP methods recognised on endpoint lines"""
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


class Domain(Enum):
    """Functional domains of the API catalog

    GENERAL is the classifier sentinel for "no keyword matched" and is never
    used as a catalog key.
    """
    AGENT_MANAGEMENT = "gestion-agentes"
    CONVERSATIONS = "conversaciones"
    DATA_SOURCES = "fuentes-datos"
    REPORTS = "reportes"
    SETTINGS = "configuracion"
    GENERAL = "general"

    @classmethod
    def from_key(cls, key: str) -> Optional["Domain"]:
        """Resolve a raw key such as ``"reportes"``, or None when unknown"""
        try:
            return cls(key)
        except ValueError:
            return None


@dataclass(frozen=True)
class EndpointRecord:
    """One endpoint entry of the catalog

    Args:
        method: HTTP method of the endpoint
        path: Endpoint path, always under the /api/v1/ prefix
        description: Text of the line following the endpoint, or the default
    """
    method: HTTPMethod
    path: str
    description: str


@dataclass(frozen=True)
class Catalog:
    """Read-only mapping of domain to its endpoints, in document order"""
    sections: Mapping[Domain, Tuple[EndpointRecord, ...]] = field(
        default_factory=lambda: MappingProxyType({})
    )

    @classmethod
    def from_sections(cls, sections: Dict[Domain, List[EndpointRecord]]) -> "Catalog":
        frozen = {domain: tuple(records) for domain, records in sections.items()}
        return cls(MappingProxyType(frozen))

    def domains(self) -> List[Domain]:
        return list(self.sections.keys())

    def endpoints_for(self, domain: Union[Domain, str]) -> Tuple[EndpointRecord, ...]:
        """Endpoints of a domain; empty for unknown keys and absent domains"""
        if not isinstance(domain, Domain):
            domain = Domain.from_key(domain)
        return self.sections.get(domain, ())

    def __len__(self) -> int:
        return len(self.sections)


__all__ = [
    "HTTPMethod",
    "Domain",
    "EndpointRecord",
    "Catalog",
]
