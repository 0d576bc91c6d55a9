"""Endpoint catalog package.

This package parses the semi-structured endpoint document into an immutable
Catalog partitioned by functional domain.
"""

from .models import Catalog, Domain, EndpointRecord, HTTPMethod
from .parser import DEFAULT_DESCRIPTION, load_catalog, parse_catalog, read_catalog

__all__ = [
    "Catalog",
    "Domain",
    "EndpointRecord",
    "HTTPMethod",
    "DEFAULT_DESCRIPTION",
    "load_catalog",
    "parse_catalog",
    "read_catalog",
]
