"""Parser for the semi-structured endpoint document (context.txt).

The document is split into functional domains by section markers such as
"AGENTS API" or "REPORTS". Inside a section, every line of the form
``GET /api/v1/...`` is an endpoint and the line right after it, when it is
plain text, is its description.
"""

import logging
import re
from typing import Dict, List, Optional, Tuple

from .models import Catalog, Domain, EndpointRecord, HTTPMethod

DEFAULT_DESCRIPTION = "Sin descripción"

# First matching marker wins; several markers may route to the same domain.
SECTION_RULES: Tuple[Tuple[str, Domain], ...] = (
    ("AGENTS API", Domain.AGENT_MANAGEMENT),
    ("CONVERSATIONS API", Domain.CONVERSATIONS),
    ("SOURCES API", Domain.DATA_SOURCES),
    ("REPORTS", Domain.REPORTS),
    ("AGENT SETTINGS", Domain.SETTINGS),
    ("USERS API", Domain.SETTINGS),
    ("PAGE METADATA", Domain.SETTINGS),
    ("MESSAGES & REACTIONS", Domain.CONVERSATIONS),
    ("PAGES API", Domain.DATA_SOURCES),
)

# Heading glyphs used by the document; a line carrying one is never a description.
SECTION_GLYPHS: Tuple[str, ...] = ("🔐", "📄", "👤", "⚙️", "💬", "🧠", "📚", "📊", "🧾")

ENDPOINT_LINE = re.compile(r"^(GET|POST|PUT|DELETE)\s+/api/v1/")


def match_section(line: str) -> Optional[Domain]:
    """Return the domain of the first section marker found in ``line``"""
    for marker, domain in SECTION_RULES:
        if marker in line:
            return domain
    return None


def parse_endpoint_line(line: str) -> Optional[Tuple[HTTPMethod, str]]:
    """Split an endpoint line into (method, path), or None if it is not one"""
    line = line.strip()
    if not ENDPOINT_LINE.match(line):
        return None
    parts = line.split()
    return HTTPMethod(parts[0]), parts[1]


def _is_description(line: str) -> bool:
    if not line:
        return False
    if ENDPOINT_LINE.match(line) or match_section(line) is not None:
        return False
    return not any(glyph in line for glyph in SECTION_GLYPHS)


def _lookahead_description(lines: List[str], index: int) -> str:
    if index + 1 >= len(lines):
        return DEFAULT_DESCRIPTION
    candidate = lines[index + 1].strip()
    return candidate if _is_description(candidate) else DEFAULT_DESCRIPTION


def parse_catalog(text: str) -> Catalog:
    """Build a Catalog from the document text

    Never raises on odd structure: endpoints found before any section marker
    are dropped and unknown lines are ignored.

    Args:
        text: Full document content

    Returns:
        Catalog with one entry per domain whose marker appears in the text
    """
    sections: Dict[Domain, List[EndpointRecord]] = {}
    current: Optional[Domain] = None
    lines = text.split("\n")

    for index, raw_line in enumerate(lines):
        line = raw_line.strip()

        domain = match_section(line)
        if domain is not None:
            current = domain
            sections.setdefault(domain, [])

        parsed = parse_endpoint_line(line)
        if parsed is None or current is None:
            continue

        method, path = parsed
        sections[current].append(
            EndpointRecord(method, path, _lookahead_description(lines, index))
        )

    catalog = Catalog.from_sections(sections)
    logging.debug(
        f"[Catalog] Parsed {sum(len(v) for v in catalog.sections.values())} endpoints "
        f"across {len(catalog)} domains"
    )
    return catalog


def read_catalog(path: str) -> Catalog:
    """Read and parse the document at ``path``

    Raises:
        OSError: If the file cannot be read
        UnicodeDecodeError: If the file is not valid UTF-8
    """
    with open(path, "r", encoding="utf-8") as fh:
        return parse_catalog(fh.read())


def load_catalog(path: str) -> Catalog:
    """Read and parse the document, degrading to an empty Catalog on read errors"""
    try:
        return read_catalog(path)
    except (OSError, UnicodeDecodeError) as e:
        logging.error(f"[Catalog] Error reading {path}: {e}")
        return Catalog()


__all__ = [
    "DEFAULT_DESCRIPTION",
    "SECTION_RULES",
    "SECTION_GLYPHS",
    "match_section",
    "parse_endpoint_line",
    "parse_catalog",
    "read_catalog",
    "load_catalog",
]
