import os
import tempfile
import unittest

from tech_bridge_mcp.catalog import (
    DEFAULT_DESCRIPTION,
    Catalog,
    Domain,
    EndpointRecord,
    HTTPMethod,
    load_catalog,
    parse_catalog,
    read_catalog,
)
from tech_bridge_mcp.catalog.parser import match_section, parse_endpoint_line

FIXTURE = os.path.join(os.path.dirname(__file__), "fixtures", "context.txt")


class TestParseCatalog(unittest.TestCase):

    def test_endpoint_with_description_under_marker(self):
        catalog = parse_catalog("AGENTS API\nGET /api/v1/agents\nLists all agents")
        self.assertEqual(catalog.domains(), [Domain.AGENT_MANAGEMENT])
        self.assertEqual(
            catalog.endpoints_for(Domain.AGENT_MANAGEMENT),
            (EndpointRecord(HTTPMethod.GET, "/api/v1/agents", "Lists all agents"),),
        )

    def test_no_markers_gives_empty_catalog(self):
        catalog = parse_catalog("GET /api/v1/agents\nLists all agents\nPOST /api/v1/agents\n")
        self.assertEqual(len(catalog), 0)
        self.assertEqual(catalog.domains(), [])

    def test_last_line_endpoint_gets_default_description(self):
        catalog = parse_catalog("📊 REPORTS\nGET /api/v1/reports")
        record = catalog.endpoints_for(Domain.REPORTS)[0]
        self.assertEqual(record.description, DEFAULT_DESCRIPTION)

    def test_consecutive_endpoints_do_not_borrow_descriptions(self):
        catalog = parse_catalog(
            "SOURCES API\n"
            "GET /api/v1/sources\n"
            "DELETE /api/v1/sources/{id}\n"
            "Elimina una fuente\n"
        )
        records = catalog.endpoints_for(Domain.DATA_SOURCES)
        self.assertEqual([r.method for r in records], [HTTPMethod.GET, HTTPMethod.DELETE])
        self.assertEqual(records[0].description, DEFAULT_DESCRIPTION)
        self.assertEqual(records[1].description, "Elimina una fuente")

    def test_marker_and_glyph_lines_are_not_descriptions(self):
        catalog = parse_catalog(
            "AGENTS API\n"
            "GET /api/v1/agents\n"
            "CONVERSATIONS API\n"
            "GET /api/v1/conversations\n"
            "🔐 Bearer token\n"
        )
        self.assertEqual(catalog.endpoints_for(Domain.AGENT_MANAGEMENT)[0].description, DEFAULT_DESCRIPTION)
        self.assertEqual(catalog.endpoints_for(Domain.CONVERSATIONS)[0].description, DEFAULT_DESCRIPTION)

    def test_aliased_markers_accumulate(self):
        catalog = parse_catalog(
            "AGENT SETTINGS\n"
            "PUT /api/v1/agents/1/settings\n"
            "Actualiza ajustes\n"
            "USERS API\n"
            "GET /api/v1/users/me\n"
            "Perfil\n"
            "PAGE METADATA\n"
            "GET /api/v1/pages/1/metadata\n"
            "Metadata\n"
        )
        self.assertEqual(catalog.domains(), [Domain.SETTINGS])
        paths = [r.path for r in catalog.endpoints_for(Domain.SETTINGS)]
        self.assertEqual(paths, ["/api/v1/agents/1/settings", "/api/v1/users/me", "/api/v1/pages/1/metadata"])

    def test_repeated_primary_marker_keeps_previous_endpoints(self):
        catalog = parse_catalog(
            "AGENTS API\nGET /api/v1/agents\nUno\n"
            "AGENTS API\nPOST /api/v1/agents\nDos\n"
        )
        self.assertEqual(len(catalog.endpoints_for(Domain.AGENT_MANAGEMENT)), 2)

    def test_non_api_paths_and_unknown_methods_are_ignored(self):
        catalog = parse_catalog(
            "REPORTS\n"
            "GET /health\n"
            "PATCH /api/v1/reports/1\n"
            "get /api/v1/reports\n"
            "   POST   /api/v1/reports/export   \n"
            "Exporta\n"
        )
        records = catalog.endpoints_for(Domain.REPORTS)
        self.assertEqual(records, (EndpointRecord(HTTPMethod.POST, "/api/v1/reports/export", "Exporta"),))

    def test_windows_line_endings(self):
        catalog = parse_catalog("AGENTS API\r\nGET /api/v1/agents\r\nLista\r\n")
        self.assertEqual(catalog.endpoints_for(Domain.AGENT_MANAGEMENT)[0].description, "Lista")

    def test_parse_is_deterministic(self):
        with open(FIXTURE, encoding="utf-8") as fh:
            text = fh.read()
        self.assertEqual(parse_catalog(text), parse_catalog(text))

    def test_fixture_document(self):
        catalog = read_catalog(FIXTURE)
        self.assertEqual(
            [d.value for d in catalog.domains()],
            ["gestion-agentes", "conversaciones", "fuentes-datos", "reportes", "configuracion"],
        )
        agents = catalog.endpoints_for("gestion-agentes")
        self.assertEqual(len(agents), 3)
        self.assertEqual(agents[2], EndpointRecord(HTTPMethod.DELETE, "/api/v1/agents/{agentId}", DEFAULT_DESCRIPTION))

        conversations = catalog.endpoints_for(Domain.CONVERSATIONS)
        self.assertEqual([r.method.value for r in conversations], ["GET", "POST", "PUT"])
        self.assertEqual(conversations[1].description, DEFAULT_DESCRIPTION)
        self.assertEqual(conversations[2].description, "Registra like o dislike")

        self.assertEqual(len(catalog.endpoints_for(Domain.DATA_SOURCES)), 3)
        self.assertEqual(len(catalog.endpoints_for(Domain.REPORTS)), 1)
        self.assertEqual(len(catalog.endpoints_for(Domain.SETTINGS)), 2)
        self.assertNotIn("/api/v1/health", [r.path for d in catalog.domains() for r in catalog.endpoints_for(d)])


class TestCatalogLookup(unittest.TestCase):

    def test_unknown_and_absent_keys_are_empty(self):
        catalog = parse_catalog("REPORTS\nGET /api/v1/reports\n")
        self.assertEqual(catalog.endpoints_for("no-existe"), ())
        self.assertEqual(catalog.endpoints_for("general"), ())
        self.assertEqual(catalog.endpoints_for(Domain.SETTINGS), ())

    def test_catalog_is_read_only(self):
        catalog = parse_catalog("REPORTS\nGET /api/v1/reports\n")
        with self.assertRaises(TypeError):
            catalog.sections[Domain.SETTINGS] = ()


class TestLoadCatalog(unittest.TestCase):

    def test_missing_file_degrades_to_empty_catalog(self):
        with tempfile.TemporaryDirectory() as tmp:
            catalog = load_catalog(os.path.join(tmp, "context.txt"))
        self.assertEqual(catalog, Catalog())
        self.assertEqual(catalog.domains(), [])

    def test_read_catalog_raises_on_missing_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertRaises(OSError):
                read_catalog(os.path.join(tmp, "context.txt"))

    def test_undecodable_file_degrades_to_empty_catalog(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "context.txt")
            with open(path, "wb") as fh:
                fh.write(b"AGENTS API\n\xff\xfe\xfa")
            self.assertEqual(len(load_catalog(path)), 0)

    def test_file_is_reread_on_every_call(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "context.txt")
            with open(path, "w", encoding="utf-8") as fh:
                fh.write("REPORTS\nGET /api/v1/reports\n")
            self.assertEqual(load_catalog(path).domains(), [Domain.REPORTS])
            with open(path, "w", encoding="utf-8") as fh:
                fh.write("USERS API\nGET /api/v1/users\n")
            self.assertEqual(load_catalog(path).domains(), [Domain.SETTINGS])


class TestLineHelpers(unittest.TestCase):

    def test_first_matching_marker_wins(self):
        self.assertEqual(match_section("🧠 MESSAGES & REACTIONS"), Domain.CONVERSATIONS)
        self.assertEqual(match_section("📄 PAGES API"), Domain.DATA_SOURCES)
        self.assertIsNone(match_section("Lista los agentes"))

    def test_parse_endpoint_line(self):
        self.assertEqual(parse_endpoint_line("  PUT\t/api/v1/agents/1  extra"), (HTTPMethod.PUT, "/api/v1/agents/1"))
        self.assertIsNone(parse_endpoint_line("GET /api/v2/agents"))


if __name__ == '__main__':
    unittest.main()
