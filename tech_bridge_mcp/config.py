import os

SERVER_NAME = "tech-bridge"
SERVER_VERSION = "1.0.0"
RESOURCE_SCHEME = "api"
RESOURCE_NAME = "api-endpoints"
CONTEXT_FILE_ENV = "TECH_BRIDGE_CONTEXT_FILE"


def get_context_file() -> str:
    """Path of the endpoint document, resolved on every call"""
    return os.getenv(CONTEXT_FILE_ENV, os.path.join(os.getcwd(), "context.txt"))


def resource_uri(domain_key: str) -> str:
    return f"{RESOURCE_SCHEME}://{domain_key}"
