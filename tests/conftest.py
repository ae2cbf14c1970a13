"""
Shared pytest fixtures for weblink-browse tests.

Fixtures are loaded from the fixtures/ directory at project root.
HTTP mocking infrastructure is also provided here for testing the
WebLink adapter without hitting a real portal.
"""

import copy
import json
from pathlib import Path
from typing import Any, Generator
from unittest.mock import MagicMock, patch

import pytest

from adapters.weblink import WebLinkClient
from models import WebLinkConfig
from tests.helpers import wire_httpx_client

# Project root for fixture loading
PROJECT_ROOT = Path(__file__).parent.parent
FIXTURES_DIR = PROJECT_ROOT / "fixtures"


def load_fixture(category: str, name: str) -> dict:
    """
    Load a JSON fixture by category and name.

    Example:
        load_fixture("weblink", "listing_modern")  # loads fixtures/weblink/listing_modern.json
    """
    fixture_path = FIXTURES_DIR / category / f"{name}.json"
    with open(fixture_path) as f:
        return json.load(f)


# ============================================================================
# Config / client
# ============================================================================

@pytest.fixture
def config() -> WebLinkConfig:
    """Portal config pointing at a fake host."""
    return WebLinkConfig(
        base_url="https://portal.example.gov/WebLink",
        repo_name="TestRepo",
        dbid=0,
    )


@pytest.fixture
def client(config: WebLinkConfig) -> WebLinkClient:
    return WebLinkClient(config)


# ============================================================================
# Listing fixtures
# ============================================================================

@pytest.fixture
def modern_listing() -> dict[str, Any]:
    """GetFolderListing2 response in the current {"data": ...} envelope."""
    return load_fixture("weblink", "listing_modern")


@pytest.fixture
def legacy_listing() -> dict[str, Any]:
    """Same listing in the legacy ASP.NET {"d": ...} envelope."""
    return load_fixture("weblink", "listing_legacy")


@pytest.fixture
def modern_payload(modern_listing: dict[str, Any]) -> dict[str, Any]:
    """Unwrapped payload, deep-copied so tests can mutate it."""
    return copy.deepcopy(modern_listing["data"])


# ============================================================================
# HTTP Mocking Infrastructure
# ============================================================================

@pytest.fixture
def mock_http() -> Generator[MagicMock, None, None]:
    """
    Patch httpx.Client in the adapter and yield the client instance mock.

    Example:
        def test_something(client, mock_http):
            mock_http.request.side_effect = [make_response(200)]
            client.authenticated_fetch("/")
    """
    with patch("adapters.weblink.httpx.Client") as mock_client_cls:
        yield wire_httpx_client(mock_client_cls)
