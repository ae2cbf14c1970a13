"""
Shared test helpers for weblink-browse.

Centralizes mock wiring and payload builders that repeat across test files.
"""

from __future__ import annotations

import json
from typing import Any
from unittest.mock import MagicMock

import httpx


def wire_httpx_client(mock_client_cls: MagicMock) -> MagicMock:
    """Wire up httpx.Client context manager mock and return the client instance.

    Replaces the repetitive 3-line pattern:
        mock_client = MagicMock()
        mock_client_cls.return_value.__enter__ = MagicMock(return_value=mock_client)
        mock_client_cls.return_value.__exit__ = MagicMock(return_value=False)

    Usage:
        mock_client = wire_httpx_client(mock_client_cls)
    """
    mock_client = MagicMock()
    mock_client_cls.return_value.__enter__ = MagicMock(return_value=mock_client)
    mock_client_cls.return_value.__exit__ = MagicMock(return_value=False)
    return mock_client


def make_response(
    status: int = 200,
    *,
    json_body: Any = None,
    text: str | None = None,
    cookies: list[str] | None = None,
    location: str | None = None,
) -> httpx.Response:
    """Build a real httpx.Response for use as a canned mock return value.

    Args:
        status: HTTP status code
        json_body: Body serialized as JSON
        text: Raw body (for non-JSON responses)
        cookies: Set-Cookie header values, one header each
        location: Location header (for redirects)
    """
    headers: list[tuple[str, str]] = [("Set-Cookie", c) for c in cookies or []]
    if location is not None:
        headers.append(("Location", location))
    if json_body is not None:
        return httpx.Response(status, headers=headers, json=json_body)
    return httpx.Response(status, headers=headers, text=text or "")


def make_row(
    entry_id: int,
    name: str,
    type_code: int = 1,
    data: list[Any] | None = None,
) -> dict[str, Any]:
    return {"entryId": entry_id, "name": name, "type": type_code, "data": data or []}


def make_listing(
    rows: list[dict[str, Any]],
    *,
    name: str = "Test Folder",
    total: int | None = None,
    columns: list[str] | None = None,
    envelope: str = "data",
) -> dict[str, Any]:
    """Build a GetFolderListing2 envelope around rows."""
    return {
        envelope: {
            "name": name,
            "totalEntries": len(rows) if total is None else total,
            "results": rows,
            "colTypes": [{"name": c} for c in columns or []],
        }
    }


def make_page(start: int, count: int, total: int, name: str = "Big Folder") -> dict[str, Any]:
    """A page of `count` document rows numbered from `start`."""
    rows = [make_row(start + i, f"Doc {start + i:05d}") for i in range(count)]
    return make_listing(rows, name=name, total=total)


def request_json(call: Any) -> dict[str, Any]:
    """Decode the JSON body sent in a recorded mock_http.request call."""
    return json.loads(call.kwargs["content"])
