"""
Listing extractor — pure functions, no I/O.

Decodes raw GetFolderListing2 responses into FolderEntry records.

The backend answers in one of two envelopes: {"data": {...}} from current
WebLink versions, {"d": {...}} from the legacy ASP.NET page-method wrapper.
Rows carry a parallel `data` array whose meaning is declared per response by
`colTypes`, so a column's index has to be looked up on every page.
"""

import re
from typing import Any

from models import CellValue, DOCUMENT, FOLDER, SHORTCUT, FolderEntry, ListingPage

TYPE_CODE_PATTERN = re.compile(r'^\s*-?\d+\s*$')

# Backend type codes → labels. -2 is an alternate document code some
# repositories emit.
ENTRY_TYPES: dict[int, str] = {
    0: FOLDER,
    1: DOCUMENT,
    2: SHORTCUT,
    -2: DOCUMENT,
}

# colTypes names → FolderEntry attribute
COLUMNS: dict[str, str] = {
    "PageCount": "page_count",
    "TemplateName": "template",
    "CreationDate": "creation_date",
    "LastModified": "modification_date",
}


def resolve_type(code: Any) -> str:
    """
    Map a backend type code to its label.

    Unknown codes are kept as "Unknown(<code>)" rather than dropped so the
    original code stays visible downstream.
    """
    number = _type_number(code)
    label = ENTRY_TYPES.get(number) if number is not None else None
    return label or f"Unknown({code})"


def _type_number(code: Any) -> int | None:
    # Some portals send the code as a numeric string
    if isinstance(code, bool):
        return None
    if isinstance(code, int):
        return code
    if isinstance(code, str) and TYPE_CODE_PATTERN.match(code):
        return int(code)
    return None


def unwrap_envelope(raw: Any) -> dict[str, Any] | None:
    """
    Return the payload from either envelope, or None when there is no data.

    Anything that is not an object, at either level, counts as no data: a
    page method that fails can answer 200 with {"d": "<message>"}.
    """
    if not isinstance(raw, dict):
        return None
    payload = raw.get("data") or raw.get("d")
    return payload if isinstance(payload, dict) else None


def find_column(col_types: list[dict[str, Any]], name: str) -> int:
    """Index of the named column in colTypes, -1 if absent."""
    for idx, col in enumerate(col_types):
        if isinstance(col, dict) and col.get("name") == name:
            return idx
    return -1


def _cell(row_data: list[CellValue] | None, idx: int) -> CellValue:
    if idx < 0 or not row_data or idx >= len(row_data):
        return None
    return row_data[idx]


def decode_entries(payload: dict[str, Any]) -> list[FolderEntry]:
    """
    Decode the result rows of one page.

    Column positions are resolved once for this page and reused for every
    row on it; they are never carried over from another page.

    Args:
        payload: Unwrapped page payload (see unwrap_envelope)

    Returns:
        Entries in backend order
    """
    col_types = payload.get("colTypes") or []
    indices = {attr: find_column(col_types, col) for col, attr in COLUMNS.items()}

    entries: list[FolderEntry] = []
    for result in payload.get("results") or []:
        if not isinstance(result, dict):
            continue
        row_data = result.get("data")
        entries.append(FolderEntry(
            id=result.get("entryId"),
            name=result.get("name"),
            type=resolve_type(result.get("type")),
            **{attr: _cell(row_data, idx) for attr, idx in indices.items()},
        ))
    return entries


def decode_page(payload: dict[str, Any]) -> ListingPage:
    """Decode folder name, reported total and rows from an unwrapped payload."""
    return ListingPage(
        name=payload.get("name") or "",
        total_entries=payload.get("totalEntries") or 0,
        entries=decode_entries(payload),
    )
