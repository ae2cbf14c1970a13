"""
Type definitions for weblink-browse.

Dataclasses defining the contracts between layers:
- Adapters produce these structures from WebLink API responses
- Extractors consume raw payloads and return these structures (or strings)
- Tools wire everything together

These types make the adapter→extractor contract explicit and IDE-checkable.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


# ============================================================================
# ERROR TYPES
# ============================================================================

class ErrorKind(Enum):
    """Categories of errors for consistent handling."""
    NETWORK_ERROR = "network_error"      # Connection failed
    TIMEOUT = "timeout"                  # Request timed out
    SESSION_FAILED = "session_failed"    # Portal set no cookies
    INVALID_INPUT = "invalid_input"      # Bad parameters
    UNKNOWN = "unknown"                  # Unexpected error


class WeblinkError(Exception):
    """
    Structured error for consistent handling across layers.

    Adapters raise these on transport failures.
    The CLI catches and prints them.
    """

    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        details: dict[str, Any] | None = None,
        retryable: bool = False,
    ):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.details = details or {}
        self.retryable = retryable

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for JSON output."""
        return {
            "error": True,
            "kind": self.kind.value,
            "message": self.message,
            "retryable": self.retryable,
            **self.details,
        }


# ============================================================================
# CONFIGURATION
# ============================================================================

@dataclass(frozen=True)
class WebLinkConfig:
    """Connection settings for one WebLink portal."""
    base_url: str   # e.g. "https://laserfiche.arcadiaca.gov/WebLink"
    repo_name: str  # e.g. "CityofArcadia"
    dbid: int       # Database ID (usually 0)


# ============================================================================
# FOLDER LISTING TYPES
# ============================================================================

# Values in a row's parallel data array: strings, numbers, or null
CellValue = str | int | float | None

FOLDER = "Folder"
DOCUMENT = "Document"
SHORTCUT = "Shortcut"


@dataclass
class FolderEntry:
    """
    A folder or document row from the listing endpoint.

    ``type`` is always a resolved label ("Folder", "Document", "Shortcut" or
    "Unknown(<code>)"), never the backend's numeric code. Optional fields hold
    whatever the backend returned, dates included, without normalization.
    """
    id: int
    name: str
    type: str
    page_count: CellValue = None
    template: CellValue = None
    creation_date: CellValue = None
    modification_date: CellValue = None

    @property
    def is_folder(self) -> bool:
        return self.type == FOLDER

    def to_dict(self) -> dict[str, Any]:
        """Convert to the camelCase shape used in JSON snapshots (absent fields omitted)."""
        output: dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "type": self.type,
        }
        optional = {
            "pageCount": self.page_count,
            "template": self.template,
            "creationDate": self.creation_date,
            "modificationDate": self.modification_date,
        }
        output.update({k: v for k, v in optional.items() if v is not None})
        return output


@dataclass
class ListingPage:
    """One decoded page of a folder listing."""
    name: str
    total_entries: int
    entries: list[FolderEntry]


@dataclass
class FolderContents:
    """
    Contents of a folder, in the backend's sort order (name, ascending).

    folder_name is empty when the backend returned no payload.
    total_entries is the backend-reported count from the first page, which can
    exceed len(entries) for first-page-only browsing.
    """
    folder_name: str
    entries: list[FolderEntry] = field(default_factory=list)
    total_entries: int = 0

    @property
    def folders(self) -> list[FolderEntry]:
        return [e for e in self.entries if e.is_folder]

    @property
    def documents(self) -> list[FolderEntry]:
        """Everything that is not a folder (documents, shortcuts, unknown codes)."""
        return [e for e in self.entries if not e.is_folder]


# ============================================================================
# TOOL RESULT TYPES
# ============================================================================

@dataclass
class FetchResult:
    """Result of the fetch command."""
    folder_id: int
    folder_name: str
    entry_count: int
    folder_count: int
    document_count: int
    path: str | None = None  # Snapshot file; None when nothing was written
    session_ok: bool = True

    def to_dict(self) -> dict[str, Any]:
        return {
            "folder_id": self.folder_id,
            "folder_name": self.folder_name,
            "entry_count": self.entry_count,
            "folder_count": self.folder_count,
            "document_count": self.document_count,
            "path": self.path,
            "session_ok": self.session_ok,
        }
