"""
Workspace Manager — Writes folder snapshots to disk.

A snapshot is a flat JSON document describing one fetched folder: its name,
repository, browse URL, fetch time, and every entry split into folders and
documents, each annotated with a portal URL.

    {prefix}-entries.json           default fetch output
    {prefix}-{name-slug}-{id}.json  one file per folder fetched from the browser
"""

import json
import re
import unicodedata
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from models import FolderContents, FolderEntry, WebLinkConfig


def slugify(text: str, max_length: int = 50) -> str:
    """
    Convert text to a filesystem-safe slug.

    - Converts to lowercase
    - Replaces spaces/punctuation with hyphens
    - Removes non-ASCII characters
    - Collapses multiple hyphens
    - Truncates to max_length

    Examples:
        "City Council Agendas" -> "city-council-agendas"
        "2019 (Archived)" -> "2019-archived"
        "Résolutions!!!" -> "resolutions"
    """
    # Normalize unicode (é -> e, etc)
    text = unicodedata.normalize("NFKD", text)
    text = text.encode("ascii", "ignore").decode("ascii")

    text = text.lower()
    text = re.sub(r"[^a-z0-9]+", "-", text)
    text = text.strip("-")
    text = re.sub(r"-+", "-", text)

    if len(text) > max_length:
        # Try to break at a hyphen
        text = text[:max_length].rsplit("-", 1)[0]

    return text or "untitled"


# =============================================================================
# PORTAL URLS
# =============================================================================

def _entry_query(config: WebLinkConfig, entry_id: int) -> str:
    return f"id={entry_id}&dbid={config.dbid}&repo={config.repo_name}"


def browse_url(config: WebLinkConfig, entry_id: int) -> str:
    """Portal page listing a folder."""
    return f"{config.base_url}/Browse.aspx?{_entry_query(config, entry_id)}"


def docview_url(config: WebLinkConfig, entry_id: int) -> str:
    """Portal viewer page for a document."""
    return f"{config.base_url}/DocView.aspx?{_entry_query(config, entry_id)}"


def entry_url(config: WebLinkConfig, entry: FolderEntry) -> str:
    return browse_url(config, entry.id) if entry.is_folder else docview_url(config, entry.id)


# =============================================================================
# SNAPSHOTS
# =============================================================================

def build_snapshot(
    config: WebLinkConfig,
    folder_id: int,
    contents: FolderContents,
    fetched_at: datetime | None = None,
) -> dict[str, Any]:
    """
    Build the JSON snapshot for a fetched folder.

    Args:
        config: Portal the folder came from
        folder_id: ID that was fetched
        contents: Result of get_all_entries()
        fetched_at: Fetch time (defaults to now, UTC)

    Returns:
        Dict with folderId, folderName, repository, folderUrl, fetchedAt,
        totalEntries, folders and documents. totalEntries counts the
        entries actually retrieved, not the backend-reported total.
    """
    fetched_at = fetched_at or datetime.now(timezone.utc)

    return {
        "folderId": folder_id,
        "folderName": contents.folder_name,
        "repository": config.repo_name,
        "folderUrl": browse_url(config, folder_id),
        "fetchedAt": fetched_at.isoformat(),
        "totalEntries": len(contents.entries),
        "folders": [
            {**e.to_dict(), "url": entry_url(config, e)} for e in contents.folders
        ],
        "documents": [
            {**e.to_dict(), "url": entry_url(config, e)} for e in contents.documents
        ],
    }


def default_snapshot_path(prefix: str, base_path: Path | None = None) -> Path:
    """Output path when no name is given: {prefix}-entries.json."""
    base = base_path or Path.cwd()
    return base / f"{prefix}-entries.json"


def snapshot_filename(prefix: str, folder_name: str, folder_id: int) -> str:
    """
    Filename for a folder fetched from the browser.

    Example:
        snapshot_filename("arcadia", "City Council", 1234)
        -> "arcadia-city-council-1234.json"
    """
    return f"{prefix}-{slugify(folder_name)}-{folder_id}.json"


def write_snapshot(snapshot: dict[str, Any], path: Path) -> Path:
    """
    Write a snapshot as pretty-printed UTF-8 JSON, creating parent folders.

    Returns:
        Path to the written file
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(snapshot, indent=2, ensure_ascii=False), encoding="utf-8")
    return path
