"""
Workspace — Snapshot persistence.

Writes fetched folder listings as flat JSON files.
"""

from .manager import (
    slugify,
    browse_url,
    docview_url,
    entry_url,
    build_snapshot,
    default_snapshot_path,
    snapshot_filename,
    write_snapshot,
)

__all__ = [
    "slugify",
    "browse_url",
    "docview_url",
    "entry_url",
    "build_snapshot",
    "default_snapshot_path",
    "snapshot_filename",
    "write_snapshot",
]
