"""
Extractors — Pure functions for decoding and rendering listings.

No HTTP, no filesystem, no logging. Just transform input → output.
Easily testable with fixtures.
"""

from .listing import (
    resolve_type,
    unwrap_envelope,
    find_column,
    decode_entries,
    decode_page,
)
from .display import (
    format_breadcrumb,
    format_folder_list,
    format_subfolders,
    format_documents,
    format_selection,
    format_commands,
)

__all__ = [
    "resolve_type",
    "unwrap_envelope",
    "find_column",
    "decode_entries",
    "decode_page",
    "format_breadcrumb",
    "format_folder_list",
    "format_subfolders",
    "format_documents",
    "format_selection",
    "format_commands",
]
