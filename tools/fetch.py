"""
Fetch tool implementation.

Fetches every entry of one folder, prints a summary to stdout and writes a
JSON snapshot (filesystem-first: the snapshot is the deliverable, the printed
summary is for the human watching).
"""

from pathlib import Path

from adapters.weblink import WebLinkClient
from config import DEFAULT_OUTPUT_PREFIX
from extractors.display import format_documents, format_subfolders
from logging_config import logger
from models import FetchResult, WebLinkConfig
from workspace.manager import (
    browse_url,
    build_snapshot,
    default_snapshot_path,
    write_snapshot,
)


def do_fetch(
    config: WebLinkConfig,
    folder_id: int,
    output_path: Path | str | None = None,
    client: WebLinkClient | None = None,
    prefix: str = DEFAULT_OUTPUT_PREFIX,
) -> FetchResult:
    """
    Fetch a folder's full listing and save it as a snapshot.

    Args:
        config: Portal to talk to
        folder_id: Folder to fetch
        output_path: Snapshot path (default: ./{prefix}-entries.json)
        client: Existing client to reuse (a fresh one is created otherwise)
        prefix: Filename prefix for the default output path

    Returns:
        FetchResult; path is None when the folder came back empty

    Raises:
        WeblinkError: If the session bootstrap fails at the transport level
    """
    client = client or WebLinkClient(config)

    print("Initializing session...")
    session_ok = client.init_session()
    if session_ok:
        print("Session established.\n")
    else:
        print("No session cookies received; continuing anyway.\n")

    print("Fetching folder contents...\n")
    contents = client.get_all_entries(folder_id)

    if not contents.entries:
        print("No entries found or folder is empty.")
        return FetchResult(
            folder_id=folder_id,
            folder_name=contents.folder_name,
            entry_count=0,
            folder_count=0,
            document_count=0,
            session_ok=session_ok,
        )

    folders = contents.folders
    documents = contents.documents

    print(f"📂 Folder: {contents.folder_name}")
    print(f"   URL: {browse_url(config, folder_id)}")
    print(
        f"   Total: {len(contents.entries)} items "
        f"({len(folders)} folders, {len(documents)} documents)\n"
    )

    if folders:
        print(format_subfolders(folders, [browse_url(config, f.id) for f in folders]))
    if documents:
        print(format_documents(documents))

    snapshot = build_snapshot(config, folder_id, contents)
    path = Path(output_path) if output_path else default_snapshot_path(prefix)
    write_snapshot(snapshot, path)
    logger.info(f"Wrote snapshot for folder {folder_id} to {path}")
    print(f"\n✓ Results saved to {path}")

    return FetchResult(
        folder_id=folder_id,
        folder_name=contents.folder_name,
        entry_count=len(contents.entries),
        folder_count=len(folders),
        document_count=len(documents),
        path=str(path),
        session_ok=session_ok,
    )
