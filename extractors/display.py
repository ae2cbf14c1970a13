"""
Display extractor — pure functions, no I/O.

Renders folder listings as terminal text for the fetch and browse commands.
Every function returns a string; callers decide where to print it.
"""

from models import FolderEntry

RULE_WIDTH = 50
MAX_BREADCRUMB_RULE = 60


def format_breadcrumb(path: str) -> str:
    """Current location with an underline sized to it (capped at 60)."""
    rule = "=" * min(len(path) + 3, MAX_BREADCRUMB_RULE)
    return f"\n📂 {path}\n{rule}"


def format_folder_list(folders: list[FolderEntry]) -> str:
    """Numbered subfolder menu for the browser (1-based, IDs shown)."""
    return "\n".join(
        f"📂 {i:>2}. {folder.name} (ID: {folder.id})"
        for i, folder in enumerate(folders, start=1)
    )


def format_subfolders(folders: list[FolderEntry], urls: list[str]) -> str:
    """
    Subfolder section of a fetch summary.

    Args:
        folders: Folder entries
        urls: Browse URL for each folder, same order
    """
    if not folders:
        return ""

    lines = ["📁 SUBFOLDERS:", "-" * RULE_WIDTH]
    for i, (entry, url) in enumerate(zip(folders, urls), start=1):
        lines.append(f"{i:>3}. {entry.name}")
        lines.append(f"     {url}")
    lines.append("")
    return "\n".join(lines)


def format_documents(documents: list[FolderEntry]) -> str:
    """
    Document section of a fetch summary.

    Each document gets a numbered line with page count and template when
    known, then a dates line when either date is present.
    """
    if not documents:
        return ""

    lines = ["", "📄 DOCUMENTS:", "-" * RULE_WIDTH]
    for i, entry in enumerate(documents, start=1):
        extra = " | ".join(
            part for part in (
                f"{entry.page_count} pages" if entry.page_count else None,
                str(entry.template) if entry.template else None,
            ) if part
        )
        lines.append(f"{i:>3}. {entry.name}" + (f" ({extra})" if extra else ""))

        dates = " | ".join(
            part for part in (
                f"Created: {entry.creation_date}" if entry.creation_date else None,
                f"Modified: {entry.modification_date}" if entry.modification_date else None,
            ) if part
        )
        if dates:
            lines.append(f"     {dates}")
    return "\n".join(lines)


def format_selection(selected: list[FolderEntry]) -> str:
    if not selected:
        return ""
    names = ", ".join(f.name for f in selected)
    return f"\n✓ Selected: {names} ({len(selected)} folders)"


def format_commands(has_selection: bool) -> str:
    if has_selection:
        return "\nCommands: [number] | [a]ll | [c]lear | [b]ack | [f]etch | [q]uit"
    return (
        "\nCommands: [number] to open | [1,3,5] multi-select | [1-5] range"
        " | [a]ll | [f]etch | [q]uit"
    )
