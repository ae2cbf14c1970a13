"""
Browse tool implementation.

Interactive folder navigation with multi-select. One line of input is read,
handled to completion (including any fetches it triggers), then the prompt
comes back. Only subfolders are listed; documents are what `f` fetches.

Commands:
    3        open folder 3
    1,3,5    add folders to the selection (also ranges: 2-6)
    a        select every folder shown
    c        clear the selection
    b        back to the previous folder
    f        fetch the selection (or the current folder if none selected)
    q        quit
"""

from collections.abc import Callable
from dataclasses import dataclass, field

from adapters.weblink import ROOT_FOLDER_ID, WebLinkClient
from config import DEFAULT_OUTPUT_PREFIX
from extractors.display import (
    format_breadcrumb,
    format_commands,
    format_folder_list,
    format_selection,
)
from models import FolderEntry, WebLinkConfig
from tools.fetch import do_fetch
from validation import is_selection_input, parse_selection
from workspace.manager import snapshot_filename


@dataclass
class HistoryItem:
    id: int
    path: str


@dataclass
class BrowseState:
    """Where the user is and what they have picked."""
    current_folder_id: int
    current_path: str = "Root"
    # Insertion-ordered: fetches run in the order folders were picked
    selected: dict[int, FolderEntry] = field(default_factory=dict)
    history: list[HistoryItem] = field(default_factory=list)

    def open(self, folder: FolderEntry) -> None:
        self.history.append(HistoryItem(self.current_folder_id, self.current_path))
        self.current_folder_id = folder.id
        self.current_path = f"{self.current_path} > {folder.name}"

    def back(self) -> bool:
        if not self.history:
            return False
        prev = self.history.pop()
        self.current_folder_id = prev.id
        self.current_path = prev.path
        return True


def _read(prompt: str, input_fn: Callable[[str], str]) -> str | None:
    try:
        return input_fn(prompt)
    except EOFError:
        return None


def _fetch_selection(
    state: BrowseState,
    config: WebLinkConfig,
    client: WebLinkClient,
    prefix: str,
    folder_name: str,
) -> None:
    if not state.selected:
        print(f"\nFetching current folder: {folder_name}")
        do_fetch(config, state.current_folder_id, client=client, prefix=prefix)
        return

    count = len(state.selected)
    print(f"\nFetching {count} folders...")
    for folder_id, folder in state.selected.items():
        print(f"\nFetching: {folder.name} (ID: {folder_id})")
        do_fetch(
            config,
            folder_id,
            output_path=snapshot_filename(prefix, folder.name, folder_id),
            client=client,
            prefix=prefix,
        )
    print(f"\n✓ Done! Fetched {count} folders.")
    state.selected.clear()


def do_browse(
    config: WebLinkConfig,
    start_folder_id: int = ROOT_FOLDER_ID,
    input_fn: Callable[[str], str] = input,
    client: WebLinkClient | None = None,
    prefix: str = DEFAULT_OUTPUT_PREFIX,
) -> BrowseState:
    """
    Run the interactive browser until the user quits (or input ends).

    Args:
        config: Portal to browse
        start_folder_id: Folder to start in (default: repository root)
        input_fn: Line reader, `input` by default
        client: Existing client to reuse
        prefix: Filename prefix for fetched snapshots

    Returns:
        Final browser state
    """
    client = client or WebLinkClient(config)

    print("\n" + "=" * 60)
    print(f"Laserfiche WebLink Browser - {config.repo_name}")
    print("=" * 60)

    print("\nInitializing session...")
    client.init_session()
    print("Session established.")

    state = BrowseState(current_folder_id=start_folder_id)

    while True:
        print("\nFetching folder...")
        contents = client.browse_folder(state.current_folder_id)
        folders = contents.folders

        if not folders:
            print("\nNo subfolders found in this location.")
            if state.history:
                print("Use 'b' to go back or 'q' to quit.")
            else:
                print("Use 'q' to quit.")
        else:
            print(format_breadcrumb(contents.folder_name))
            print(format_folder_list(folders))
            if state.selected:
                print(format_selection(list(state.selected.values())))
            print(format_commands(bool(state.selected)))

        hint = f" [{len(state.selected)} selected]" if state.selected else ""
        line = _read(f">{hint} ", input_fn)
        if line is None:
            print("\nGoodbye!")
            break

        command = line.strip().lower()

        if command == "q":
            print("\nGoodbye!")
            break
        elif command == "b":
            if not state.back():
                print("\nAlready at root.")
        elif command == "f":
            _fetch_selection(state, config, client, prefix, contents.folder_name)
        elif command == "a":
            if folders:
                state.selected = {f.id: f for f in folders}
                print(f"\n✓ Selected all {len(folders)} folders.")
        elif command == "c":
            state.selected.clear()
            print("\n✓ Selection cleared.")
        elif command and is_selection_input(command):
            picks = parse_selection(command, len(folders))
            if not picks:
                print("\nInvalid selection.")
            elif len(picks) == 1:
                state.open(folders[picks[0] - 1])
            else:
                for num in picks:
                    folder = folders[num - 1]
                    state.selected.setdefault(folder.id, folder)
                print(f"\n✓ Added {len(picks)} folders to selection.")
        else:
            print(
                "\nInvalid command. Use [number], [a]ll, [c]lear, [b]ack, [f]etch, or [q]uit."
            )

    return state
