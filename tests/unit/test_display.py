"""
Tests for extractors/display.py — pure rendering, no I/O.
"""

from inline_snapshot import snapshot

from extractors.display import (
    format_breadcrumb,
    format_commands,
    format_documents,
    format_folder_list,
    format_selection,
    format_subfolders,
)
from models import FolderEntry


def _folder(id: int, name: str) -> FolderEntry:
    return FolderEntry(id=id, name=name, type="Folder")


class TestFormatDocuments:
    def test_documents_with_metadata(self) -> None:
        documents = [
            FolderEntry(
                id=1, name="Agenda", type="Document", page_count=7,
                template="CC - Agendas", creation_date="1/5/2021",
                modification_date="1/6/2021",
            ),
            FolderEntry(id=2, name="Scan", type="Document"),
            FolderEntry(
                id=3, name="Memo", type="Document", template="Memo",
                modification_date="2/1/2021",
            ),
        ]

        result = format_documents(documents)

        assert result == snapshot("""
📄 DOCUMENTS:
--------------------------------------------------
  1. Agenda (7 pages | CC - Agendas)
     Created: 1/5/2021 | Modified: 1/6/2021
  2. Scan
  3. Memo (Memo)
     Modified: 2/1/2021\
""")

    def test_zero_page_count_not_shown(self) -> None:
        result = format_documents([
            FolderEntry(id=1, name="Blank", type="Document", page_count=0),
        ])
        assert "pages" not in result

    def test_empty(self) -> None:
        assert format_documents([]) == ""


class TestFormatFolders:
    def test_folder_list_numbering(self) -> None:
        result = format_folder_list([_folder(874801, "2019"), _folder(12, "Budget")])

        assert result == snapshot("""\
📂  1. 2019 (ID: 874801)
📂  2. Budget (ID: 12)\
""")

    def test_two_digit_numbers_align(self) -> None:
        folders = [_folder(i, f"F{i}") for i in range(1, 11)]
        lines = format_folder_list(folders).splitlines()
        assert lines[9] == "📂 10. F10 (ID: 10)"

    def test_subfolders_with_urls(self) -> None:
        result = format_subfolders(
            [_folder(5, "Minutes")],
            ["https://portal.example.gov/WebLink/Browse.aspx?id=5&dbid=0&repo=R"],
        )

        assert result.splitlines() == [
            "📁 SUBFOLDERS:",
            "-" * 50,
            "  1. Minutes",
            "     https://portal.example.gov/WebLink/Browse.aspx?id=5&dbid=0&repo=R",
        ]

    def test_no_subfolders(self) -> None:
        assert format_subfolders([], []) == ""


class TestChrome:
    def test_breadcrumb_rule_tracks_length(self) -> None:
        assert format_breadcrumb("City Council") == "\n📂 City Council\n" + "=" * 15

    def test_breadcrumb_rule_capped(self) -> None:
        result = format_breadcrumb("x" * 100)
        assert result.splitlines()[-1] == "=" * 60

    def test_selection(self) -> None:
        result = format_selection([_folder(1, "A"), _folder(2, "B")])
        assert result == "\n✓ Selected: A, B (2 folders)"

    def test_no_selection(self) -> None:
        assert format_selection([]) == ""

    def test_commands_with_selection(self) -> None:
        assert "[c]lear" in format_commands(True)
        assert "multi-select" not in format_commands(True)

    def test_commands_without_selection(self) -> None:
        assert "[1,3,5] multi-select" in format_commands(False)
