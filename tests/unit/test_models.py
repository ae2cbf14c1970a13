"""Tests for models.py — snapshot shapes and the folder/document split."""

from models import ErrorKind, FolderContents, FolderEntry, WeblinkError


class TestFolderEntry:
    def test_to_dict_omits_absent_fields(self) -> None:
        entry = FolderEntry(id=1, name="2019", type="Folder")
        assert entry.to_dict() == {"id": 1, "name": "2019", "type": "Folder"}

    def test_to_dict_camel_case(self) -> None:
        entry = FolderEntry(
            id=2, name="Agenda", type="Document", page_count=7, template="CC",
            creation_date="1/5/2021", modification_date="1/6/2021",
        )
        assert entry.to_dict() == {
            "id": 2,
            "name": "Agenda",
            "type": "Document",
            "pageCount": 7,
            "template": "CC",
            "creationDate": "1/5/2021",
            "modificationDate": "1/6/2021",
        }

    def test_empty_string_kept(self) -> None:
        """Only null is dropped; an empty template is still a value."""
        entry = FolderEntry(id=3, name="x", type="Shortcut", template="")
        assert entry.to_dict()["template"] == ""


class TestFolderContents:
    def test_split(self) -> None:
        contents = FolderContents(
            folder_name="Mixed",
            entries=[
                FolderEntry(id=1, name="a", type="Folder"),
                FolderEntry(id=2, name="b", type="Document"),
                FolderEntry(id=3, name="c", type="Shortcut"),
                FolderEntry(id=4, name="d", type="Unknown(7)"),
                FolderEntry(id=5, name="e", type="Folder"),
            ],
        )

        assert [e.id for e in contents.folders] == [1, 5]
        assert [e.id for e in contents.documents] == [2, 3, 4]

    def test_empty(self) -> None:
        contents = FolderContents(folder_name="")
        assert contents.folders == []
        assert contents.documents == []
        assert contents.total_entries == 0


class TestWeblinkError:
    def test_to_dict(self) -> None:
        err = WeblinkError(
            ErrorKind.TIMEOUT, "timed out", details={"url": "https://x/"}, retryable=True,
        )
        assert err.to_dict() == {
            "error": True,
            "kind": "timeout",
            "message": "timed out",
            "retryable": True,
            "url": "https://x/",
        }

    def test_str_is_message(self) -> None:
        assert str(WeblinkError(ErrorKind.UNKNOWN, "boom")) == "boom"
