"""Tests for the file journal adapter."""

import os
from unittest.mock import MagicMock, patch

import pytest

from journal_cli.adapters.file_journal import FileJournalStore
from journal_cli.errors import JournalIOError, JournalPathError, TargetMissingError

LINE = "JOURNAL CLI 14:07 🕑 -> went running\n"


@pytest.fixture
def store(tmp_path):
    return FileJournalStore(tmp_path)


class TestFileJournalStoreInit:
    def test_accepts_directory(self, tmp_path):
        store = FileJournalStore(str(tmp_path))
        assert store.journal_dir == tmp_path

    def test_missing_directory(self, tmp_path):
        missing = tmp_path / "nope"
        with pytest.raises(JournalPathError, match="JOURNAL_HOME path does not exist"):
            FileJournalStore(missing)
        assert not missing.exists()

    def test_not_a_directory(self, tmp_path):
        regular = tmp_path / "file.md"
        regular.write_text("x")
        with pytest.raises(JournalPathError, match="JOURNAL_HOME is not a directory"):
            FileJournalStore(regular)
        assert regular.read_text() == "x"


class TestAppendLine:
    def test_path_for(self, store, tmp_path):
        assert store.path_for("2024-05-03") == tmp_path / "2024-05-03.md"

    def test_exists(self, store, tmp_path):
        assert not store.exists("2024-05-03")
        (tmp_path / "2024-05-03.md").touch()
        assert store.exists("2024-05-03")

    def test_appends_preserving_content(self, store, tmp_path):
        target = tmp_path / "2024-05-03.md"
        target.write_bytes(b"hello\n")

        path = store.append_line("2024-05-03", LINE)

        assert path == target
        assert target.read_bytes() == b"hello\n" + LINE.encode("utf-8")

    def test_appends_successive_lines(self, store, tmp_path):
        target = tmp_path / "2024-05-03.md"
        target.write_text("")

        store.append_line("2024-05-03", "one\n")
        store.append_line("2024-05-03", "two\n")

        assert target.read_text() == "one\ntwo\n"

    def test_missing_target_not_created(self, store, tmp_path):
        with pytest.raises(TargetMissingError, match="Journal file does not exist"):
            store.append_line("2024-05-03", LINE)
        assert not (tmp_path / "2024-05-03.md").exists()

    def test_open_failure(self, store, tmp_path):
        target = tmp_path / "2024-05-03.md"
        target.write_text("hello\n")

        with patch(
            "journal_cli.adapters.file_journal.os.open",
            side_effect=PermissionError(13, "Permission denied"),
        ):
            with pytest.raises(JournalIOError, match="Failed to open journal file .*Permission denied"):
                store.append_line("2024-05-03", LINE)

        assert target.read_text() == "hello\n"

    def test_open_does_not_create(self, store, tmp_path, monkeypatch):
        # File disappears between the existence check and the open.
        target = tmp_path / "2024-05-03.md"
        target.write_text("")
        real_open = os.open

        def vanishing_open(path, flags, *args):
            os.remove(path)
            return real_open(path, flags, *args)

        monkeypatch.setattr("journal_cli.adapters.file_journal.os.open", vanishing_open)

        with pytest.raises(JournalIOError, match="Failed to open journal file"):
            store.append_line("2024-05-03", LINE)
        assert not target.exists()

    def test_write_failure(self, store, tmp_path):
        (tmp_path / "2024-05-03.md").write_text("")
        handle = MagicMock()
        handle.__enter__.return_value.write.side_effect = OSError(28, "No space left on device")

        with patch("journal_cli.adapters.file_journal.os.fdopen", return_value=handle) as mock_fdopen:
            with pytest.raises(JournalIOError, match="Failed to write to journal file: .*No space left"):
                store.append_line("2024-05-03", LINE)

        fd = mock_fdopen.call_args.args[0]
        os.close(fd)
        handle.__exit__.assert_called_once()

    def test_existence_check_goes_through_exists(self, store, tmp_path):
        (tmp_path / "2024-05-03.md").write_text("hello\n")

        with patch.object(FileJournalStore, "exists", return_value=False) as mock_exists:
            with pytest.raises(TargetMissingError):
                store.append_line("2024-05-03", LINE)

        mock_exists.assert_called_once_with("2024-05-03")
        assert (tmp_path / "2024-05-03.md").read_text() == "hello\n"

    def test_undecodable_argument_bytes_written_back(self, store, tmp_path):
        # os.fsdecode(b"caf\xe9") == "caf\udce9" on a UTF-8 locale
        target = tmp_path / "2024-05-03.md"
        target.write_bytes(b"")

        store.append_line("2024-05-03", "caf\udce9\n")

        assert target.read_bytes() == b"caf\xe9\n"
