"""Unit tests for the managed file index and the content store."""

import pytest

from filecms.kernel.errors import (
    AlreadyManagedError,
    InvalidNameError,
    NotFoundError,
    NotManagedError,
    StorageFailureError,
)


class TestManagedFileIndex:
    """Tests for ManagedFileIndex."""

    def test_missing_index_lists_empty(self, file_index):
        """No index file yet is a valid, empty index."""
        assert file_index.list() == []
        assert len(file_index) == 0

    def test_add_preserves_insertion_order(self, file_index):
        """Filenames list in the order they were added."""
        for name in ("c.txt", "a.txt", "b.txt"):
            file_index.add(name)

        assert file_index.list() == ["c.txt", "a.txt", "b.txt"]
        assert file_index.index_path.read_text(encoding="utf-8") == "c.txt\na.txt\nb.txt\n"

    def test_add_duplicate_rejected(self, file_index):
        """Adding a managed name again fails and leaves one entry."""
        file_index.add("a.txt")

        with pytest.raises(AlreadyManagedError):
            file_index.add("a.txt")

        assert file_index.list() == ["a.txt"]

    def test_remove_rewrites_index(self, file_index):
        """Removal keeps the remaining order and drops the temp file."""
        for name in ("a.txt", "b.txt", "c.txt"):
            file_index.add(name)

        file_index.remove("b.txt")

        assert file_index.list() == ["a.txt", "c.txt"]
        assert not file_index.index_path.with_name("files.txt.tmp").exists()

    def test_remove_unmanaged_rejected(self, file_index):
        """Removing an unknown name fails."""
        with pytest.raises(NotManagedError):
            file_index.remove("ghost.txt")

    def test_contains(self, file_index):
        """Membership reflects the persisted index."""
        file_index.add("a.txt")

        assert "a.txt" in file_index
        assert file_index.contains("b.txt") is False

    def test_list_is_stable(self, file_index):
        """Listing twice without changes yields identical sequences."""
        file_index.add("a.txt")
        file_index.add("b.txt")

        assert file_index.list() == file_index.list()

    def test_unreadable_index_raises_storage_failure(self, file_index):
        """An index path that cannot be read is not mistaken for empty."""
        file_index.index_path.mkdir(parents=True)

        with pytest.raises(StorageFailureError):
            file_index.list()

    def test_undecodable_index_raises_storage_failure(self, file_index):
        """Non-UTF-8 bytes in the index surface as a typed storage error."""
        file_index.index_path.write_bytes(b"caf\xe9.txt\n")

        with pytest.raises(StorageFailureError) as exc_info:
            file_index.list()

        assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)

    def test_failed_append_chains_os_error(self, file_index, tmp_path):
        """An index that cannot be appended to raises StorageFailureError."""
        file_index.index_path.symlink_to(tmp_path / "missing" / "files.txt")

        with pytest.raises(StorageFailureError) as exc_info:
            file_index.add("a.txt")

        assert exc_info.value.action == "appending to index"
        assert isinstance(exc_info.value.__cause__, OSError)

    @pytest.mark.parametrize("name", ["", "has space.txt", "../escape", "dir/file", ".."])
    def test_invalid_filenames_rejected(self, file_index, name):
        """Names that break the one-per-line format or escape are refused."""
        with pytest.raises(InvalidNameError):
            file_index.add(name)


class TestFileContentStore:
    """Tests for FileContentStore."""

    def test_write_then_read(self, content_store):
        """Written bytes read back unchanged."""
        content_store.write("a.txt", b"hello\x00world")

        assert content_store.read("a.txt") == b"hello\x00world"
        assert content_store.exists("a.txt") is True

    def test_write_replaces_content(self, content_store):
        """A second write fully replaces the first (no append)."""
        content_store.write("a.txt", b"a much longer first version")
        content_store.write("a.txt", b"short")

        assert content_store.read("a.txt") == b"short"

    def test_write_is_idempotent(self, content_store):
        """Writing the same bytes twice leaves the same content."""
        content_store.write("a.txt", b"same")
        content_store.write("a.txt", b"same")

        assert content_store.read("a.txt") == b"same"

    def test_read_missing_raises_not_found(self, content_store):
        """Reading absent content fails with NotFoundError."""
        with pytest.raises(NotFoundError):
            content_store.read("ghost.txt")

    def test_delete_removes_content(self, content_store):
        """Deleted content is gone."""
        content_store.write("a.txt", b"x")
        content_store.delete("a.txt")

        assert content_store.exists("a.txt") is False
        with pytest.raises(NotFoundError):
            content_store.read("a.txt")

    def test_delete_missing_raises_not_found(self, content_store):
        """Deleting absent content fails with NotFoundError."""
        with pytest.raises(NotFoundError):
            content_store.delete("ghost.txt")

    def test_path_stays_in_content_dir(self, content_store):
        """Traversal names are refused before touching the filesystem."""
        with pytest.raises(InvalidNameError):
            content_store.write("../users.txt", b"admin admin admin")

    def test_failed_write_chains_os_error(self, content_store):
        """A content directory blocked by a regular file fails the write."""
        content_store.content_dir.write_bytes(b"not a directory")

        with pytest.raises(StorageFailureError) as exc_info:
            content_store.write("a.txt", b"x")

        assert exc_info.value.action == "writing"
        assert isinstance(exc_info.value.__cause__, OSError)

    def test_failed_delete_chains_os_error(self, content_store):
        """Content that cannot be unlinked raises StorageFailureError, not NotFound."""
        content_store.path_for("a.txt").mkdir(parents=True)

        with pytest.raises(StorageFailureError) as exc_info:
            content_store.delete("a.txt")

        assert exc_info.value.action == "deleting"
        assert isinstance(exc_info.value.__cause__, OSError)
        assert not isinstance(exc_info.value.__cause__, FileNotFoundError)
