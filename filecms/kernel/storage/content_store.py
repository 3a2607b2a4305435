"""
File content store: raw bytes of each managed file, one file per name.
"""

from pathlib import Path
from typing import Union

from filecms.kernel.errors import NotFoundError, StorageFailureError
from filecms.kernel.models.base import check_filename
from filecms.logging_config import get_logger

logger = get_logger(__name__)


class FileContentStore:
    """Directory of file bodies keyed by filename."""

    def __init__(self, content_dir: Union[str, Path]):
        self.content_dir = Path(content_dir)

    def path_for(self, filename: str) -> Path:
        return self.content_dir / check_filename(filename)

    def exists(self, filename: str) -> bool:
        return self.path_for(filename).is_file()

    def read(self, filename: str) -> bytes:
        """
        Read the full content of a file.

        Raises:
            NotFoundError: If no content exists for the filename
            StorageFailureError: On any other I/O error
        """
        path = self.path_for(filename)
        try:
            return path.read_bytes()
        except FileNotFoundError as exc:
            raise NotFoundError(filename) from exc
        except OSError as exc:
            raise StorageFailureError("reading", path, exc) from exc

    def write(self, filename: str, content: bytes) -> None:
        """Create or fully replace the content of a file."""
        path = self.path_for(filename)
        try:
            self.content_dir.mkdir(parents=True, exist_ok=True)
            path.write_bytes(content)
        except OSError as exc:
            raise StorageFailureError("writing", path, exc) from exc
        logger.debug("Wrote content", extra={"managed_file": filename, "size_bytes": len(content)})

    def delete(self, filename: str) -> None:
        """
        Permanently remove a file's content.

        Raises:
            NotFoundError: If no content exists for the filename
        """
        path = self.path_for(filename)
        try:
            path.unlink()
        except FileNotFoundError as exc:
            raise NotFoundError(filename) from exc
        except OSError as exc:
            raise StorageFailureError("deleting", path, exc) from exc
        logger.debug("Deleted content", extra={"managed_file": filename})
