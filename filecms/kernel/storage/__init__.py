"""
Storage Core - managed file index and content bodies.
"""

from filecms.kernel.storage.content_store import FileContentStore
from filecms.kernel.storage.file_index import ManagedFileIndex

__all__ = [
    "FileContentStore",
    "ManagedFileIndex",
]
