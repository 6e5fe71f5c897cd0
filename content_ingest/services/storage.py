"""
Local file storage for uploads.

Keys are relative paths such as ``{user_id}/{uuid}.pdf``; they are resolved
under the base directory and rejected if they would escape it. Disk I/O runs
in a worker thread so the event loop is never blocked.
"""

import asyncio
from pathlib import Path

from content_ingest.core.exceptions import StorageError


class LocalFileStorage:
    """
    Attributes:
        base_path: Root directory for stored files.
    """

    def __init__(self, base_path: str | Path) -> None:
        self.base_path = Path(base_path).resolve()

    def resolve(self, key: str) -> Path:
        """
        Absolute path for a storage key.

        Raises:
            StorageError: If the key points outside base_path.
        """
        target = (self.base_path / key).resolve()
        if not target.is_relative_to(self.base_path):
            raise StorageError(f"Invalid storage key: {key}", path=key)
        return target

    async def save(self, key: str, data: bytes) -> str:
        target = self.resolve(key)

        def _write() -> None:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_bytes(data)

        try:
            await asyncio.to_thread(_write)
        except OSError as e:
            raise StorageError(f"Failed to save file: {e}", path=str(target)) from e
        return str(target)

    async def read(self, key: str) -> bytes:
        target = self.resolve(key)
        try:
            return await asyncio.to_thread(target.read_bytes)
        except OSError as e:
            raise StorageError(f"Failed to read file: {e}", path=str(target)) from e

    async def delete(self, key: str) -> None:
        """Remove a stored file; a file that is already gone is not an error."""
        target = self.resolve(key)
        try:
            await asyncio.to_thread(target.unlink, True)
        except OSError as e:
            raise StorageError(f"Failed to delete file: {e}", path=str(target)) from e
