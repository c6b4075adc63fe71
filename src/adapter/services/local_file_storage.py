"""Local File Storage Adapter

Local filesystem implementation of FileStorage.
"""
import os
import aiofiles
from pathlib import Path
from typing import Optional
from src.app.services.file_storage import FileStorage


class LocalFileStorage(FileStorage):
    """Local filesystem storage implementation"""

    def __init__(self, base_path: str):
        """
        Initialize local file storage

        Args:
            base_path: Base directory for file storage
        """
        self.base_path = Path(base_path)
        # Ensure base directory exists
        self.base_path.mkdir(parents=True, exist_ok=True)

    def _full_path(self, file_path: str) -> Path:
        full_path = (self.base_path / file_path).resolve()
        if self.base_path.resolve() not in full_path.parents:
            raise ValueError(f"Path escapes storage root: {file_path}")
        return full_path

    async def upload(self, file_path: str, content: bytes) -> str:
        """Upload file content to local storage"""
        full_path = self._full_path(file_path)
        # Ensure parent directory exists
        full_path.parent.mkdir(parents=True, exist_ok=True)

        async with aiofiles.open(full_path, "wb") as f:
            await f.write(content)

        return file_path

    async def read(self, file_path: str) -> Optional[bytes]:
        """Read file content, None when missing"""
        full_path = self._full_path(file_path)
        if not full_path.is_file():
            return None
        async with aiofiles.open(full_path, "rb") as f:
            return await f.read()

    async def delete(self, file_path: str) -> bool:
        """Delete a file from local storage"""
        full_path = self._full_path(file_path)
        try:
            if full_path.exists():
                os.remove(full_path)
            return True
        except OSError:
            return False

    async def exists(self, file_path: str) -> bool:
        """Check if a file exists in local storage"""
        return self._full_path(file_path).is_file()
