"""File Storage Interface

Abstract interface for storing and retrieving generated export files.
"""
from abc import ABC, abstractmethod
from typing import Optional


class FileStorage(ABC):
    """Interface for file storage operations"""

    @abstractmethod
    async def upload(self, file_path: str, content: bytes) -> str:
        """
        Upload file content to storage

        Args:
            file_path: The destination path/key for the file
            content: The file content as bytes

        Returns:
            The storage path/key of the uploaded file
        """
        pass

    @abstractmethod
    async def read(self, file_path: str) -> Optional[bytes]:
        """
        Read file content from storage

        Args:
            file_path: The path/key of the file

        Returns:
            File content, or None if the file does not exist
        """
        pass

    @abstractmethod
    async def delete(self, file_path: str) -> bool:
        """
        Delete a file from storage

        Args:
            file_path: The path/key of the file

        Returns:
            True if deletion was successful
        """
        pass

    @abstractmethod
    async def exists(self, file_path: str) -> bool:
        """
        Check if a file exists in storage

        Args:
            file_path: The path/key of the file

        Returns:
            True if file exists
        """
        pass
