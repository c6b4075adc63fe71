"""Key-Value Store Interface

Settings, role overrides and export job records live in a key-value store
whose entries expire on their own.
"""
from abc import ABC, abstractmethod
from typing import Any, List, Optional


class KeyValueStore(ABC):
    """Interface for an expiring key-value store"""

    @abstractmethod
    async def get(self, key: str, default: Any = None) -> Any:
        """
        Read a value

        Args:
            key: Entry key
            default: Returned when the key is absent or expired

        Returns:
            The stored JSON-compatible value or default
        """
        pass

    @abstractmethod
    async def put(self, key: str, value: Any, ttl_seconds: int) -> None:
        """
        Store a JSON-compatible value that expires after ttl_seconds

        Args:
            key: Entry key
            value: Value to store
            ttl_seconds: Time to live in seconds
        """
        pass

    @abstractmethod
    async def forget(self, key: str) -> bool:
        """Delete an entry. Returns True if it existed"""
        pass

    @abstractmethod
    async def keys(self, prefix: str = "") -> List[str]:
        """List live keys starting with prefix"""
        pass

    @abstractmethod
    async def flush(self) -> None:
        """Delete every entry"""
        pass

    async def get_many(self, keys: List[str]) -> List[Optional[Any]]:
        """Read several values, None for each missing key"""
        return [await self.get(key) for key in keys]
