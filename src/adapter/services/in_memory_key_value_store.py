"""In-Memory Key-Value Store

Process-local store for development and tests. Values go through a JSON
round trip so callers see the same types the Redis store returns.
"""
import json
import time
from typing import Any, Callable, Dict, List, Tuple
from src.app.services.key_value_store import KeyValueStore


class InMemoryKeyValueStore(KeyValueStore):
    """Dictionary-backed KeyValueStore with lazy expiry"""

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._entries: Dict[str, Tuple[str, float]] = {}
        self._clock = clock

    def _live(self, key: str) -> bool:
        entry = self._entries.get(key)
        if entry is None:
            return False
        if entry[1] <= self._clock():
            del self._entries[key]
            return False
        return True

    async def get(self, key: str, default: Any = None) -> Any:
        if not self._live(key):
            return default
        return json.loads(self._entries[key][0])

    async def put(self, key: str, value: Any, ttl_seconds: int) -> None:
        self._entries[key] = (json.dumps(value, default=str), self._clock() + ttl_seconds)

    async def forget(self, key: str) -> bool:
        existed = self._live(key)
        self._entries.pop(key, None)
        return existed

    async def keys(self, prefix: str = "") -> List[str]:
        return [key for key in list(self._entries) if key.startswith(prefix) and self._live(key)]

    async def flush(self) -> None:
        self._entries.clear()
