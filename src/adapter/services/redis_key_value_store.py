"""Redis Key-Value Store Adapter

Values are stored as JSON strings with SETEX so Redis enforces expiry.
"""
import json
import logging
from typing import Any, List, Optional
from redis.asyncio import Redis, from_url
from src.app.services.key_value_store import KeyValueStore

logger = logging.getLogger(__name__)


class RedisKeyValueStore(KeyValueStore):
    """Redis implementation of KeyValueStore"""

    def __init__(self, client: Redis, namespace: str = "nysc_admin:"):
        self.client = client
        self.namespace = namespace

    @classmethod
    def from_url(cls, redis_url: str, namespace: str = "nysc_admin:") -> "RedisKeyValueStore":
        client = from_url(redis_url, encoding="utf-8", decode_responses=True)
        return cls(client, namespace)

    def _key(self, key: str) -> str:
        return f"{self.namespace}{key}"

    async def get(self, key: str, default: Any = None) -> Any:
        raw: Optional[str] = await self.client.get(self._key(key))
        if raw is None:
            return default
        return json.loads(raw)

    async def put(self, key: str, value: Any, ttl_seconds: int) -> None:
        await self.client.setex(self._key(key), int(ttl_seconds), json.dumps(value, default=str))

    async def forget(self, key: str) -> bool:
        return bool(await self.client.delete(self._key(key)))

    async def keys(self, prefix: str = "") -> List[str]:
        found = []
        async for full_key in self.client.scan_iter(match=f"{self._key(prefix)}*"):
            found.append(full_key[len(self.namespace):])
        return found

    async def flush(self) -> None:
        """Delete every key in this store's namespace"""
        keys = [self._key(key) for key in await self.keys()]
        if keys:
            await self.client.delete(*keys)
        logger.info(f"Flushed {len(keys)} keys from {self.namespace}*")

    async def get_many(self, keys: List[str]) -> List[Optional[Any]]:
        if not keys:
            return []
        raw_values = await self.client.mget([self._key(key) for key in keys])
        return [json.loads(raw) if raw is not None else None for raw in raw_values]

    async def close(self) -> None:
        await self.client.close()
