from src.adapter.services.audit_service import MongoAuditService
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.adapter.services.local_file_storage import LocalFileStorage
from src.adapter.services.redis_key_value_store import RedisKeyValueStore
from src.adapter.services.in_memory_key_value_store import InMemoryKeyValueStore
from src.adapter.services.bcrypt_password_hasher import BcryptPasswordHasher

__all__ = [
    "MongoAuditService",
    "SqlAlchemyUnitOfWork",
    "LocalFileStorage",
    "RedisKeyValueStore",
    "InMemoryKeyValueStore",
    "BcryptPasswordHasher",
]
