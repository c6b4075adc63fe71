import logging
from typing import Optional
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from motor.motor_asyncio import AsyncIOMotorClient
from config import ApplicationConfig
from libs.result import Error
from src.adapter.repositories.export_job_repository import KeyValueExportJobRepository
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.adapter.services.audit_service import MongoAuditService
from src.adapter.services.local_file_storage import LocalFileStorage
from src.adapter.services.redis_key_value_store import RedisKeyValueStore
from src.adapter.services.in_memory_key_value_store import InMemoryKeyValueStore
from src.adapter.services.bcrypt_password_hasher import BcryptPasswordHasher
from src.api.error import ClientError
from src.api.utils.jwt import verify_jwt
from src.app.repositories.export_job_repository import IExportJobRepository
from src.app.services.audit_service import AuditService
from src.app.services.file_storage import FileStorage
from src.app.services.key_value_store import KeyValueStore
from src.app.services.password_hasher import PasswordHasher
from src.app.services.role_resolver import RoleResolver
from src.app.services.settings_service import SettingsService

logger = logging.getLogger(__name__)

# PostgreSQL engine
engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

# MongoDB client
mongo_client = AsyncIOMotorClient(ApplicationConfig.MONGODB_URI)

# Shared by every request so job records and settings outlive a request
_key_value_store: Optional[KeyValueStore] = None


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


async def get_audit_service() -> AuditService:
    return MongoAuditService(mongo_client, ApplicationConfig.MONGODB_DB_NAME)


def get_key_value_store() -> KeyValueStore:
    """Redis store by default; CACHE_BACKEND=memory keeps everything in process"""
    global _key_value_store
    if _key_value_store is None:
        if ApplicationConfig.CACHE_BACKEND == "memory":
            _key_value_store = InMemoryKeyValueStore()
        else:
            _key_value_store = RedisKeyValueStore.from_url(ApplicationConfig.REDIS_URL)
    return _key_value_store


def get_file_storage() -> FileStorage:
    return LocalFileStorage(base_path=ApplicationConfig.FILE_STORAGE_PATH)


def get_password_hasher() -> PasswordHasher:
    return BcryptPasswordHasher()


def get_export_job_repository(
    store: KeyValueStore = Depends(get_key_value_store),
) -> IExportJobRepository:
    return KeyValueExportJobRepository(store, ttl_seconds=ApplicationConfig.EXPORT_JOB_TTL_SECONDS)


def get_role_resolver(store: KeyValueStore = Depends(get_key_value_store)) -> RoleResolver:
    return RoleResolver(
        store,
        override_ttl_seconds=ApplicationConfig.SETTINGS_TTL_SECONDS,
        super_admin_id=ApplicationConfig.SUPER_ADMIN_STAFF_ID,
    )


def get_settings_service(store: KeyValueStore = Depends(get_key_value_store)) -> SettingsService:
    return SettingsService(store, ttl_seconds=ApplicationConfig.SETTINGS_TTL_SECONDS)


# Security
security = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> dict:
    """
    Dependency to extract and validate JWT token from Authorization header

    Returns:
        dict: Decoded JWT payload; user_id is the staff id

    Raises:
        HTTPException: 401 if token is missing or invalid
    """
    if ApplicationConfig.AUTH_DISABLED:
        # For testing/development - act as the designated super admin
        return {"user_id": str(ApplicationConfig.SUPER_ADMIN_STAFF_ID)}

    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="No authorization header",
            headers={"WWW-Authenticate": "Bearer"},
        )

    payload = verify_jwt(credentials.credentials)

    if payload is None or payload.get("user_id") is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
            headers={"WWW-Authenticate": "Bearer"},
        )

    return payload


def require_permission(permission: str):
    """
    Build a dependency that admits the current user only when their resolved
    role grants `permission`

    Raises:
        ClientError: 403 INSUFFICIENT_PERMISSIONS otherwise
    """

    async def check_permission(
        current_user: dict = Depends(get_current_user),
        role_resolver: RoleResolver = Depends(get_role_resolver),
    ) -> dict:
        denied = Error(
            code="INSUFFICIENT_PERMISSIONS",
            message=f"You do not have permission to perform this action ({permission})",
        )
        try:
            staff_id = int(current_user["user_id"])
        except (KeyError, TypeError, ValueError):
            raise ClientError(denied, status_code=status.HTTP_403_FORBIDDEN)

        permissions = await role_resolver.resolve_permissions(staff_id)
        if not permissions.allows(permission):
            logger.warning(f"Staff {staff_id} denied {permission}")
            raise ClientError(denied, status_code=status.HTTP_403_FORBIDDEN)

        return current_user

    return check_permission
