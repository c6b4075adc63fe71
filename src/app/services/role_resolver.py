"""Role & Permission Resolver

Role overrides assigned by operators are kept in the key-value store; staff
without one fall back to the id-based defaults.
"""
import logging
from typing import Optional
from src.app.services.key_value_store import KeyValueStore
from src.domain.admin_role import (
    SUPER_ADMIN_STAFF_ID,
    PermissionSet,
    permissions_for,
    role_from_staff_id,
)

logger = logging.getLogger(__name__)

ONE_YEAR_SECONDS = 365 * 24 * 3600


class RoleResolver:
    def __init__(
        self,
        store: KeyValueStore,
        override_ttl_seconds: int = ONE_YEAR_SECONDS,
        super_admin_id: int = SUPER_ADMIN_STAFF_ID,
    ):
        self.store = store
        self.override_ttl_seconds = override_ttl_seconds
        self.super_admin_id = super_admin_id

    @staticmethod
    def override_key(staff_id: int) -> str:
        return f"user_role_{staff_id}"

    async def resolve_role(self, staff_id: int) -> str:
        """
        Resolve the role of a staff member

        An override is returned as stored, without checking it against the
        known roles.
        """
        override: Optional[str] = await self.store.get(self.override_key(staff_id))
        if override:
            return override
        return role_from_staff_id(int(staff_id), self.super_admin_id)

    def permissions_for(self, role: Optional[str]) -> PermissionSet:
        return permissions_for(role)

    async def resolve_permissions(self, staff_id: int) -> PermissionSet:
        return permissions_for(await self.resolve_role(staff_id))

    async def assign_role(self, staff_id: int, role: str) -> None:
        await self.store.put(self.override_key(staff_id), role, self.override_ttl_seconds)
        logger.info(f"Role override for staff {staff_id} set to {role}")

    async def forget_role(self, staff_id: int) -> None:
        await self.store.forget(self.override_key(staff_id))

    def is_protected(self, staff_id: int) -> bool:
        """The designated super admin can never be deleted"""
        return int(staff_id) == self.super_admin_id
