"""Admin roles and their permission sets"""
from typing import Optional
from pydantic import BaseModel
from src.domain.enums import AdminRole

SUPER_ADMIN_STAFF_ID = 596

ADMIN_ID_RANGE = range(500, 600)
SUB_ADMIN_ID_RANGE = range(400, 500)


class PermissionSet(BaseModel):
    """Flags consumed by the admin UI, serialized with their camelCase names"""

    canViewStudentNysc: bool
    canEditStudentNysc: bool
    canAddStudentNysc: bool
    canDeleteStudentNysc: bool
    canViewPayments: bool
    canEditPayments: bool
    canViewTempSubmissions: bool
    canEditTempSubmissions: bool
    canDownloadData: bool
    canAssignRoles: bool
    canViewAnalytics: bool
    canManageSystem: bool

    def allows(self, permission: str) -> bool:
        return bool(getattr(self, permission, False))


ROLE_PERMISSIONS = {
    AdminRole.super_admin.value: PermissionSet(
        canViewStudentNysc=True,
        canEditStudentNysc=True,
        canAddStudentNysc=True,
        canDeleteStudentNysc=True,
        canViewPayments=True,
        canEditPayments=True,
        canViewTempSubmissions=True,
        canEditTempSubmissions=True,
        canDownloadData=True,
        canAssignRoles=True,
        canViewAnalytics=True,
        canManageSystem=True,
    ),
    AdminRole.admin.value: PermissionSet(
        canViewStudentNysc=True,
        canEditStudentNysc=True,
        canAddStudentNysc=True,
        canDeleteStudentNysc=True,
        canViewPayments=True,
        canEditPayments=True,
        canViewTempSubmissions=True,
        canEditTempSubmissions=True,
        canDownloadData=True,
        canAssignRoles=False,
        canViewAnalytics=True,
        canManageSystem=True,
    ),
    AdminRole.sub_admin.value: PermissionSet(
        canViewStudentNysc=True,
        canEditStudentNysc=True,
        canAddStudentNysc=True,
        canDeleteStudentNysc=False,
        canViewPayments=True,
        canEditPayments=False,
        canViewTempSubmissions=True,
        canEditTempSubmissions=True,
        canDownloadData=True,
        canAssignRoles=False,
        canViewAnalytics=True,
        canManageSystem=False,
    ),
    AdminRole.manager.value: PermissionSet(
        canViewStudentNysc=True,
        canEditStudentNysc=False,
        canAddStudentNysc=False,
        canDeleteStudentNysc=False,
        canViewPayments=True,
        canEditPayments=False,
        canViewTempSubmissions=True,
        canEditTempSubmissions=False,
        canDownloadData=True,
        canAssignRoles=False,
        canViewAnalytics=True,
        canManageSystem=False,
    ),
}


def role_from_staff_id(staff_id: int, super_admin_id: int = SUPER_ADMIN_STAFF_ID) -> str:
    """Default role for a staff id when no override has been assigned"""
    if staff_id == super_admin_id:
        return AdminRole.super_admin.value
    if staff_id in ADMIN_ID_RANGE:
        return AdminRole.admin.value
    if staff_id in SUB_ADMIN_ID_RANGE:
        return AdminRole.sub_admin.value
    return AdminRole.manager.value


def permissions_for(role: Optional[str]) -> PermissionSet:
    """Unknown roles get the manager set"""
    return ROLE_PERMISSIONS.get(role, ROLE_PERMISSIONS[AdminRole.manager.value]).model_copy()
