from typing import Dict, List, Optional
from pydantic import BaseModel, EmailStr
from datetime import datetime
from src.domain import Staff, PermissionSet


class AdminUserDTO(BaseModel):
    """Admin user as shown in the role management screen"""

    id: int
    staff_id: int
    name: str
    email: str
    role: str
    permissions: Dict[str, bool]
    status: str
    last_login: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_staff(cls, staff: Staff, role: str, permissions: PermissionSet) -> "AdminUserDTO":
        return cls(
            id=staff.id,
            staff_id=staff.id,
            name=staff.full_name,
            email=staff.email,
            role=role,
            permissions=permissions.model_dump(),
            status=staff.display_status,
            last_login=staff.last_login_at,
            created_at=staff.created_at,
            updated_at=staff.updated_at,
        )


class ListAdminUsersQuery(BaseModel):
    search: Optional[str] = None
    status: Optional[str] = None


class AdminUserListDTO(BaseModel):
    success: bool = True
    users: List[AdminUserDTO]


class CreateAdminUserRequest(BaseModel):
    """Request DTO for creating an admin user (API layer)"""

    fname: str = ""
    lname: str = ""
    email: Optional[EmailStr] = None
    password: str = ""
    role: str = ""
    status: str = ""


class CreateAdminUserCommand(CreateAdminUserRequest):
    """Command DTO for creating an admin user (use case layer)"""

    actor_id: str  # For audit logging


class UpdateAdminUserRequest(BaseModel):
    """Request DTO for updating an admin user, every field optional"""

    fname: Optional[str] = None
    lname: Optional[str] = None
    email: Optional[EmailStr] = None
    password: Optional[str] = None
    role: Optional[str] = None
    status: Optional[str] = None


class UpdateAdminUserCommand(UpdateAdminUserRequest):
    staff_id: int
    actor_id: str  # For audit logging


class AdminUserResponseDTO(BaseModel):
    success: bool = True
    message: str
    user: AdminUserDTO


class DeleteAdminUserCommand(BaseModel):
    staff_id: int
    actor_id: str


class DeleteAdminUserResponseDTO(BaseModel):
    success: bool = True
    message: str = "Admin user deleted successfully"
