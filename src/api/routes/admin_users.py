"""Admin User API Routes

Role management: list, create, update and delete staff accounts.
"""
from typing import Optional
from fastapi import APIRouter, Depends, status
from src.api.error import http_error_for
from src.app.services.audit_service import AuditService
from src.app.services.password_hasher import PasswordHasher
from src.app.services.role_resolver import RoleResolver
from src.app.services.unit_of_work import UnitOfWork
from src.depends import (
    get_unit_of_work,
    get_audit_service,
    get_password_hasher,
    get_role_resolver,
    get_current_user,
    require_permission,
)
from src.app.use_cases.admin_users import (
    ListAdminUsersUseCase,
    CreateAdminUserUseCase,
    UpdateAdminUserUseCase,
    DeleteAdminUserUseCase,
    ListAdminUsersQuery,
    AdminUserListDTO,
    CreateAdminUserRequest,
    CreateAdminUserCommand,
    UpdateAdminUserRequest,
    UpdateAdminUserCommand,
    AdminUserResponseDTO,
    DeleteAdminUserCommand,
    DeleteAdminUserResponseDTO,
)

router = APIRouter()


@router.get("/admin-users", response_model=AdminUserListDTO)
async def list_admin_users(
    search: Optional[str] = None,
    status: Optional[str] = None,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    role_resolver: RoleResolver = Depends(get_role_resolver),
):
    """List staff with their resolved role and permissions"""
    use_case = ListAdminUsersUseCase(uow, role_resolver)
    result = await use_case.execute(ListAdminUsersQuery(search=search, status=status))
    return result.value


@router.post(
    "/admin-users",
    response_model=AdminUserResponseDTO,
    status_code=status.HTTP_201_CREATED
)
async def create_admin_user(
    request: CreateAdminUserRequest,
    current_user: dict = Depends(require_permission("canAssignRoles")),
    uow: UnitOfWork = Depends(get_unit_of_work),
    role_resolver: RoleResolver = Depends(get_role_resolver),
    password_hasher: PasswordHasher = Depends(get_password_hasher),
    audit_service: AuditService = Depends(get_audit_service),
):
    use_case = CreateAdminUserUseCase(uow, role_resolver, password_hasher, audit_service)
    result = await use_case.execute(
        CreateAdminUserCommand(**request.model_dump(), actor_id=current_user["user_id"])
    )

    if result.is_err():
        raise http_error_for(result.error)

    return result.value


@router.put("/admin-users/{staff_id}", response_model=AdminUserResponseDTO)
async def update_admin_user(
    staff_id: int,
    request: UpdateAdminUserRequest,
    current_user: dict = Depends(require_permission("canAssignRoles")),
    uow: UnitOfWork = Depends(get_unit_of_work),
    role_resolver: RoleResolver = Depends(get_role_resolver),
    password_hasher: PasswordHasher = Depends(get_password_hasher),
    audit_service: AuditService = Depends(get_audit_service),
):
    """Partial update; an empty password keeps the current one"""
    use_case = UpdateAdminUserUseCase(uow, role_resolver, password_hasher, audit_service)
    result = await use_case.execute(
        UpdateAdminUserCommand(
            **request.model_dump(),
            staff_id=staff_id,
            actor_id=current_user["user_id"],
        )
    )

    if result.is_err():
        raise http_error_for(result.error)

    return result.value


@router.delete("/admin-users/{staff_id}", response_model=DeleteAdminUserResponseDTO)
async def delete_admin_user(
    staff_id: int,
    current_user: dict = Depends(require_permission("canAssignRoles")),
    uow: UnitOfWork = Depends(get_unit_of_work),
    role_resolver: RoleResolver = Depends(get_role_resolver),
    audit_service: AuditService = Depends(get_audit_service),
):
    use_case = DeleteAdminUserUseCase(uow, role_resolver, audit_service)
    result = await use_case.execute(
        DeleteAdminUserCommand(staff_id=staff_id, actor_id=current_user["user_id"])
    )

    if result.is_err():
        raise http_error_for(result.error)

    return result.value
