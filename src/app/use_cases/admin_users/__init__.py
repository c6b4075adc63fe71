from .dtos import (
    AdminUserDTO,
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
from .list_admin_users_use_case import ListAdminUsersUseCase
from .create_admin_user_use_case import CreateAdminUserUseCase
from .update_admin_user_use_case import UpdateAdminUserUseCase
from .delete_admin_user_use_case import DeleteAdminUserUseCase

__all__ = [
    "AdminUserDTO",
    "ListAdminUsersQuery",
    "AdminUserListDTO",
    "CreateAdminUserRequest",
    "CreateAdminUserCommand",
    "UpdateAdminUserRequest",
    "UpdateAdminUserCommand",
    "AdminUserResponseDTO",
    "DeleteAdminUserCommand",
    "DeleteAdminUserResponseDTO",
    "ListAdminUsersUseCase",
    "CreateAdminUserUseCase",
    "UpdateAdminUserUseCase",
    "DeleteAdminUserUseCase",
]
