from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.role_resolver import RoleResolver
from .dtos import AdminUserDTO, AdminUserListDTO, ListAdminUsersQuery


class ListAdminUsersUseCase:
    """Use case for listing admin users with their resolved roles"""

    def __init__(self, uow: UnitOfWork, role_resolver: RoleResolver):
        self.uow = uow
        self.role_resolver = role_resolver

    async def execute(self, query: ListAdminUsersQuery) -> Result[AdminUserListDTO]:
        async with self.uow:
            staff_members = await self.uow.staff.search(search=query.search, status=query.status)

        users = []
        for staff in staff_members:
            role = await self.role_resolver.resolve_role(staff.id)
            users.append(AdminUserDTO.from_staff(staff, role, self.role_resolver.permissions_for(role)))

        return Return.ok(AdminUserListDTO(users=users))
