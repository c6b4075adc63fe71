from libs.result import Result, Error, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.audit_service import AuditService
from src.app.services.role_resolver import RoleResolver
from .dtos import DeleteAdminUserCommand, DeleteAdminUserResponseDTO


class DeleteAdminUserUseCase:
    """Use case for deleting an admin user and their role override"""

    def __init__(self, uow: UnitOfWork, role_resolver: RoleResolver, audit_service: AuditService):
        self.uow = uow
        self.role_resolver = role_resolver
        self.audit_service = audit_service

    async def execute(self, command: DeleteAdminUserCommand) -> Result[DeleteAdminUserResponseDTO]:
        async with self.uow:
            staff = await self.uow.staff.get_by_id(command.staff_id)
            if staff is None:
                return Return.err(Error(code="NOT_FOUND", message="Admin user not found"))

            if self.role_resolver.is_protected(staff.id):
                return Return.err(Error(code="FORBIDDEN", message="Cannot delete the super admin"))

            await self.uow.staff.delete(staff)
            await self.uow.commit()

        await self.role_resolver.forget_role(command.staff_id)

        await self.audit_service.log_event(
            event_type="admin_user_deleted",
            actor_id=command.actor_id,
            resource_type="admin_user",
            resource_id=str(command.staff_id),
            metadata={"email": staff.email},
        )

        return Return.ok(DeleteAdminUserResponseDTO())
