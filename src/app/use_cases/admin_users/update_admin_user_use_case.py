from datetime import datetime
from libs.result import Result, Error, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.audit_service import AuditService
from src.app.services.password_hasher import PasswordHasher
from src.app.services.role_resolver import RoleResolver
from .dtos import AdminUserDTO, AdminUserResponseDTO, UpdateAdminUserCommand
from .validation import validate_admin_user_fields


class UpdateAdminUserUseCase:
    """Use case for updating an admin user's profile, password or role"""

    def __init__(
        self,
        uow: UnitOfWork,
        role_resolver: RoleResolver,
        password_hasher: PasswordHasher,
        audit_service: AuditService,
    ):
        self.uow = uow
        self.role_resolver = role_resolver
        self.password_hasher = password_hasher
        self.audit_service = audit_service

    async def execute(self, command: UpdateAdminUserCommand) -> Result[AdminUserResponseDTO]:
        """
        Execute the update admin user use case

        An empty or missing password leaves the stored hash untouched.

        Returns:
            Result[AdminUserResponseDTO]: Success with the updated user or error
        """
        password = command.password or None

        error = validate_admin_user_fields(
            fname=command.fname,
            lname=command.lname,
            password=password,
            role=command.role,
            status=command.status,
        )
        if error:
            return Return.err(error)

        async with self.uow:
            staff = await self.uow.staff.get_by_id(command.staff_id)
            if staff is None:
                return Return.err(Error(code="NOT_FOUND", message="Admin user not found"))

            if command.email is not None and command.email != staff.email:
                existing = await self.uow.staff.get_by_email(command.email)
                if existing and existing.id != staff.id:
                    return Return.err(Error(code="VALIDATION_ERROR", message="The email has already been taken"))
                staff.email = command.email

            if command.fname is not None:
                staff.fname = command.fname.strip()
            if command.lname is not None:
                staff.lname = command.lname.strip()
            if command.status is not None:
                staff.status = command.status
            if password:
                staff.password = self.password_hasher.hash(password)

            staff.updated_at = datetime.utcnow()
            updated_staff = await self.uow.staff.update(staff)
            await self.uow.commit()

        if command.role is not None:
            await self.role_resolver.assign_role(updated_staff.id, command.role)
            role = command.role
        else:
            role = await self.role_resolver.resolve_role(updated_staff.id)

        await self.audit_service.log_event(
            event_type="admin_user_updated",
            actor_id=command.actor_id,
            resource_type="admin_user",
            resource_id=str(updated_staff.id),
            metadata={
                "updated_fields": sorted(
                    field_name
                    for field_name in ("fname", "lname", "email", "role", "status")
                    if getattr(command, field_name) is not None
                ),
                "password_changed": bool(password),
            },
        )

        user = AdminUserDTO.from_staff(updated_staff, role, self.role_resolver.permissions_for(role))
        return Return.ok(AdminUserResponseDTO(message="Admin user updated successfully", user=user))
