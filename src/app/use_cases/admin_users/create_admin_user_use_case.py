from libs.result import Result, Error, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.audit_service import AuditService
from src.app.services.password_hasher import PasswordHasher
from src.app.services.role_resolver import RoleResolver
from src.domain import Staff
from .dtos import AdminUserDTO, AdminUserResponseDTO, CreateAdminUserCommand
from .validation import validate_admin_user_fields


class CreateAdminUserUseCase:
    """Use case for creating a staff account with an assigned role"""

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

    async def execute(self, command: CreateAdminUserCommand) -> Result[AdminUserResponseDTO]:
        """
        Execute the create admin user use case

        Returns:
            Result[AdminUserResponseDTO]: Success with the new user or VALIDATION_ERROR
        """
        for field_name in ("fname", "lname", "email", "password", "role", "status"):
            if not getattr(command, field_name):
                return Return.err(Error(code="VALIDATION_ERROR", message=f"The {field_name} field is required"))

        error = validate_admin_user_fields(
            fname=command.fname,
            lname=command.lname,
            password=command.password,
            role=command.role,
            status=command.status,
        )
        if error:
            return Return.err(error)

        async with self.uow:
            if await self.uow.staff.get_by_email(command.email):
                return Return.err(Error(code="VALIDATION_ERROR", message="The email has already been taken"))

            staff = Staff(
                fname=command.fname.strip(),
                lname=command.lname.strip(),
                email=command.email,
                password=self.password_hasher.hash(command.password),
                status=command.status,
            )
            created_staff = await self.uow.staff.create(staff)
            await self.uow.commit()

        await self.role_resolver.assign_role(created_staff.id, command.role)

        await self.audit_service.log_event(
            event_type="admin_user_created",
            actor_id=command.actor_id,
            resource_type="admin_user",
            resource_id=str(created_staff.id),
            metadata={"email": created_staff.email, "role": command.role},
        )

        user = AdminUserDTO.from_staff(
            created_staff, command.role, self.role_resolver.permissions_for(command.role)
        )
        return Return.ok(AdminUserResponseDTO(message="Admin user created successfully", user=user))
