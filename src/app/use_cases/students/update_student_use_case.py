from libs.result import Result, Error, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.audit_service import AuditService
from .dtos import UpdateStudentCommand, UpdateStudentResponseDTO


class UpdateStudentUseCase:
    """Use case for an admin correcting a student's NYSC record"""

    def __init__(self, uow: UnitOfWork, audit_service: AuditService):
        self.uow = uow
        self.audit_service = audit_service

    async def execute(self, command: UpdateStudentCommand) -> Result[UpdateStudentResponseDTO]:
        async with self.uow:
            record = await self.uow.student_nysc.get_by_student_id(command.student_id)
            if record is None:
                return Return.err(Error(code="NOT_FOUND", message="Student record not found."))

            record.apply_changes(command.changes)
            updated_record = await self.uow.student_nysc.update(record)
            await self.uow.commit()

        await self.audit_service.log_event(
            event_type="student_nysc_updated",
            actor_id=command.actor_id,
            resource_type="student_nysc",
            resource_id=str(updated_record.student_id),
            metadata={"updated_fields": sorted(command.changes)},
        )

        return Return.ok(UpdateStudentResponseDTO(data=updated_record.model_dump()))
