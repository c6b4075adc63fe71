from libs.result import Result, Error, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.audit_service import AuditService
from .dtos import UpdateSubmissionStatusCommand, UpdateSubmissionStatusResponseDTO


class UpdateSubmissionStatusUseCase:
    """Use case for approving or rejecting a temp submission"""

    def __init__(self, uow: UnitOfWork, audit_service: AuditService):
        self.uow = uow
        self.audit_service = audit_service

    async def execute(self, command: UpdateSubmissionStatusCommand) -> Result[UpdateSubmissionStatusResponseDTO]:
        async with self.uow:
            submission = await self.uow.submissions.get_by_id(command.submission_id)
            if submission is None:
                return Return.err(Error(code="NOT_FOUND", message="Submission not found"))

            submission.review(command.status, reviewer=command.actor_id, notes=command.notes)
            await self.uow.submissions.update(submission)
            await self.uow.commit()

        await self.audit_service.log_event(
            event_type="submission_reviewed",
            actor_id=command.actor_id,
            resource_type="temp_submission",
            resource_id=str(command.submission_id),
            metadata={"status": command.status.value},
        )

        return Return.ok(UpdateSubmissionStatusResponseDTO())
