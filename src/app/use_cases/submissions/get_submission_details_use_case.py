from libs.result import Result, Error, Return
from src.app.services.unit_of_work import UnitOfWork
from .dtos import SubmissionDetailsDTO, SubmissionDTO


class GetSubmissionDetailsUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, submission_id: int) -> Result[SubmissionDetailsDTO]:
        async with self.uow:
            submission = await self.uow.submissions.get_by_id(submission_id)
            if submission is None:
                return Return.err(Error(code="NOT_FOUND", message="Submission not found"))

            students = await self.uow.students.get_by_ids([submission.student_id])

        student = students[0] if students else None
        return Return.ok(SubmissionDetailsDTO(submission=SubmissionDTO.from_submission(submission, student)))
