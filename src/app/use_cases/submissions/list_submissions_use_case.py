import math
from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from .dtos import ListSubmissionsQuery, SubmissionDTO, SubmissionListDTO


class ListSubmissionsUseCase:
    """Use case for the paginated review queue of temp submissions"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, query: ListSubmissionsQuery) -> Result[SubmissionListDTO]:
        async with self.uow:
            submissions, total = await self.uow.submissions.list_paginated(
                offset=(query.page - 1) * query.limit, limit=query.limit
            )
            student_ids = list({submission.student_id for submission in submissions})
            students = {student.id: student for student in await self.uow.students.get_by_ids(student_ids)}

        return Return.ok(
            SubmissionListDTO(
                submissions=[
                    SubmissionDTO.from_submission(submission, students.get(submission.student_id))
                    for submission in submissions
                ],
                total=total,
                current_page=query.page,
                last_page=max(1, math.ceil(total / query.limit)),
            )
        )
