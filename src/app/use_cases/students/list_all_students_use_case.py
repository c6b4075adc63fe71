from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from .dtos import AllStudentsDTO, StudentSummaryDTO


class ListAllStudentsUseCase:
    """Use case for the unpaginated list of every NYSC record"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> Result[AllStudentsDTO]:
        async with self.uow:
            records = await self.uow.student_nysc.list_all()

        data = [StudentSummaryDTO.from_record(record) for record in records]
        return Return.ok(AllStudentsDTO(data=data, total=len(data)))
