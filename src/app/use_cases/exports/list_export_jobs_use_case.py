from libs.result import Result, Return
from src.app.repositories.export_job_repository import IExportJobRepository
from .dtos import ExportJobDTO, ExportJobListDTO


class ListExportJobsUseCase:
    """Use case: list every live export job, newest first"""

    def __init__(self, job_repository: IExportJobRepository):
        self.job_repository = job_repository

    async def execute(self) -> Result[ExportJobListDTO]:
        jobs = await self.job_repository.list_all()
        return Return.ok(ExportJobListDTO(jobs=[ExportJobDTO.from_job(job) for job in jobs]))
