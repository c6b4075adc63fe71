"""Get Export Job Status Use Case

Retrieves an export job, including its download URL once completed.
"""
from libs.result import Result, Error, Return
from src.app.repositories.export_job_repository import IExportJobRepository
from .dtos import ExportJobDTO, ExportJobStatusDTO


class GetExportJobStatusUseCase:
    """
    Use case: Get Export Job Status

    Returns the current status of an export job. Expired jobs are reported
    as not found.
    """

    def __init__(self, job_repository: IExportJobRepository):
        self.job_repository = job_repository

    async def execute(self, job_id: str) -> Result[ExportJobStatusDTO]:
        """
        Get the status of an export job

        Args:
            job_id: The export job ID

        Returns:
            Result[ExportJobStatusDTO]: Job status with download URL if complete
        """
        export_job = await self.job_repository.get_by_id(job_id)
        if not export_job:
            return Return.err(Error(
                code="NOT_FOUND",
                message="Export job not found"
            ))

        return Return.ok(ExportJobStatusDTO(job=ExportJobDTO.from_job(export_job)))
