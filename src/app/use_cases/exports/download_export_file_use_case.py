"""Download Export File Use Case

Serves the generated file of a completed export job.
"""
from libs.result import Result, Error, Return
from src.app.repositories.export_job_repository import IExportJobRepository
from src.app.services.export_renderer import media_type_for
from src.app.services.file_storage import FileStorage
from .create_export_job_use_case import export_file_path
from .dtos import ExportFileDTO


class DownloadExportFileUseCase:
    """
    Use case: Download Export File

    Fails with NOT_FOUND when the job is unknown, not completed, or its file
    is missing from storage.
    """

    def __init__(self, job_repository: IExportJobRepository, file_storage: FileStorage):
        self.job_repository = job_repository
        self.file_storage = file_storage

    async def execute(self, job_id: str) -> Result[ExportFileDTO]:
        export_job = await self.job_repository.get_by_id(job_id)
        if not export_job or not export_job.is_completed() or not export_job.file_name:
            return Return.err(Error(
                code="NOT_FOUND",
                message="Export job not found or not completed"
            ))

        content = await self.file_storage.read(export_file_path(export_job.file_name))
        if content is None:
            return Return.err(Error(
                code="NOT_FOUND",
                message="Export file not found"
            ))

        return Return.ok(ExportFileDTO(
            file_name=export_job.file_name,
            media_type=media_type_for(export_job.format),
            content=content,
        ))
