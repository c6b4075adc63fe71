"""Create Export Job Use Case

Creates an export job and generates its file within the same call.
"""
import logging
from libs.result import Result, Error, Return
from src.app.repositories.export_job_repository import IExportJobRepository
from src.app.services.export_data import collect_export_rows
from src.app.services.export_projections import fields_for
from src.app.services.export_renderer import build_file_name, render_export
from src.app.services.file_storage import FileStorage
from src.app.services.unit_of_work import UnitOfWork
from src.domain import ExportFormat, ExportJob, ExportType
from .dtos import CreateExportJobCommand, CreateExportJobResponseDTO

logger = logging.getLogger(__name__)

EXPORT_DIRECTORY = "exports"
DEFAULT_DOWNLOAD_URL = "/api/nysc/admin/export-jobs/{job_id}/download"


def export_file_path(file_name: str) -> str:
    return f"{EXPORT_DIRECTORY}/{file_name}"


class CreateExportJobUseCase:
    """
    Use case: Create Export Job

    1. Validates export type and format
    2. Records the job as processing and registers it in the job index
    3. Fetches, projects and renders the matching rows
    4. Stores the file and settles the job as completed or failed
    """

    def __init__(
        self,
        uow: UnitOfWork,
        job_repository: IExportJobRepository,
        file_storage: FileStorage,
        download_url_template: str = DEFAULT_DOWNLOAD_URL,
    ):
        self.uow = uow
        self.job_repository = job_repository
        self.file_storage = file_storage
        self.download_url_template = download_url_template

    async def execute(self, command: CreateExportJobCommand) -> Result[CreateExportJobResponseDTO]:
        """
        Create and run an export job

        Args:
            command: Export type, format and filters

        Returns:
            Result[CreateExportJobResponseDTO]: The new job id
        """
        try:
            export_type = ExportType(command.type)
        except ValueError:
            return Return.err(Error(
                code="INVALID_EXPORT_TYPE",
                message=f"Invalid export type: {command.type}"
            ))

        try:
            export_format = ExportFormat(command.format)
        except ValueError:
            return Return.err(Error(
                code="UNSUPPORTED_FORMAT",
                message=f"Unsupported export format: {command.format}"
            ))

        export_job = ExportJob(type=export_type, format=export_format, filters=command.filters)
        await self.job_repository.create(export_job)
        logger.info(
            f"Export job {export_job.id} created - type: {export_type.value}, "
            f"format: {export_format.value}, requested by: {command.requested_by}"
        )

        try:
            async with self.uow:
                rows = await collect_export_rows(self.uow, export_type, export_job.filters)

            content = render_export(rows, fields_for(export_type), export_type, export_format)
            file_name = build_file_name(export_type, export_format, export_job.id)
            await self.file_storage.upload(export_file_path(file_name), content)

        except Exception as e:
            logger.error(f"Export job {export_job.id} failed: {type(e).__name__} - {str(e)}")
            export_job.fail(str(e))
            await self.job_repository.update(export_job)

            return Return.err(Error(
                code="EXPORT_GENERATION_FAILED",
                message="Failed to create export job",
                reason=str(e)
            ))

        export_job.complete(
            record_count=len(rows),
            file_name=file_name,
            download_url=self.download_url_template.format(job_id=export_job.id),
        )
        await self.job_repository.update(export_job)
        logger.info(f"Export job {export_job.id} completed with {len(rows)} records")

        return Return.ok(CreateExportJobResponseDTO(job_id=export_job.id))
