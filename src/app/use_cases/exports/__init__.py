from .dtos import (
    CreateExportJobRequest,
    CreateExportJobCommand,
    CreateExportJobResponseDTO,
    ExportJobDTO,
    ExportJobStatusDTO,
    ExportJobListDTO,
    ExportFileDTO,
)
from .create_export_job_use_case import CreateExportJobUseCase
from .get_export_job_status_use_case import GetExportJobStatusUseCase
from .list_export_jobs_use_case import ListExportJobsUseCase
from .download_export_file_use_case import DownloadExportFileUseCase

__all__ = [
    "CreateExportJobRequest",
    "CreateExportJobCommand",
    "CreateExportJobResponseDTO",
    "ExportJobDTO",
    "ExportJobStatusDTO",
    "ExportJobListDTO",
    "ExportFileDTO",
    "CreateExportJobUseCase",
    "GetExportJobStatusUseCase",
    "ListExportJobsUseCase",
    "DownloadExportFileUseCase",
]
