"""Export API Routes

Create, list, inspect and download export jobs.
"""
from fastapi import APIRouter, Depends, Response, status
from config import ApplicationConfig
from src.api.error import http_error_for
from src.app.repositories.export_job_repository import IExportJobRepository
from src.app.services.file_storage import FileStorage
from src.app.services.unit_of_work import UnitOfWork
from src.depends import (
    get_unit_of_work,
    get_file_storage,
    get_export_job_repository,
    require_permission,
)
from src.app.use_cases.exports import (
    CreateExportJobUseCase,
    ListExportJobsUseCase,
    GetExportJobStatusUseCase,
    DownloadExportFileUseCase,
    CreateExportJobRequest,
    CreateExportJobCommand,
    CreateExportJobResponseDTO,
    ExportJobListDTO,
    ExportJobStatusDTO,
)

router = APIRouter()


def download_url_template() -> str:
    return f"{ApplicationConfig.API_PREFIX}/nysc/admin/export-jobs/{{job_id}}/download"


@router.post(
    "/export-jobs",
    response_model=CreateExportJobResponseDTO,
    status_code=status.HTTP_200_OK
)
async def create_export_job(
    request: CreateExportJobRequest,
    current_user: dict = Depends(require_permission("canDownloadData")),
    uow: UnitOfWork = Depends(get_unit_of_work),
    job_repository: IExportJobRepository = Depends(get_export_job_repository),
    file_storage: FileStorage = Depends(get_file_storage),
):
    """
    Create an export job

    The file is generated before the response is sent; poll the status
    endpoint or use the returned job id to download it.
    """
    use_case = CreateExportJobUseCase(uow, job_repository, file_storage, download_url_template())
    result = await use_case.execute(
        CreateExportJobCommand(
            type=request.type,
            format=request.format,
            filters=request.filters,
            requested_by=current_user.get("user_id"),
        )
    )

    if result.is_err():
        raise http_error_for(result.error)

    return result.value


@router.get("/export-jobs", response_model=ExportJobListDTO)
async def list_export_jobs(
    current_user: dict = Depends(require_permission("canDownloadData")),
    job_repository: IExportJobRepository = Depends(get_export_job_repository),
):
    result = await ListExportJobsUseCase(job_repository).execute()
    return result.value


@router.get("/export-jobs/{job_id}", response_model=ExportJobStatusDTO)
async def get_export_job_status(
    job_id: str,
    current_user: dict = Depends(require_permission("canDownloadData")),
    job_repository: IExportJobRepository = Depends(get_export_job_repository),
):
    """Current status of an export job, with its download URL once completed"""
    result = await GetExportJobStatusUseCase(job_repository).execute(job_id)

    if result.is_err():
        raise http_error_for(result.error)

    return result.value


@router.get("/export-jobs/{job_id}/download")
async def download_export_file(
    job_id: str,
    current_user: dict = Depends(require_permission("canDownloadData")),
    job_repository: IExportJobRepository = Depends(get_export_job_repository),
    file_storage: FileStorage = Depends(get_file_storage),
):
    result = await DownloadExportFileUseCase(job_repository, file_storage).execute(job_id)

    if result.is_err():
        raise http_error_for(result.error)

    export_file = result.value
    return Response(
        content=export_file.content,
        media_type=export_file.media_type,
        headers={"Content-Disposition": f'attachment; filename="{export_file.file_name}"'},
    )
