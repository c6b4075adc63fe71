"""Export DTOs

Data Transfer Objects for the export job endpoints.
"""
from datetime import datetime
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field
from src.domain import ExportFilter, ExportJob


class CreateExportJobRequest(BaseModel):
    """Request DTO for creating an export job (API layer)"""

    type: str
    format: str
    filters: ExportFilter = Field(default_factory=ExportFilter)


class CreateExportJobCommand(BaseModel):
    """Command DTO for creating an export job (use case layer)"""

    type: str
    format: str
    filters: ExportFilter = Field(default_factory=ExportFilter)
    requested_by: Optional[str] = None


class CreateExportJobResponseDTO(BaseModel):
    """Response DTO for creating an export job"""

    success: bool = True
    job_id: str
    message: str = "Export job created successfully"


class ExportJobDTO(BaseModel):
    """Export job as returned by the list and status endpoints"""

    id: str
    type: str
    format: str
    filters: Dict[str, Any]
    status: str
    progress: int
    record_count: Optional[int] = None
    file_name: Optional[str] = None
    download_url: Optional[str] = None
    error_message: Optional[str] = None
    created_at: datetime
    completed_at: Optional[datetime] = None

    @classmethod
    def from_job(cls, job: ExportJob) -> "ExportJobDTO":
        return cls(
            id=job.id,
            type=job.type.value,
            format=job.format.value,
            filters=job.filters.model_dump(mode="json", by_alias=True, exclude_none=True),
            status=job.status.value,
            progress=job.progress,
            record_count=job.record_count,
            file_name=job.file_name,
            download_url=job.download_url,
            error_message=job.error_message,
            created_at=job.created_at,
            completed_at=job.completed_at,
        )


class ExportJobStatusDTO(BaseModel):
    """Response DTO for export job status"""

    success: bool = True
    job: ExportJobDTO


class ExportJobListDTO(BaseModel):
    """Response DTO for listing export jobs"""

    success: bool = True
    jobs: List[ExportJobDTO]


class ExportFileDTO(BaseModel):
    """Generated export file ready to be streamed"""

    file_name: str
    media_type: str
    content: bytes
