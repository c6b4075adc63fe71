"""ExportJob value objects

Export jobs are kept in the key-value store rather than in SQL, so they are
plain pydantic models instead of tables.
"""
from datetime import date, datetime
from typing import List, Optional
from uuid import uuid4
from pydantic import BaseModel, ConfigDict, Field
from src.domain.enums import ExportFormat, ExportJobStatus, ExportType


def generate_job_id() -> str:
    return f"export_{uuid4().hex}"


class DateRange(BaseModel):
    start: Optional[date] = None
    end: Optional[date] = None

    def is_complete(self) -> bool:
        """A range only constrains results when both bounds are given"""
        return self.start is not None and self.end is not None


class ExportFilter(BaseModel):
    """Optional constraints for an export. Missing or empty means no constraint."""

    model_config = ConfigDict(populate_by_name=True)

    department: Optional[str] = None
    gender: Optional[str] = None
    state: Optional[str] = None
    payment_status: Optional[str] = Field(default=None, alias="paymentStatus")
    matric_numbers: List[str] = Field(default_factory=list, alias="matricNumbers")
    date_range: Optional[DateRange] = Field(default=None, alias="dateRange")

    def effective_date_range(self) -> Optional[DateRange]:
        if self.date_range is not None and self.date_range.is_complete():
            return self.date_range
        return None


class ExportJob(BaseModel):
    """
    ExportJob

    Created in processing state and settled to completed or failed within
    the request that created it.
    """

    id: str = Field(default_factory=generate_job_id)
    type: ExportType
    format: ExportFormat
    filters: ExportFilter = Field(default_factory=ExportFilter)
    status: ExportJobStatus = ExportJobStatus.processing
    progress: int = 0
    record_count: Optional[int] = None
    file_name: Optional[str] = None
    download_url: Optional[str] = None
    error_message: Optional[str] = None
    created_at: datetime = Field(default_factory=datetime.utcnow)
    completed_at: Optional[datetime] = None

    def complete(self, record_count: int, file_name: str, download_url: str) -> None:
        """Mark job as completed with its generated file"""
        self.status = ExportJobStatus.completed
        self.progress = 100
        self.record_count = record_count
        self.file_name = file_name
        self.download_url = download_url
        self.completed_at = datetime.utcnow()

    def fail(self, error_message: str) -> None:
        """Mark job as failed with error message"""
        self.status = ExportJobStatus.failed
        self.error_message = error_message
        self.completed_at = datetime.utcnow()

    def is_completed(self) -> bool:
        return self.status == ExportJobStatus.completed
