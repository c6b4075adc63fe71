from typing import List
from pydantic import BaseModel


class ImportStudentsCsvCommand(BaseModel):
    """Command DTO for a bulk student import (use case layer)"""

    file_name: str
    content: bytes
    actor_id: str  # For audit logging


class ImportStatisticsDTO(BaseModel):
    total_rows: int
    success_count: int
    error_count: int
    errors: List[str]


class ImportStudentsCsvResponseDTO(BaseModel):
    success: bool = True
    message: str
    statistics: ImportStatisticsDTO


class CsvTemplateDTO(BaseModel):
    file_name: str = "student_import_template.csv"
    media_type: str = "text/csv"
    content: bytes
