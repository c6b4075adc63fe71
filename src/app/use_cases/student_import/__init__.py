from .dtos import (
    ImportStudentsCsvCommand,
    ImportStatisticsDTO,
    ImportStudentsCsvResponseDTO,
    CsvTemplateDTO,
)
from .import_students_csv_use_case import ImportStudentsCsvUseCase
from .get_csv_template_use_case import GetCsvTemplateUseCase

__all__ = [
    "ImportStudentsCsvCommand",
    "ImportStatisticsDTO",
    "ImportStudentsCsvResponseDTO",
    "CsvTemplateDTO",
    "ImportStudentsCsvUseCase",
    "GetCsvTemplateUseCase",
]
