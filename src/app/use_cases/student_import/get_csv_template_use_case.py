from libs.result import Result, Return
from src.app.services.student_csv import build_template
from .dtos import CsvTemplateDTO


class GetCsvTemplateUseCase:
    """Use case: header row plus one sample row for the student import"""

    async def execute(self) -> Result[CsvTemplateDTO]:
        return Return.ok(CsvTemplateDTO(content=build_template()))
