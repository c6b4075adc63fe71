"""Import Students CSV Use Case

Bulk creates or updates student directory entries from an uploaded CSV.
"""
import logging
import os
from datetime import datetime
from libs.result import Result, Error, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.audit_service import AuditService
from src.app.services.student_csv import decode_csv, iter_rows, map_row, missing_required, to_student_fields
from src.domain import Student
from .dtos import ImportStatisticsDTO, ImportStudentsCsvCommand, ImportStudentsCsvResponseDTO

logger = logging.getLogger(__name__)

ALLOWED_EXTENSIONS = {".csv", ".txt"}
DEFAULT_MAX_BYTES = 10 * 1024 * 1024
MAX_REPORTED_ERRORS = 10


class ImportStudentsCsvUseCase:
    """
    Use case: Import Students CSV

    1. Validates the upload (extension, size)
    2. Maps every data row positionally onto the student fields
    3. Updates the student with the same matric number, or creates one
    4. Saves each row in its own savepoint and collects per-row errors
       without aborting the batch
    """

    def __init__(self, uow: UnitOfWork, audit_service: AuditService, max_bytes: int = DEFAULT_MAX_BYTES):
        self.uow = uow
        self.audit_service = audit_service
        self.max_bytes = max_bytes

    async def execute(self, command: ImportStudentsCsvCommand) -> Result[ImportStudentsCsvResponseDTO]:
        """
        Import students from CSV content

        Returns:
            Result[ImportStudentsCsvResponseDTO]: Row statistics with the first
            ten row errors, VALIDATION_ERROR for a rejected upload, or
            CSV_IMPORT_FAILED when the file cannot be processed
        """
        extension = os.path.splitext(command.file_name or "")[1].lower()
        if extension not in ALLOWED_EXTENSIONS:
            return Return.err(Error(code="VALIDATION_ERROR", message="The csv file must be a file of type: csv, txt"))

        if len(command.content) > self.max_bytes:
            return Return.err(Error(
                code="VALIDATION_ERROR",
                message=f"The csv file may not be greater than {self.max_bytes // 1024} kilobytes"
            ))

        try:
            text = decode_csv(command.content)
        except UnicodeDecodeError:
            return Return.err(Error(code="VALIDATION_ERROR", message="The csv file must be UTF-8 encoded"))

        errors = []
        success_count = 0

        try:
            async with self.uow:
                for row_number, cells in iter_rows(text):
                    values = map_row(cells)
                    if missing_required(values):
                        errors.append(f"Row {row_number}: Missing required fields (fname, lname, matric_no)")
                        continue

                    try:
                        fields = to_student_fields(values)
                    except ValueError as e:
                        errors.append(f"Row {row_number}: {str(e)}")
                        continue

                    try:
                        async with self.uow.savepoint():
                            await self._upsert(fields)
                    except Exception as e:
                        logger.warning(f"CSV import row {row_number} of {command.file_name} not saved: {str(e)}")
                        errors.append(f"Row {row_number}: {str(e)}")
                        continue
                    success_count += 1

                await self.uow.commit()

        except Exception as e:
            logger.error(f"CSV import of {command.file_name} failed: {type(e).__name__} - {str(e)}")
            return Return.err(Error(
                code="CSV_IMPORT_FAILED",
                message="Failed to process CSV file",
                reason=str(e)
            ))

        logger.info(f"CSV import of {command.file_name}: {success_count} imported, {len(errors)} errors")

        await self.audit_service.log_event(
            event_type="students_imported",
            actor_id=command.actor_id,
            resource_type="student",
            resource_id=command.file_name,
            metadata={"success_count": success_count, "error_count": len(errors)},
        )

        return Return.ok(
            ImportStudentsCsvResponseDTO(
                message=f"CSV import completed. {success_count} records processed successfully.",
                statistics=ImportStatisticsDTO(
                    total_rows=success_count + len(errors),
                    success_count=success_count,
                    error_count=len(errors),
                    errors=errors[:MAX_REPORTED_ERRORS],
                ),
            )
        )

    async def _upsert(self, fields):
        """Update the student with the same matric number, or create one"""
        existing = await self.uow.students.get_by_matric_no(fields["matric_no"])
        if existing:
            for field_name, value in fields.items():
                setattr(existing, field_name, value)
            existing.updated_at = datetime.utcnow()
            await self.uow.students.update(existing)
        else:
            await self.uow.students.create(Student(**fields))
