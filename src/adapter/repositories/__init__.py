from src.adapter.repositories.student_nysc_repository import SqlAlchemyStudentNyscRepository
from src.adapter.repositories.student_repository import SqlAlchemyStudentRepository
from src.adapter.repositories.payment_repository import SqlAlchemyPaymentRepository
from src.adapter.repositories.temp_submission_repository import SqlAlchemyTempSubmissionRepository
from src.adapter.repositories.staff_repository import SqlAlchemyStaffRepository
from src.adapter.repositories.export_job_repository import KeyValueExportJobRepository

__all__ = [
    "SqlAlchemyStudentNyscRepository",
    "SqlAlchemyStudentRepository",
    "SqlAlchemyPaymentRepository",
    "SqlAlchemyTempSubmissionRepository",
    "SqlAlchemyStaffRepository",
    "KeyValueExportJobRepository",
]
