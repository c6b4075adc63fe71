from src.app.repositories.student_nysc_repository import StudentNyscRepository
from src.app.repositories.student_repository import StudentRepository
from src.app.repositories.payment_repository import PaymentRepository
from src.app.repositories.temp_submission_repository import TempSubmissionRepository
from src.app.repositories.staff_repository import StaffRepository
from src.app.repositories.export_job_repository import IExportJobRepository

__all__ = [
    "StudentNyscRepository",
    "StudentRepository",
    "PaymentRepository",
    "TempSubmissionRepository",
    "StaffRepository",
    "IExportJobRepository",
]
