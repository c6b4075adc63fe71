from src.domain.base import BaseModel, generate_uuid
from src.domain.enums import (
    ExportType,
    ExportFormat,
    ExportJobStatus,
    AdminRole,
    StaffStatus,
    PaymentStatus,
    SubmissionStatus,
    Gender,
    MaritalStatus,
    SmtpEncryption,
)
from src.domain.student import Student
from src.domain.student_nysc import StudentNysc
from src.domain.nysc_payment import NyscPayment
from src.domain.temp_submission import NyscTempSubmission
from src.domain.staff import Staff
from src.domain.export_job import ExportJob, ExportFilter, DateRange, generate_job_id
from src.domain.admin_role import PermissionSet, permissions_for, role_from_staff_id

__all__ = [
    # Base
    "BaseModel",
    "generate_uuid",
    # Enums
    "ExportType",
    "ExportFormat",
    "ExportJobStatus",
    "AdminRole",
    "StaffStatus",
    "PaymentStatus",
    "SubmissionStatus",
    "Gender",
    "MaritalStatus",
    "SmtpEncryption",
    # Entities
    "Student",
    "StudentNysc",
    "NyscPayment",
    "NyscTempSubmission",
    "Staff",
    # Value objects
    "ExportJob",
    "ExportFilter",
    "DateRange",
    "generate_job_id",
    "PermissionSet",
    "permissions_for",
    "role_from_staff_id",
]
