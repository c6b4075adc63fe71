from enum import Enum


class ExportType(str, Enum):
    """Dataset an export job is built from"""
    student_nysc = "student_nysc"
    payments = "payments"
    submissions = "submissions"


class ExportFormat(str, Enum):
    """Output format of an export file"""
    csv = "csv"
    excel = "excel"
    pdf = "pdf"


class ExportJobStatus(str, Enum):
    """Status of an export job"""
    processing = "processing"
    completed = "completed"
    failed = "failed"


class AdminRole(str, Enum):
    """Administrative role of a staff member"""
    super_admin = "super_admin"
    admin = "admin"
    sub_admin = "sub_admin"
    manager = "manager"


class StaffStatus(str, Enum):
    active = "active"
    inactive = "inactive"


class PaymentStatus(str, Enum):
    pending = "pending"
    successful = "successful"
    failed = "failed"


class SubmissionStatus(str, Enum):
    pending = "pending"
    approved = "approved"
    rejected = "rejected"


class Gender(str, Enum):
    male = "male"
    female = "female"
    other = "other"


class MaritalStatus(str, Enum):
    single = "single"
    married = "married"
    divorced = "divorced"
    widowed = "widowed"


class SmtpEncryption(str, Enum):
    tls = "tls"
    ssl = "ssl"
    none = "none"
