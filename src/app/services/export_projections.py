"""Export projections

One pure function per export type turning an entity (plus the rows it is
joined to) into a flat, ordered record. The field lists double as the header
row of the generated file.
"""
from typing import Any, Dict, List, Optional
from src.domain import (
    ExportType,
    NyscPayment,
    NyscTempSubmission,
    Student,
    StudentNysc,
)

NOT_AVAILABLE = "N/A"

STUDENT_NYSC_FIELDS = [
    "ID",
    "Student ID",
    "First Name",
    "Last Name",
    "Middle Name",
    "Matric Number",
    "Email",
    "Phone",
    "Department",
    "Faculty",
    "Level",
    "Gender",
    "Date of Birth",
    "State of Origin",
    "LGA",
    "Address",
    "Is Paid",
    "Payment Amount",
    "Payment Date",
    "Submission Date",
]

PAYMENT_FIELDS = [
    "Payment ID",
    "Student ID",
    "Student Name",
    "Matric Number",
    "Email",
    "Department",
    "Amount",
    "Payment Method",
    "Status",
    "Reference",
    "Payment Date",
    "Created At",
]

SUBMISSION_FIELDS = [
    "Submission ID",
    "Student ID",
    "Student Name",
    "Matric Number",
    "Email",
    "Department",
    "Faculty",
    "Level",
    "Status",
    "Submission Date",
    "Reviewed Date",
    "Review Notes",
]

EXPORT_FIELDS: Dict[ExportType, List[str]] = {
    ExportType.student_nysc: STUDENT_NYSC_FIELDS,
    ExportType.payments: PAYMENT_FIELDS,
    ExportType.submissions: SUBMISSION_FIELDS,
}


def fields_for(export_type: ExportType) -> List[str]:
    return EXPORT_FIELDS[ExportType(export_type)]


def _join_name(*parts: Optional[str]) -> str:
    return " ".join(part.strip() for part in parts if part and part.strip())


def project_student_nysc(
    record: StudentNysc,
    student: Optional[Student],
    latest_payment: Optional[NyscPayment],
) -> Dict[str, Any]:
    email = student.email if student and student.email else (record.email or "")
    return {
        "ID": record.id,
        "Student ID": record.student_id,
        "First Name": record.fname,
        "Last Name": record.lname,
        "Middle Name": record.mname,
        "Matric Number": record.matric_no,
        "Email": email,
        "Phone": record.phone,
        "Department": record.department,
        "Faculty": record.faculty,
        "Level": record.level,
        "Gender": record.gender,
        "Date of Birth": record.dob,
        "State of Origin": record.state_of_origin,
        "LGA": record.lga,
        "Address": record.address,
        "Is Paid": "Yes" if record.is_paid else "No",
        "Payment Amount": latest_payment.amount if latest_payment else 0,
        "Payment Date": latest_payment.payment_date if latest_payment else "",
        "Submission Date": record.created_at,
    }


def project_payment(
    payment: NyscPayment,
    record: Optional[StudentNysc],
    student: Optional[Student],
) -> Dict[str, Any]:
    return {
        "Payment ID": payment.id,
        "Student ID": payment.student_id,
        "Student Name": _join_name(record.fname, record.mname, record.lname) if record else NOT_AVAILABLE,
        "Matric Number": record.matric_no if record else NOT_AVAILABLE,
        "Email": student.email if student else NOT_AVAILABLE,
        "Department": record.department if record else NOT_AVAILABLE,
        "Amount": payment.amount,
        "Payment Method": payment.payment_method or "paystack",
        "Status": payment.status,
        "Reference": payment.payment_reference,
        "Payment Date": payment.payment_date,
        "Created At": payment.created_at,
    }


def project_submission(
    submission: NyscTempSubmission,
    student: Optional[Student],
) -> Dict[str, Any]:
    return {
        "Submission ID": submission.id,
        "Student ID": submission.student_id,
        "Student Name": student.full_name if student else NOT_AVAILABLE,
        "Matric Number": student.matric_no if student else NOT_AVAILABLE,
        "Email": student.email if student else NOT_AVAILABLE,
        "Department": submission.form_value("department"),
        "Faculty": submission.form_value("faculty"),
        "Level": submission.form_value("level"),
        "Status": submission.status,
        "Submission Date": submission.created_at,
        "Reviewed Date": submission.reviewed_at,
        "Review Notes": submission.review_notes,
    }
