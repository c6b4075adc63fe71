"""Collects and projects the rows of an export"""
from typing import Any, Dict, List
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.export_projections import (
    project_payment,
    project_student_nysc,
    project_submission,
)
from src.domain import ExportFilter, ExportType


async def collect_student_nysc_rows(uow: UnitOfWork, filters: ExportFilter) -> List[Dict[str, Any]]:
    records = await uow.student_nysc.find_for_export(filters)
    student_ids = [record.student_id for record in records]
    students = {student.id: student for student in await uow.students.get_by_ids(student_ids)}
    latest_payments = await uow.payments.latest_successful_by_student(student_ids)
    return [
        project_student_nysc(
            record,
            students.get(record.student_id),
            latest_payments.get(record.student_id),
        )
        for record in records
    ]


async def collect_payment_rows(uow: UnitOfWork, filters: ExportFilter) -> List[Dict[str, Any]]:
    payments = await uow.payments.find_for_export(filters)
    student_ids = list({payment.student_id for payment in payments})
    records = {record.student_id: record for record in await uow.student_nysc.get_by_student_ids(student_ids)}
    students = {student.id: student for student in await uow.students.get_by_ids(student_ids)}
    return [
        project_payment(
            payment,
            records.get(payment.student_id),
            students.get(payment.student_id),
        )
        for payment in payments
    ]


async def collect_submission_rows(uow: UnitOfWork, filters: ExportFilter) -> List[Dict[str, Any]]:
    submissions = await uow.submissions.find_for_export(filters)
    student_ids = list({submission.student_id for submission in submissions})
    students = {student.id: student for student in await uow.students.get_by_ids(student_ids)}
    return [project_submission(submission, students.get(submission.student_id)) for submission in submissions]


COLLECTORS = {
    ExportType.student_nysc: collect_student_nysc_rows,
    ExportType.payments: collect_payment_rows,
    ExportType.submissions: collect_submission_rows,
}


async def collect_export_rows(
    uow: UnitOfWork, export_type: ExportType, filters: ExportFilter
) -> List[Dict[str, Any]]:
    return await COLLECTORS[ExportType(export_type)](uow, filters)
