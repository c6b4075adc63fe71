from datetime import datetime
from src.app.services.export_projections import (
    NOT_AVAILABLE,
    STUDENT_NYSC_FIELDS,
    project_payment,
    project_student_nysc,
    project_submission,
)
from src.domain import NyscPayment, NyscTempSubmission, PaymentStatus, Student, StudentNysc


def make_record(**overrides):
    values = dict(id=1, student_id=10, fname="Ada", lname="Obi", email="record@example.com", is_paid=True)
    values.update(overrides)
    return StudentNysc(**values)


def test_student_nysc_projection_follows_header_order():
    row = project_student_nysc(make_record(), None, None)

    assert list(row) == STUDENT_NYSC_FIELDS


def test_student_email_prefers_directory_record():
    student = Student(id=10, fname="Ada", lname="Obi", matric_no="M1", email="student@example.com")

    assert project_student_nysc(make_record(), student, None)["Email"] == "student@example.com"
    assert project_student_nysc(make_record(), None, None)["Email"] == "record@example.com"
    assert project_student_nysc(make_record(email=None), None, None)["Email"] == ""


def test_student_payment_fields_from_latest_payment():
    paid_at = datetime(2024, 5, 1, 12, 0)
    payment = NyscPayment(id=3, student_id=10, amount=10000, status=PaymentStatus.successful, payment_date=paid_at)

    with_payment = project_student_nysc(make_record(), None, payment)
    without_payment = project_student_nysc(make_record(is_paid=False), None, None)

    assert with_payment["Is Paid"] == "Yes"
    assert with_payment["Payment Amount"] == 10000
    assert with_payment["Payment Date"] == paid_at
    assert without_payment["Is Paid"] == "No"
    assert without_payment["Payment Amount"] == 0
    assert without_payment["Payment Date"] == ""


def test_payment_without_student_uses_placeholders():
    payment = NyscPayment(id=3, student_id=99, amount=500, status=PaymentStatus.pending)

    row = project_payment(payment, None, None)

    assert row["Student Name"] == NOT_AVAILABLE
    assert row["Matric Number"] == NOT_AVAILABLE
    assert row["Email"] == NOT_AVAILABLE
    assert row["Payment Method"] == "paystack"


def test_payment_student_name_includes_middle_name():
    payment = NyscPayment(id=3, student_id=10, amount=500, status=PaymentStatus.successful)
    record = make_record(mname="Chi")

    assert project_payment(payment, record, None)["Student Name"] == "Ada Chi Obi"


def test_submission_reads_academic_fields_from_form_data():
    submission = NyscTempSubmission(id=7, student_id=10, form_data={"department": "Law", "level": ""})

    row = project_submission(submission, None)

    assert row["Department"] == "Law"
    assert row["Faculty"] == NOT_AVAILABLE
    assert row["Level"] == NOT_AVAILABLE
    assert row["Student Name"] == NOT_AVAILABLE
