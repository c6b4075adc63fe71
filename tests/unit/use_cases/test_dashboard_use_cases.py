"""
Unit tests for the dashboard and payments use cases
"""
import pytest
from datetime import datetime
from unittest.mock import AsyncMock
from src.app.services.settings_service import SettingsService
from src.app.use_cases.dashboard import GetDashboardUseCase, GetPaymentsUseCase
from src.app.use_cases.dashboard.get_dashboard_use_case import month_starts, monthly_trends, percentage
from src.domain import NyscPayment, PaymentStatus, Student, StudentNysc


def make_record(student_id, department="Computer Science", gender="male", is_paid=False):
    return StudentNysc(
        id=student_id, student_id=student_id, fname="Ada", lname="Obi", matric_no=f"M{student_id}",
        department=department, gender=gender, is_paid=is_paid, is_submitted=True,
    )


def make_payment(payment_id, student_id, amount, status=PaymentStatus.successful, payment_date=None):
    return NyscPayment(
        id=payment_id, student_id=student_id, amount=amount, status=status,
        payment_reference=f"REF{payment_id}", payment_date=payment_date,
    )


def test_percentage_of_empty_total_is_zero():
    assert percentage(3, 0) == 0
    assert percentage(1, 3) == 33.3


def test_month_starts_cross_year_boundary():
    starts = month_starts(datetime(2024, 2, 17), 4)

    assert starts == [
        datetime(2023, 11, 1),
        datetime(2023, 12, 1),
        datetime(2024, 1, 1),
        datetime(2024, 2, 1),
    ]


def test_monthly_trends_bucket_by_payment_month():
    payments = [
        make_payment(1, 1, 500, payment_date=datetime(2024, 2, 3)),
        make_payment(2, 2, 10000, payment_date=datetime(2024, 2, 28)),
        make_payment(3, 3, 500, payment_date=datetime(2023, 12, 1)),
        make_payment(4, 4, 500, payment_date=None),
    ]

    trends = monthly_trends(payments, now=datetime(2024, 2, 17))

    assert len(trends) == 7
    assert trends[-1].month == "Feb"
    assert trends[-1].revenue == 10500
    assert trends[-1].count == 2
    assert trends[-3].month == "Dec"
    assert trends[-3].count == 1


@pytest.mark.asyncio
async def test_dashboard_figures(mock_uow, store):
    records = [
        make_record(1, is_paid=True),
        make_record(2, department="Physics", gender="female", is_paid=True),
        make_record(3, department=None, gender=None),
        make_record(4),
    ]
    mock_uow.student_nysc.list_submitted = AsyncMock(return_value=records)
    mock_uow.submissions.count_by_status = AsyncMock(return_value=5)
    mock_uow.payments.list_successful = AsyncMock(
        return_value=[make_payment(1, 1, 500), make_payment(2, 2, 10000)]
    )

    result = await GetDashboardUseCase(mock_uow, SettingsService(store, 60)).execute()

    assert result.is_ok()
    dashboard = result.value
    assert dashboard.totalStudents == 4
    assert dashboard.completedPayments == 2
    assert dashboard.pendingPayments == 2
    assert dashboard.totalTempSubmissions == 5
    departments = {share.department: share.percentage for share in dashboard.departmentBreakdown}
    assert departments == {"Computer Science": 50.0, "Physics": 25.0, "Unknown": 25.0}
    genders = {share.gender: share.count for share in dashboard.genderBreakdown}
    assert genders == {"Male": 2, "Female": 1, "Unknown": 1}
    assert dashboard.paymentAnalytics.totalRevenue == 10500
    assert dashboard.paymentAnalytics.averageAmount == 5250
    assert dashboard.paymentAnalytics.successRate == 50.0
    assert dashboard.system_status["current_fee"] == 500


@pytest.mark.asyncio
async def test_dashboard_without_registrations(mock_uow, store):
    mock_uow.student_nysc.list_submitted = AsyncMock(return_value=[])
    mock_uow.submissions.count_by_status = AsyncMock(return_value=0)
    mock_uow.payments.list_successful = AsyncMock(return_value=[])

    result = await GetDashboardUseCase(mock_uow, SettingsService(store, 60)).execute()

    assert result.value.totalStudents == 0
    assert result.value.paymentAnalytics.successRate == 0
    assert result.value.paymentAnalytics.averageAmount == 0
    assert result.value.departmentBreakdown == []


@pytest.mark.asyncio
async def test_payments_ledger_and_fee_counts(mock_uow):
    payments = [
        make_payment(1, 1, 500),
        make_payment(2, 2, 10000),
        make_payment(3, 3, 500, status=PaymentStatus.failed),
        make_payment(4, 99, 500),
    ]
    mock_uow.payments.list_all = AsyncMock(return_value=payments)
    mock_uow.student_nysc.get_by_student_ids = AsyncMock(
        return_value=[make_record(1), make_record(2), make_record(3)]
    )
    mock_uow.students.get_by_ids = AsyncMock(
        return_value=[Student(id=1, fname="Ada", lname="Obi", matric_no="M1", email="ada@example.com")]
    )

    result = await GetPaymentsUseCase(mock_uow).execute()

    assert result.is_ok()
    ledger = result.value
    assert ledger.total == 4
    assert ledger.statistics.total_amount == 11000
    assert ledger.statistics.standard_fee_count == 2
    assert ledger.statistics.late_fee_count == 1
    first, second, _, orphan = ledger.payments
    assert first.email == "ada@example.com"
    assert first.payment_status == "successful"
    assert second.email == "N/A"
    assert orphan.student_name == "N/A"
    assert orphan.matric_number == "N/A"
