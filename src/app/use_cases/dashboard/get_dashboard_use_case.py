"""Get Dashboard Use Case

Aggregates registration, payment and review figures for the admin home page.
"""
from collections import OrderedDict
from datetime import datetime
from typing import Callable, Dict, List, Optional
from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.settings_service import SettingsService
from src.domain import NyscPayment, StudentNysc, SubmissionStatus
from .dtos import (
    DashboardDTO,
    DepartmentShareDTO,
    GenderShareDTO,
    MonthlyTrendDTO,
    PaymentAnalyticsDTO,
    RecentRegistrationDTO,
)

RECENT_REGISTRATIONS = 10
TREND_MONTHS = 7
UNKNOWN = "Unknown"


def percentage(count: int, total: int) -> float:
    return round(count / total * 100, 1) if total > 0 else 0


def _group_counts(records: List[StudentNysc], key: Callable[[StudentNysc], str]) -> Dict[str, int]:
    counts: Dict[str, int] = OrderedDict()
    for record in records:
        group = key(record)
        counts[group] = counts.get(group, 0) + 1
    return counts


def month_starts(now: datetime, months: int = TREND_MONTHS) -> List[datetime]:
    """First day of each of the last `months` months, oldest first"""
    starts = []
    for offset in range(months - 1, -1, -1):
        month_index = now.year * 12 + now.month - 1 - offset
        starts.append(datetime(month_index // 12, month_index % 12 + 1, 1))
    return starts


def monthly_trends(payments: List[NyscPayment], now: Optional[datetime] = None) -> List[MonthlyTrendDTO]:
    trends = []
    for start in month_starts(now or datetime.utcnow()):
        in_month = [
            payment
            for payment in payments
            if payment.payment_date
            and (payment.payment_date.year, payment.payment_date.month) == (start.year, start.month)
        ]
        trends.append(
            MonthlyTrendDTO(
                month=start.strftime("%b"),
                revenue=sum(payment.amount for payment in in_month),
                count=len(in_month),
            )
        )
    return trends


class GetDashboardUseCase:
    """Use case for the admin dashboard figures"""

    def __init__(self, uow: UnitOfWork, settings_service: SettingsService):
        self.uow = uow
        self.settings_service = settings_service

    async def execute(self) -> Result[DashboardDTO]:
        async with self.uow:
            records = await self.uow.student_nysc.list_submitted()
            pending_submissions = await self.uow.submissions.count_by_status(SubmissionStatus.pending)
            successful_payments = await self.uow.payments.list_successful()

        total = len(records)
        paid = sum(1 for record in records if record.is_paid)

        departments = _group_counts(records, lambda record: record.department or UNKNOWN)
        genders = _group_counts(records, lambda record: (record.gender or UNKNOWN).capitalize())

        total_revenue = sum(payment.amount for payment in successful_payments)
        average_amount = total_revenue / len(successful_payments) if successful_payments else 0

        return Return.ok(
            DashboardDTO(
                totalStudents=total,
                confirmedData=total,
                completedPayments=paid,
                pendingPayments=total - paid,
                totalNyscSubmissions=total,
                totalTempSubmissions=pending_submissions,
                recentRegistrations=[
                    RecentRegistrationDTO(
                        id=record.student_id,
                        name=record.full_name,
                        matric_no=record.matric_no,
                        department=record.department,
                        is_paid=bool(record.is_paid),
                        created_at=record.created_at,
                    )
                    for record in records[:RECENT_REGISTRATIONS]
                ],
                departmentBreakdown=[
                    DepartmentShareDTO(department=name, count=count, percentage=percentage(count, total))
                    for name, count in departments.items()
                ],
                genderBreakdown=[
                    GenderShareDTO(gender=name, count=count, percentage=percentage(count, total))
                    for name, count in genders.items()
                ],
                paymentAnalytics=PaymentAnalyticsDTO(
                    totalRevenue=total_revenue,
                    averageAmount=round(average_amount, 2),
                    successRate=percentage(paid, total),
                    monthlyTrends=monthly_trends(successful_payments),
                ),
                system_status=await self.settings_service.system_status(),
            )
        )
