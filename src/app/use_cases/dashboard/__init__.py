from .dtos import (
    DashboardDTO,
    PaymentAnalyticsDTO,
    MonthlyTrendDTO,
    PaymentRowDTO,
    PaymentStatisticsDTO,
    PaymentsDTO,
)
from .get_dashboard_use_case import GetDashboardUseCase
from .get_payments_use_case import GetPaymentsUseCase

__all__ = [
    "DashboardDTO",
    "PaymentAnalyticsDTO",
    "MonthlyTrendDTO",
    "PaymentRowDTO",
    "PaymentStatisticsDTO",
    "PaymentsDTO",
    "GetDashboardUseCase",
    "GetPaymentsUseCase",
]
