from datetime import datetime
from typing import Any, Dict, List, Optional, Union
from pydantic import BaseModel


class RecentRegistrationDTO(BaseModel):
    id: int
    name: str
    matric_no: Optional[str] = None
    department: Optional[str] = None
    is_paid: bool
    created_at: datetime


class DepartmentShareDTO(BaseModel):
    department: str
    count: int
    percentage: float


class GenderShareDTO(BaseModel):
    gender: str
    count: int
    percentage: float


class MonthlyTrendDTO(BaseModel):
    month: str
    revenue: int
    count: int


class PaymentAnalyticsDTO(BaseModel):
    totalRevenue: int
    averageAmount: float
    successRate: float
    monthlyTrends: List[MonthlyTrendDTO]


class DashboardDTO(BaseModel):
    totalStudents: int
    confirmedData: int
    completedPayments: int
    pendingPayments: int
    totalNyscSubmissions: int
    totalTempSubmissions: int
    recentRegistrations: List[RecentRegistrationDTO]
    departmentBreakdown: List[DepartmentShareDTO]
    genderBreakdown: List[GenderShareDTO]
    paymentAnalytics: PaymentAnalyticsDTO
    system_status: Dict[str, Any]


class PaymentRowDTO(BaseModel):
    id: int
    student_id: int
    student_name: str
    matric_number: str
    email: str
    department: str
    amount: int
    payment_method: str
    payment_status: str
    transaction_reference: Optional[str] = None
    payment_date: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime


class PaymentStatisticsDTO(BaseModel):
    total_amount: int
    standard_fee_count: int
    late_fee_count: int


class PaymentsDTO(BaseModel):
    payments: List[PaymentRowDTO]
    total: int
    statistics: PaymentStatisticsDTO
