from datetime import date, datetime
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field
from src.domain import Gender, MaritalStatus, NyscPayment, StudentNysc

NOT_AVAILABLE = "N/A"


class ListStudentsQuery(BaseModel):
    """Query DTO for the paginated student listing"""

    search: Optional[str] = None
    payment_status: str = "all"  # paid | unpaid | all
    sort_by: str = "created_at"
    sort_order: str = "desc"
    page: int = Field(default=1, ge=1)
    per_page: int = Field(default=15, ge=1, le=100)


class StudentPageDTO(BaseModel):
    data: List[Dict[str, Any]]
    total: int
    current_page: int
    per_page: int
    last_page: int


class StudentSummaryDTO(BaseModel):
    """Flattened record with N/A placeholders for missing values"""

    id: int
    student_id: int
    student_name: str
    matric_number: str
    email: str
    department: str
    course_of_study: str
    graduation_year: str
    cgpa: Any
    gender: str
    phone: str
    state_of_origin: str
    lga: str
    is_paid: bool
    payment_amount: int
    is_submitted: bool
    payment_reference: str
    payment_date: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_record(cls, record: StudentNysc) -> "StudentSummaryDTO":
        return cls(
            id=record.id,
            student_id=record.student_id,
            student_name=record.full_name,
            matric_number=record.matric_no or NOT_AVAILABLE,
            email=record.email or NOT_AVAILABLE,
            department=record.department or NOT_AVAILABLE,
            course_of_study=record.course_of_study or NOT_AVAILABLE,
            graduation_year=record.graduation_year or NOT_AVAILABLE,
            cgpa=record.cgpa if record.cgpa is not None else NOT_AVAILABLE,
            gender=record.gender or NOT_AVAILABLE,
            phone=record.phone or NOT_AVAILABLE,
            state_of_origin=record.state_of_origin or NOT_AVAILABLE,
            lga=record.lga or NOT_AVAILABLE,
            is_paid=bool(record.is_paid),
            payment_amount=record.payment_amount or 0,
            is_submitted=bool(record.is_submitted),
            payment_reference=record.payment_reference or NOT_AVAILABLE,
            payment_date=record.payment_date,
            created_at=record.created_at,
            updated_at=record.updated_at,
        )


class AllStudentsDTO(BaseModel):
    success: bool = True
    data: List[StudentSummaryDTO]
    total: int


class StudentPaymentDTO(BaseModel):
    id: int
    amount: int
    reference: Optional[str] = None
    status: str
    payment_date: Optional[datetime] = None
    created_at: datetime

    @classmethod
    def from_payment(cls, payment: NyscPayment) -> "StudentPaymentDTO":
        return cls(
            id=payment.id,
            amount=payment.amount,
            reference=payment.payment_reference,
            status=str(getattr(payment.status, "value", payment.status)),
            payment_date=payment.payment_date,
            created_at=payment.created_at,
        )


class StudentDetailsDTO(BaseModel):
    id: int
    student_id: int
    fname: Optional[str] = None
    lname: Optional[str] = None
    mname: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    matric_no: Optional[str] = None
    department: Optional[str] = None
    course_of_study: Optional[str] = None
    graduation_year: Optional[str] = None
    cgpa: Optional[float] = None
    gender: Optional[str] = None
    date_of_birth: Optional[date] = None
    state_of_origin: Optional[str] = None
    lga: Optional[str] = None
    address: Optional[str] = None
    emergency_contact_name: Optional[str] = None
    emergency_contact_phone: Optional[str] = None
    emergency_contact_relationship: Optional[str] = None
    is_paid: bool
    payment_amount: Optional[int] = None
    payment_reference: Optional[str] = None
    payment_date: Optional[datetime] = None
    is_submitted: bool
    created_at: datetime
    updated_at: datetime
    payments: List[StudentPaymentDTO]


class StudentDetailsResponseDTO(BaseModel):
    success: bool = True
    data: StudentDetailsDTO


class UpdateStudentRequest(BaseModel):
    """Partial update of an NYSC record; only the fields sent are applied"""

    fname: Optional[str] = Field(default=None, max_length=100)
    lname: Optional[str] = Field(default=None, max_length=100)
    mname: Optional[str] = Field(default=None, max_length=100)
    gender: Optional[Gender] = None
    dob: Optional[date] = None
    marital_status: Optional[MaritalStatus] = None
    phone: Optional[str] = Field(default=None, max_length=20)
    email: Optional[str] = Field(default=None, max_length=255)
    address: Optional[str] = None
    state_of_origin: Optional[str] = Field(default=None, max_length=100)
    lga: Optional[str] = Field(default=None, max_length=100)
    matric_no: Optional[str] = Field(default=None, max_length=50)
    course_of_study: Optional[str] = Field(default=None, max_length=255)
    department: Optional[str] = Field(default=None, max_length=255)
    faculty: Optional[str] = Field(default=None, max_length=255)
    graduation_year: Optional[str] = Field(default=None, min_length=4, max_length=4)
    cgpa: Optional[float] = Field(default=None, ge=0, le=5)
    jambno: Optional[str] = Field(default=None, max_length=20)
    study_mode: Optional[str] = Field(default=None, max_length=50)
    emergency_contact_name: Optional[str] = Field(default=None, max_length=255)
    emergency_contact_phone: Optional[str] = Field(default=None, max_length=20)
    emergency_contact_relationship: Optional[str] = Field(default=None, max_length=100)
    emergency_contact_address: Optional[str] = None
    is_paid: Optional[bool] = None
    payment_amount: Optional[int] = None

    class Config:
        use_enum_values = True


class UpdateStudentCommand(BaseModel):
    student_id: int
    changes: Dict[str, Any]
    actor_id: str  # For audit logging


class UpdateStudentResponseDTO(BaseModel):
    success: bool = True
    message: str = "Student record updated successfully."
    data: Dict[str, Any]
