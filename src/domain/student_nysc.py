from datetime import date, datetime
from typing import Optional
from sqlmodel import Field
from src.domain.base import BaseModel


class StudentNysc(BaseModel, table=True):
    """NYSC registration record filled in by a graduating student"""
    __tablename__ = "studentnysc"

    id: Optional[int] = Field(default=None, primary_key=True)
    student_id: int = Field(index=True, nullable=False)

    # Personal details
    fname: Optional[str] = Field(default=None, max_length=100)
    mname: Optional[str] = Field(default=None, max_length=100)
    lname: Optional[str] = Field(default=None, max_length=100)
    gender: Optional[str] = Field(default=None, max_length=20, index=True)
    dob: Optional[date] = Field(default=None)
    marital_status: Optional[str] = Field(default=None, max_length=20)
    phone: Optional[str] = Field(default=None, max_length=20)
    email: Optional[str] = Field(default=None, max_length=255)
    address: Optional[str] = Field(default=None)
    state_of_origin: Optional[str] = Field(default=None, max_length=100, index=True)
    lga: Optional[str] = Field(default=None, max_length=100)

    # Academic details
    matric_no: Optional[str] = Field(default=None, max_length=50, index=True)
    jambno: Optional[str] = Field(default=None, max_length=20)
    study_mode: Optional[str] = Field(default=None, max_length=50)
    course_of_study: Optional[str] = Field(default=None, max_length=255)
    department: Optional[str] = Field(default=None, max_length=255, index=True)
    faculty: Optional[str] = Field(default=None, max_length=255)
    level: Optional[str] = Field(default=None, max_length=20)
    graduation_year: Optional[str] = Field(default=None, max_length=4)
    cgpa: Optional[float] = Field(default=None)

    # Emergency contact
    emergency_contact_name: Optional[str] = Field(default=None, max_length=255)
    emergency_contact_phone: Optional[str] = Field(default=None, max_length=20)
    emergency_contact_relationship: Optional[str] = Field(default=None, max_length=100)
    emergency_contact_address: Optional[str] = Field(default=None)

    # Payment and submission state
    is_paid: bool = Field(default=False, nullable=False)
    payment_amount: Optional[int] = Field(default=None)
    payment_reference: Optional[str] = Field(default=None, max_length=100)
    payment_date: Optional[datetime] = Field(default=None)
    is_submitted: bool = Field(default=False, nullable=False)

    created_at: datetime = Field(default_factory=datetime.utcnow, nullable=False)
    updated_at: datetime = Field(default_factory=datetime.utcnow, nullable=False)

    @property
    def full_name(self) -> str:
        return " ".join(part for part in (self.fname, self.lname) if part).strip()

    def apply_changes(self, changes: dict) -> None:
        """Apply a partial update and bump updated_at"""
        for field_name, value in changes.items():
            setattr(self, field_name, value)
        self.updated_at = datetime.utcnow()
