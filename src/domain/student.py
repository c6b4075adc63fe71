from datetime import date, datetime
from typing import Optional
from sqlmodel import Field
from src.domain.base import BaseModel


class Student(BaseModel, table=True):
    """Student directory entry, the target of bulk CSV imports"""
    __tablename__ = "students"

    id: Optional[int] = Field(default=None, primary_key=True)
    fname: str = Field(max_length=100, nullable=False)
    lname: str = Field(max_length=100, nullable=False)
    mname: Optional[str] = Field(default=None, max_length=100)
    matric_no: str = Field(max_length=50, nullable=False, unique=True, index=True)
    email: Optional[str] = Field(default=None, max_length=255)
    phone: Optional[str] = Field(default=None, max_length=20)
    gender: Optional[str] = Field(default=None, max_length=20)
    dob: Optional[date] = Field(default=None)
    state_of_origin: Optional[str] = Field(default=None, max_length=100)
    lga: Optional[str] = Field(default=None, max_length=100)
    course_of_study: Optional[str] = Field(default=None, max_length=255)
    department: Optional[str] = Field(default=None, max_length=255)
    graduation_year: Optional[str] = Field(default=None, max_length=4)
    cgpa: Optional[float] = Field(default=None)
    jambno: Optional[str] = Field(default=None, max_length=20)
    study_mode: Optional[str] = Field(default="full-time", max_length=50)
    created_at: datetime = Field(default_factory=datetime.utcnow, nullable=False)
    updated_at: datetime = Field(default_factory=datetime.utcnow, nullable=False)

    @property
    def full_name(self) -> str:
        return f"{self.fname} {self.lname}"
