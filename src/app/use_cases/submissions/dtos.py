from datetime import datetime
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field
from src.domain import NyscTempSubmission, Student, SubmissionStatus

NOT_AVAILABLE = "N/A"


class ListSubmissionsQuery(BaseModel):
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=10, ge=1, le=100)


class SubmissionDTO(BaseModel):
    """Temp submission joined with the submitting student"""

    id: int
    student_id: int
    student_name: str
    matric_number: str
    email: str
    department: Any
    faculty: Any
    level: Any
    submission_type: str = "initial"
    submission_status: str
    submitted_data: Dict[str, Any]
    submission_date: datetime
    reviewed_date: Optional[datetime] = None
    reviewed_by: Optional[str] = None
    review_notes: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_submission(cls, submission: NyscTempSubmission, student: Optional[Student]) -> "SubmissionDTO":
        return cls(
            id=submission.id,
            student_id=submission.student_id,
            student_name=student.full_name if student else NOT_AVAILABLE,
            matric_number=student.matric_no if student else NOT_AVAILABLE,
            email=(student.email or NOT_AVAILABLE) if student else NOT_AVAILABLE,
            department=submission.form_value("department"),
            faculty=submission.form_value("faculty"),
            level=submission.form_value("level"),
            submission_status=str(getattr(submission.status, "value", submission.status)),
            submitted_data=submission.form_data or {},
            submission_date=submission.created_at,
            reviewed_date=submission.reviewed_at,
            reviewed_by=submission.reviewed_by,
            review_notes=submission.review_notes,
            created_at=submission.created_at,
            updated_at=submission.updated_at,
        )


class SubmissionListDTO(BaseModel):
    success: bool = True
    submissions: List[SubmissionDTO]
    total: int
    current_page: int
    last_page: int


class SubmissionDetailsDTO(BaseModel):
    success: bool = True
    submission: SubmissionDTO


class UpdateSubmissionStatusRequest(BaseModel):
    status: SubmissionStatus
    notes: Optional[str] = None


class UpdateSubmissionStatusCommand(BaseModel):
    submission_id: int
    status: SubmissionStatus
    notes: Optional[str] = None
    actor_id: str  # Recorded as the reviewer


class UpdateSubmissionStatusResponseDTO(BaseModel):
    success: bool = True
    message: str = "Submission status updated successfully"
