from datetime import datetime
from typing import Any, Dict, Optional
from sqlmodel import Field, Column
from sqlalchemy import JSON as SQLJSON
from src.domain.base import BaseModel
from src.domain.enums import SubmissionStatus


class NyscTempSubmission(BaseModel, table=True):
    """Data correction request awaiting admin review"""
    __tablename__ = "nysc_temp_submissions"

    id: Optional[int] = Field(default=None, primary_key=True)
    student_id: int = Field(index=True, nullable=False)
    form_data: Dict[str, Any] = Field(default_factory=dict, sa_column=Column(SQLJSON, nullable=False))
    status: SubmissionStatus = Field(default=SubmissionStatus.pending, nullable=False, index=True)
    reviewed_at: Optional[datetime] = Field(default=None)
    reviewed_by: Optional[str] = Field(default=None, max_length=100)
    review_notes: Optional[str] = Field(default=None)
    created_at: datetime = Field(default_factory=datetime.utcnow, nullable=False)
    updated_at: datetime = Field(default_factory=datetime.utcnow, nullable=False)

    class Config:
        use_enum_values = True

    def form_value(self, key: str, default: str = "N/A") -> Any:
        return (self.form_data or {}).get(key) or default

    def review(self, status: SubmissionStatus, reviewer: str, notes: Optional[str] = None) -> None:
        """Record an admin review decision"""
        now = datetime.utcnow()
        self.status = status
        self.review_notes = notes
        self.reviewed_by = reviewer
        self.reviewed_at = now
        self.updated_at = now
