from datetime import datetime
from typing import Optional
from sqlmodel import Field
from src.domain.base import BaseModel
from src.domain.enums import StaffStatus


class Staff(BaseModel, table=True):
    """Staff account that can sign in to the admin portal"""
    __tablename__ = "staff"

    id: Optional[int] = Field(default=None, primary_key=True)
    fname: str = Field(max_length=255, nullable=False)
    lname: str = Field(max_length=255, nullable=False)
    email: str = Field(max_length=255, nullable=False, unique=True, index=True)
    password: str = Field(max_length=255, nullable=False)
    status: str = Field(default=StaffStatus.active.value, max_length=20, nullable=False)
    last_login_at: Optional[datetime] = Field(default=None)
    created_at: datetime = Field(default_factory=datetime.utcnow, nullable=False)
    updated_at: datetime = Field(default_factory=datetime.utcnow, nullable=False)

    @property
    def full_name(self) -> str:
        return f"{self.fname} {self.lname}".strip()

    @property
    def display_status(self) -> str:
        """Anything other than 'active' is shown as inactive"""
        if self.status == StaffStatus.active.value:
            return StaffStatus.active.value
        return StaffStatus.inactive.value
