from datetime import datetime
from typing import Optional
from sqlmodel import Field
from src.domain.base import BaseModel
from src.domain.enums import PaymentStatus


class NyscPayment(BaseModel, table=True):
    """A payment attempt for the NYSC registration fee"""
    __tablename__ = "nysc_payments"

    id: Optional[int] = Field(default=None, primary_key=True)
    student_id: int = Field(index=True, nullable=False)
    amount: int = Field(nullable=False)
    payment_method: Optional[str] = Field(default="paystack", max_length=50)
    status: PaymentStatus = Field(default=PaymentStatus.pending, nullable=False, index=True)
    payment_reference: Optional[str] = Field(default=None, max_length=100, index=True)
    payment_date: Optional[datetime] = Field(default=None)
    created_at: datetime = Field(default_factory=datetime.utcnow, nullable=False)
    updated_at: datetime = Field(default_factory=datetime.utcnow, nullable=False)

    class Config:
        use_enum_values = True

    def is_successful(self) -> bool:
        return self.status == PaymentStatus.successful
