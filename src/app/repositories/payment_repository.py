from abc import ABC, abstractmethod
from typing import Dict, List
from src.domain import NyscPayment, ExportFilter


class PaymentRepository(ABC):
    """Repository interface for NYSC payments"""

    @abstractmethod
    async def list_all(self) -> List[NyscPayment]:
        """All payments, most recent payment date first"""
        pass

    @abstractmethod
    async def list_successful(self) -> List[NyscPayment]:
        pass

    @abstractmethod
    async def get_by_student(self, student_id: int) -> List[NyscPayment]:
        """Payments of one student, newest first"""
        pass

    @abstractmethod
    async def latest_successful_by_student(self, student_ids: List[int]) -> Dict[int, NyscPayment]:
        """Most recent successful payment per student id"""
        pass

    @abstractmethod
    async def find_for_export(self, filters: ExportFilter) -> List[NyscPayment]:
        pass
