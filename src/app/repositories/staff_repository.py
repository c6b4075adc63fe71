from abc import ABC, abstractmethod
from typing import List, Optional
from src.domain import Staff


class StaffRepository(ABC):
    """Repository interface for staff (admin users)"""

    @abstractmethod
    async def search(self, search: Optional[str] = None, status: Optional[str] = None) -> List[Staff]:
        """Staff filtered by name/email substring and status"""
        pass

    @abstractmethod
    async def get_by_id(self, staff_id: int) -> Optional[Staff]:
        pass

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[Staff]:
        pass

    @abstractmethod
    async def create(self, staff: Staff) -> Staff:
        pass

    @abstractmethod
    async def update(self, staff: Staff) -> Staff:
        pass

    @abstractmethod
    async def delete(self, staff: Staff) -> None:
        pass
