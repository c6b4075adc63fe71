from abc import ABC, abstractmethod
from typing import List, Optional
from src.domain import Student


class StudentRepository(ABC):
    """Repository interface for the student directory"""

    @abstractmethod
    async def get_by_matric_no(self, matric_no: str) -> Optional[Student]:
        pass

    @abstractmethod
    async def get_by_ids(self, student_ids: List[int]) -> List[Student]:
        pass

    @abstractmethod
    async def create(self, student: Student) -> Student:
        pass

    @abstractmethod
    async def update(self, student: Student) -> Student:
        pass
