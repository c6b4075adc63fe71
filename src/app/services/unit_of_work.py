from abc import ABC, abstractmethod
from src.app.repositories import (
    StudentNyscRepository,
    StudentRepository,
    PaymentRepository,
    TempSubmissionRepository,
    StaffRepository,
)


class UnitOfWork(ABC):
    """Groups repository calls that must be committed together"""

    student_nysc: StudentNyscRepository
    students: StudentRepository
    payments: PaymentRepository
    submissions: TempSubmissionRepository
    staff: StaffRepository

    async def __aenter__(self):
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass

    @abstractmethod
    def savepoint(self):
        """Async context manager for a nested transaction; an error inside rolls back only its work"""
        pass
