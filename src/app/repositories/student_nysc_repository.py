from abc import ABC, abstractmethod
from typing import List, Optional, Tuple
from src.domain import StudentNysc, ExportFilter


class StudentNyscRepository(ABC):
    """Repository interface for NYSC registration records"""

    @abstractmethod
    async def get_by_student_id(self, student_id: int) -> Optional[StudentNysc]:
        """Get the record belonging to a student"""
        pass

    @abstractmethod
    async def get_by_student_id_or_id(self, identifier: int) -> Optional[StudentNysc]:
        """Match either the student id or the record id"""
        pass

    @abstractmethod
    async def list_submitted(self) -> List[StudentNysc]:
        """All submitted records, newest first"""
        pass

    @abstractmethod
    async def list_all(self) -> List[StudentNysc]:
        """All records, newest first"""
        pass

    @abstractmethod
    async def search_submitted(
        self,
        search: Optional[str],
        is_paid: Optional[bool],
        sort_by: str,
        sort_order: str,
        offset: int,
        limit: int,
    ) -> Tuple[List[StudentNysc], int]:
        """Page of submitted records and the total match count"""
        pass

    @abstractmethod
    async def get_by_student_ids(self, student_ids: List[int]) -> List[StudentNysc]:
        pass

    @abstractmethod
    async def find_for_export(self, filters: ExportFilter) -> List[StudentNysc]:
        """Records matching every filter that is set"""
        pass

    @abstractmethod
    async def update(self, record: StudentNysc) -> StudentNysc:
        pass
