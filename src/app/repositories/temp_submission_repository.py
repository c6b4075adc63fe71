from abc import ABC, abstractmethod
from typing import List, Optional, Tuple
from src.domain import NyscTempSubmission, ExportFilter, SubmissionStatus


class TempSubmissionRepository(ABC):
    """Repository interface for temporary data submissions"""

    @abstractmethod
    async def get_by_id(self, submission_id: int) -> Optional[NyscTempSubmission]:
        pass

    @abstractmethod
    async def count_by_status(self, status: SubmissionStatus) -> int:
        pass

    @abstractmethod
    async def list_paginated(self, offset: int, limit: int) -> Tuple[List[NyscTempSubmission], int]:
        """Page of submissions (newest first) and the total count"""
        pass

    @abstractmethod
    async def find_for_export(self, filters: ExportFilter) -> List[NyscTempSubmission]:
        pass

    @abstractmethod
    async def update(self, submission: NyscTempSubmission) -> NyscTempSubmission:
        pass
