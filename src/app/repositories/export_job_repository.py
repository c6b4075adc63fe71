from abc import ABC, abstractmethod
from typing import List, Optional
from src.domain import ExportJob


class IExportJobRepository(ABC):
    """Interface for ExportJob repository"""

    @abstractmethod
    async def create(self, export_job: ExportJob) -> ExportJob:
        """Store a new export job and register it in the job index"""
        pass

    @abstractmethod
    async def get_by_id(self, job_id: str) -> Optional[ExportJob]:
        """Get export job by ID, None when absent or expired"""
        pass

    @abstractmethod
    async def update(self, export_job: ExportJob) -> ExportJob:
        """Update an existing export job"""
        pass

    @abstractmethod
    async def list_all(self) -> List[ExportJob]:
        """Every live export job, newest first"""
        pass
