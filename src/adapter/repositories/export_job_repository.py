import logging
from typing import List, Optional
from src.app.repositories.export_job_repository import IExportJobRepository
from src.app.services.key_value_store import KeyValueStore
from src.domain import ExportJob

logger = logging.getLogger(__name__)

JOB_KEY_PREFIX = "export_job_"
JOB_INDEX_KEY = "export_job_keys"


class KeyValueExportJobRepository(IExportJobRepository):
    """
    Export jobs kept in the key-value store

    Each job is stored under its own key and its key is appended to a
    separate index entry used for listing. The two writes are not atomic,
    so index entries whose record is gone are skipped as stale and pruned
    on the next create or listing.
    """

    def __init__(self, store: KeyValueStore, ttl_seconds: int = 3600):
        self.store = store
        self.ttl_seconds = ttl_seconds

    @staticmethod
    def job_key(job_id: str) -> str:
        return f"{JOB_KEY_PREFIX}{job_id}"

    async def create(self, export_job: ExportJob) -> ExportJob:
        """Store a new export job and register it in the job index"""
        key = self.job_key(export_job.id)
        await self.store.put(key, export_job.model_dump(mode="json"), self.ttl_seconds)

        # Keys of expired records are dropped so the index does not keep growing
        index = [live_key for live_key, _ in await self._resolve_index()]
        index.append(key)
        await self.store.put(JOB_INDEX_KEY, index, self.ttl_seconds)
        return export_job

    async def get_by_id(self, job_id: str) -> Optional[ExportJob]:
        data = await self.store.get(self.job_key(job_id))
        if data is None:
            return None
        return ExportJob.model_validate(data)

    async def update(self, export_job: ExportJob) -> ExportJob:
        await self.store.put(
            self.job_key(export_job.id), export_job.model_dump(mode="json"), self.ttl_seconds
        )
        return export_job

    async def list_all(self) -> List[ExportJob]:
        index = await self.store.get(JOB_INDEX_KEY, [])
        entries = await self._resolve_index(index)
        if len(entries) < len(index):
            await self.store.put(JOB_INDEX_KEY, [key for key, _ in entries], self.ttl_seconds)

        jobs = [ExportJob.model_validate(data) for _, data in entries]
        jobs.sort(key=lambda job: job.created_at, reverse=True)
        return jobs

    async def _resolve_index(self, index=None):
        """(key, record) pairs for index entries whose record still exists"""
        if index is None:
            index = await self.store.get(JOB_INDEX_KEY, [])
        entries = []
        for key, data in zip(index, await self.store.get_many(index)):
            if data is None:
                logger.warning(f"Dropping stale export job index entry: {key}")
                continue
            entries.append((key, data))
        return entries
