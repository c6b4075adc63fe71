"""
Unit tests for KeyValueExportJobRepository
"""
from datetime import datetime, timedelta
import pytest
from src.adapter.repositories.export_job_repository import (
    JOB_INDEX_KEY,
    KeyValueExportJobRepository,
)
from src.adapter.services.in_memory_key_value_store import InMemoryKeyValueStore
from src.domain import ExportFilter, ExportFormat, ExportJob, ExportJobStatus, ExportType


@pytest.fixture
def store():
    return InMemoryKeyValueStore()


@pytest.fixture
def repository(store):
    return KeyValueExportJobRepository(store, ttl_seconds=3600)


def make_job(created_at=None, **overrides):
    job = ExportJob(type=ExportType.student_nysc, format=ExportFormat.csv, **overrides)
    if created_at:
        job.created_at = created_at
    return job


@pytest.mark.asyncio
async def test_create_registers_job_in_index(repository, store):
    job = make_job()

    await repository.create(job)

    assert await store.get(JOB_INDEX_KEY) == [f"export_job_{job.id}"]
    stored = await repository.get_by_id(job.id)
    assert stored.id == job.id
    assert stored.status == ExportJobStatus.processing


@pytest.mark.asyncio
async def test_filters_survive_storage(repository):
    job = make_job(filters=ExportFilter(department="Law", matric_numbers=["M1", "M2"]))

    await repository.create(job)

    stored = await repository.get_by_id(job.id)
    assert stored.filters.department == "Law"
    assert stored.filters.matric_numbers == ["M1", "M2"]


@pytest.mark.asyncio
async def test_update_overwrites_record(repository):
    job = make_job()
    await repository.create(job)

    job.complete(record_count=2, file_name="f.csv", download_url="/download")
    await repository.update(job)

    stored = await repository.get_by_id(job.id)
    assert stored.is_completed()
    assert stored.record_count == 2


@pytest.mark.asyncio
async def test_get_by_id_unknown_job(repository):
    assert await repository.get_by_id("export_missing") is None


@pytest.mark.asyncio
async def test_list_all_skips_stale_index_entries(repository, store):
    """A record that expired or vanished before its index entry is not listed"""
    kept = make_job()
    lost = make_job()
    await repository.create(kept)
    await repository.create(lost)

    await store.forget(f"export_job_{lost.id}")

    jobs = await repository.list_all()
    assert [job.id for job in jobs] == [kept.id]


@pytest.mark.asyncio
async def test_list_all_prunes_stale_index_entries(repository, store):
    kept = make_job()
    lost = make_job()
    await repository.create(kept)
    await repository.create(lost)
    await store.forget(f"export_job_{lost.id}")

    await repository.list_all()

    assert await store.get(JOB_INDEX_KEY) == [f"export_job_{kept.id}"]


@pytest.mark.asyncio
async def test_create_prunes_expired_index_entries(repository, store):
    expired = make_job()
    await repository.create(expired)
    await store.forget(f"export_job_{expired.id}")

    job = make_job()
    await repository.create(job)

    assert await store.get(JOB_INDEX_KEY) == [f"export_job_{job.id}"]


@pytest.mark.asyncio
async def test_list_all_newest_first(repository):
    now = datetime.utcnow()
    older = make_job(created_at=now - timedelta(minutes=5))
    newer = make_job(created_at=now)
    await repository.create(older)
    await repository.create(newer)

    jobs = await repository.list_all()

    assert [job.id for job in jobs] == [newer.id, older.id]
