"""
Unit tests for CreateExportJobUseCase
"""
import pytest
from datetime import datetime
from unittest.mock import AsyncMock
from src.adapter.repositories.export_job_repository import KeyValueExportJobRepository
from src.adapter.services.local_file_storage import LocalFileStorage
from src.app.services.export_projections import STUDENT_NYSC_FIELDS
from src.app.use_cases.exports import CreateExportJobCommand, CreateExportJobUseCase
from src.domain import ExportFilter, ExportJobStatus, NyscPayment, PaymentStatus, Student, StudentNysc


@pytest.fixture
def job_repository(store):
    return KeyValueExportJobRepository(store, ttl_seconds=3600)


@pytest.fixture
def file_storage(tmp_path):
    return LocalFileStorage(base_path=str(tmp_path))


@pytest.fixture
def use_case(mock_uow, job_repository, file_storage):
    return CreateExportJobUseCase(
        mock_uow, job_repository, file_storage, "/api/nysc/admin/export-jobs/{job_id}/download"
    )


@pytest.fixture
def student_rows(mock_uow):
    """One submitted record with a directory entry and a successful payment"""
    record = StudentNysc(
        id=1, student_id=10, fname="Ada", lname="Obi", matric_no="M1", is_paid=True,
        created_at=datetime(2024, 1, 5),
    )
    mock_uow.student_nysc.find_for_export = AsyncMock(return_value=[record])
    mock_uow.students.get_by_ids = AsyncMock(
        return_value=[Student(id=10, fname="Ada", lname="Obi", matric_no="M1", email="ada@example.com")]
    )
    mock_uow.payments.latest_successful_by_student = AsyncMock(
        return_value={
            10: NyscPayment(
                id=5, student_id=10, amount=500, status=PaymentStatus.successful,
                payment_date=datetime(2024, 1, 6),
            )
        }
    )
    return [record]


@pytest.mark.asyncio
async def test_create_export_job_success(use_case, job_repository, file_storage, student_rows):
    """A valid request stores the file and completes the job"""
    # Act
    result = await use_case.execute(CreateExportJobCommand(type="student_nysc", format="csv"))

    # Assert
    assert result.is_ok()
    job = await job_repository.get_by_id(result.value.job_id)
    assert job.status == ExportJobStatus.completed
    assert job.progress == 100
    assert job.record_count == 1
    assert job.file_name == f"student_nysc_csv_{job.id}.csv"
    assert job.download_url == f"/api/nysc/admin/export-jobs/{job.id}/download"

    content = (await file_storage.read(f"exports/{job.file_name}")).decode("utf-8")
    header, row = content.splitlines()
    assert header.split(",") == STUDENT_NYSC_FIELDS
    assert "ada@example.com" in row
    assert ",Yes,500," in row


@pytest.mark.asyncio
async def test_filters_are_passed_to_repository(use_case, mock_uow, student_rows):
    filters = ExportFilter(department="Law", payment_status="paid")

    await use_case.execute(CreateExportJobCommand(type="student_nysc", format="pdf", filters=filters))

    mock_uow.student_nysc.find_for_export.assert_called_once_with(filters)


@pytest.mark.asyncio
async def test_invalid_export_type_creates_no_job(use_case, job_repository):
    result = await use_case.execute(CreateExportJobCommand(type="grades", format="csv"))

    assert result.is_err()
    assert result.error.code == "INVALID_EXPORT_TYPE"
    assert await job_repository.list_all() == []


@pytest.mark.asyncio
async def test_unsupported_format_creates_no_job(use_case, job_repository):
    result = await use_case.execute(CreateExportJobCommand(type="payments", format="docx"))

    assert result.is_err()
    assert result.error.code == "UNSUPPORTED_FORMAT"
    assert await job_repository.list_all() == []


@pytest.mark.asyncio
async def test_empty_dataset_produces_header_only_file(use_case, mock_uow, job_repository, file_storage):
    mock_uow.payments.find_for_export = AsyncMock(return_value=[])
    mock_uow.student_nysc.get_by_student_ids = AsyncMock(return_value=[])
    mock_uow.students.get_by_ids = AsyncMock(return_value=[])

    result = await use_case.execute(CreateExportJobCommand(type="payments", format="excel"))

    assert result.is_ok()
    job = await job_repository.get_by_id(result.value.job_id)
    assert job.record_count == 0
    assert job.file_name.endswith(".xlsx")
    content = await file_storage.read(f"exports/{job.file_name}")
    assert len(content.decode("utf-8").splitlines()) == 1


@pytest.mark.asyncio
async def test_generation_failure_marks_job_failed(use_case, mock_uow, job_repository):
    """A failing fetch leaves a failed job behind and reports the cause"""
    mock_uow.submissions.find_for_export = AsyncMock(side_effect=RuntimeError("database unavailable"))

    result = await use_case.execute(CreateExportJobCommand(type="submissions", format="csv"))

    assert result.is_err()
    assert result.error.code == "EXPORT_GENERATION_FAILED"
    assert result.error.reason == "database unavailable"

    jobs = await job_repository.list_all()
    assert len(jobs) == 1
    assert jobs[0].status == ExportJobStatus.failed
    assert jobs[0].error_message == "database unavailable"
