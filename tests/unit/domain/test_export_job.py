from datetime import date
from src.domain import ExportFilter, ExportFormat, ExportJob, ExportJobStatus, ExportType


def test_new_job_is_processing_with_prefixed_id():
    job = ExportJob(type=ExportType.payments, format=ExportFormat.csv)

    assert job.id.startswith("export_")
    assert job.status == ExportJobStatus.processing
    assert job.progress == 0
    assert job.download_url is None


def test_complete_sets_progress_and_file():
    job = ExportJob(type=ExportType.payments, format=ExportFormat.csv)

    job.complete(record_count=3, file_name="payments_csv_x.csv", download_url="/download")

    assert job.is_completed()
    assert job.progress == 100
    assert job.record_count == 3
    assert job.completed_at is not None


def test_fail_keeps_error_message():
    job = ExportJob(type=ExportType.payments, format=ExportFormat.pdf)

    job.fail("database unavailable")

    assert job.status == ExportJobStatus.failed
    assert job.error_message == "database unavailable"
    assert not job.is_completed()


def test_filter_accepts_camel_case_keys():
    filters = ExportFilter.model_validate(
        {
            "department": "Computer Science",
            "paymentStatus": "paid",
            "matricNumbers": ["VUG/CSC/16/1001"],
            "dateRange": {"start": "2024-01-01", "end": "2024-01-31"},
        }
    )

    assert filters.payment_status == "paid"
    assert filters.matric_numbers == ["VUG/CSC/16/1001"]
    assert filters.effective_date_range().end == date(2024, 1, 31)


def test_half_open_date_range_is_ignored():
    filters = ExportFilter.model_validate({"dateRange": {"start": "2024-01-01"}})

    assert filters.effective_date_range() is None
