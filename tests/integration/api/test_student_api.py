import csv
import io
import pytest
from httpx import AsyncClient
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from src.adapter.repositories.student_repository import SqlAlchemyStudentRepository
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.domain import Student
from src.app.services.student_csv import TEMPLATE_HEADERS

STUDENTS_URL = "/api/nysc/admin/students"


@pytest.mark.asyncio
async def test_download_csv_template(client: AsyncClient):
    response = await client.get(f"{STUDENTS_URL}/csv-template")

    assert response.status_code == 200
    assert "student_import_template.csv" in response.headers["content-disposition"]
    rows = list(csv.reader(io.StringIO(response.text)))
    assert rows[0] == TEMPLATE_HEADERS
    assert len(rows) == 2


@pytest.mark.asyncio
async def test_upload_csv_creates_and_updates(client: AsyncClient, seeded):
    content = (
        ",".join(TEMPLATE_HEADERS) + "\n"
        "Adaeze,Obi,,VUG/CSC/16/1001,ada@example.com\n"
        "Tunde,Bako,,VUG/MTH/16/1003,,,Male,1996-01-02\n"
        "Missing,,,VUG/MTH/16/1004\n"
    )

    response = await client.post(
        f"{STUDENTS_URL}/upload-csv",
        files={"csv_file": ("students.csv", content.encode(), "text/csv")},
    )

    assert response.status_code == 200
    statistics = response.json()["statistics"]
    assert statistics["success_count"] == 2
    assert statistics["error_count"] == 1
    assert statistics["errors"] == ["Row 4: Missing required fields (fname, lname, matric_no)"]


@pytest.mark.asyncio
async def test_upload_rejects_other_file_types(client: AsyncClient):
    response = await client.post(
        f"{STUDENTS_URL}/upload-csv",
        files={"csv_file": ("students.pdf", b"%PDF", "application/pdf")},
    )

    assert response.status_code == 422
    assert response.json()["error"] == "VALIDATION_ERROR"


@pytest.mark.asyncio
async def test_list_students_by_payment_status(client: AsyncClient, seeded):
    paid = await client.get(STUDENTS_URL, params={"payment_status": "paid"})
    unpaid = await client.get(STUDENTS_URL, params={"payment_status": "unpaid"})

    assert paid.status_code == 200
    assert [row["matric_no"] for row in paid.json()["data"]] == ["VUG/CSC/16/1001"]
    assert unpaid.json()["total"] == 1


@pytest.mark.asyncio
async def test_student_details_not_found(client: AsyncClient, seeded):
    response = await client.get(f"{STUDENTS_URL}/9999")

    assert response.status_code == 404
    assert response.json()["error"] == "NOT_FOUND"


@pytest.mark.asyncio
async def test_upload_keeps_rows_around_a_failed_insert(client: AsyncClient, seeded, engine, monkeypatch):
    original_create = SqlAlchemyStudentRepository.create

    async def create(self, student):
        if student.matric_no == "VUG/MTH/16/1005":
            # Collides with a seeded student so the insert fails in the database
            student.matric_no = "VUG/CSC/16/1001"
        return await original_create(self, student)

    monkeypatch.setattr(SqlAlchemyStudentRepository, "create", create)
    content = (
        ",".join(TEMPLATE_HEADERS) + "\n"
        "Bola,Ade,,VUG/MTH/16/1004\n"
        "Chidi,Eke,,VUG/MTH/16/1005\n"
        "Dayo,Femi,,VUG/MTH/16/1006\n"
    )

    response = await client.post(
        f"{STUDENTS_URL}/upload-csv",
        files={"csv_file": ("students.csv", content.encode(), "text/csv")},
    )

    assert response.status_code == 200
    statistics = response.json()["statistics"]
    assert statistics["success_count"] == 2
    assert statistics["error_count"] == 1
    assert statistics["errors"][0].startswith("Row 3: ")

    async with AsyncSession(engine) as session:
        matric_numbers = (await session.exec(select(Student.matric_no))).all()
    assert sorted(matric_numbers) == [
        "VUG/CSC/16/1001", "VUG/MTH/16/1004", "VUG/MTH/16/1006", "VUG/PHY/16/1002",
    ]


@pytest.mark.asyncio
async def test_upload_rejects_non_utf8_file(client: AsyncClient):
    content = (",".join(TEMPLATE_HEADERS) + "\n" + "José,Obi,,VUG/CSC/16/1009\n").encode("latin-1")

    response = await client.post(
        f"{STUDENTS_URL}/upload-csv",
        files={"csv_file": ("students.csv", content, "text/csv")},
    )

    assert response.status_code == 422
    assert response.json()["error"] == "VALIDATION_ERROR"
    assert response.json()["message"] == "The csv file must be UTF-8 encoded"


@pytest.mark.asyncio
async def test_upload_rejects_file_over_size_limit(client: AsyncClient, monkeypatch):
    monkeypatch.setattr(ApplicationConfig, "CSV_UPLOAD_MAX_BYTES", 2048)
    content = ",".join(TEMPLATE_HEADERS) + "\n" + "Ada,Obi,,VUG/CSC/16/1001\n" * 200

    response = await client.post(
        f"{STUDENTS_URL}/upload-csv",
        files={"csv_file": ("students.csv", content.encode(), "text/csv")},
    )

    assert response.status_code == 422
    assert response.json()["message"] == "The csv file may not be greater than 2 kilobytes"


@pytest.mark.asyncio
async def test_upload_commit_failure_is_server_error(client: AsyncClient, monkeypatch):
    async def commit(self):
        raise RuntimeError("connection lost")

    monkeypatch.setattr(SqlAlchemyUnitOfWork, "commit", commit)
    content = ",".join(TEMPLATE_HEADERS) + "\n" + "Ada,Obi,,VUG/CSC/16/1009\n"

    response = await client.post(
        f"{STUDENTS_URL}/upload-csv",
        files={"csv_file": ("students.csv", content.encode(), "text/csv")},
    )

    assert response.status_code == 500
    assert response.json() == {
        "success": False,
        "message": "Failed to process CSV file",
        "error": "CSV_IMPORT_FAILED",
        "detail": "connection lost",
    }
