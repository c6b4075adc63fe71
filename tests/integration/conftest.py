import pytest_asyncio
from datetime import datetime
from unittest.mock import AsyncMock
from httpx import AsyncClient, ASGITransport
from sqlalchemy import event
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession
from src.adapter.services.in_memory_key_value_store import InMemoryKeyValueStore
from src.adapter.services.local_file_storage import LocalFileStorage
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.domain import (
    NyscPayment,
    NyscTempSubmission,
    PaymentStatus,
    Staff,
    Student,
    StudentNysc,
)

SUPER_ADMIN_ID = 596


@pytest_asyncio.fixture
async def engine(tmp_path):
    # SQLite keeps the suite self-contained; the repositories avoid Postgres-only SQL
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path}/test.db", echo=False)

    # pysqlite manages BEGIN itself and breaks SAVEPOINT; let SQLAlchemy emit it
    @event.listens_for(engine.sync_engine, "connect")
    def disable_driver_transactions(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None

    @event.listens_for(engine.sync_engine, "begin")
    def emit_begin(conn):
        conn.exec_driver_sql("BEGIN")

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
        await conn.run_sync(SQLModel.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)

    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with Session() as session:
        yield session


@pytest_asyncio.fixture
async def store():
    return InMemoryKeyValueStore()


@pytest_asyncio.fixture
async def current_user():
    """Mutable so a test can act as another staff member"""
    return {"user_id": str(SUPER_ADMIN_ID)}


@pytest_asyncio.fixture
async def client(engine, store, current_user, tmp_path):
    from src.api.app import create_app
    from config import ApplicationConfig
    from src.depends import (
        get_audit_service,
        get_current_user,
        get_file_storage,
        get_key_value_store,
        get_unit_of_work,
    )

    app = create_app(ApplicationConfig)

    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    # Override to create a new session per request
    async def override_get_unit_of_work():
        async with Session() as session:
            yield SqlAlchemyUnitOfWork(session)

    async def override_get_audit_service():
        return AsyncMock()

    async def override_get_current_user():
        return current_user

    def override_get_key_value_store():
        return store

    def override_get_file_storage():
        return LocalFileStorage(base_path=str(tmp_path / "storage"))

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work
    app.dependency_overrides[get_audit_service] = override_get_audit_service
    app.dependency_overrides[get_current_user] = override_get_current_user
    app.dependency_overrides[get_key_value_store] = override_get_key_value_store
    app.dependency_overrides[get_file_storage] = override_get_file_storage

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def seeded(db_session):
    """Two registrations, one paid, plus a pending correction request"""
    db_session.add_all(
        [
            Student(id=1, fname="Ada", lname="Obi", matric_no="VUG/CSC/16/1001", email="ada@example.com"),
            Student(id=2, fname="John", lname="Doe", matric_no="VUG/PHY/16/1002", email="john@example.com"),
            StudentNysc(
                student_id=1, fname="Ada", lname="Obi", matric_no="VUG/CSC/16/1001",
                department="Computer Science", gender="female", is_paid=True, is_submitted=True,
                payment_amount=500, created_at=datetime(2024, 3, 1, 10, 0, 0),
            ),
            StudentNysc(
                student_id=2, fname="John", lname="Doe", matric_no="VUG/PHY/16/1002",
                department="Physics", gender="male", is_submitted=True,
                created_at=datetime(2024, 3, 5, 10, 0, 0),
            ),
            NyscPayment(
                student_id=1, amount=500, status=PaymentStatus.successful, payment_reference="REF-1",
                payment_date=datetime(2024, 3, 2, 9, 0, 0), created_at=datetime(2024, 3, 2, 9, 0, 0),
            ),
            NyscTempSubmission(
                student_id=2, form_data={"department": "Physics", "level": "400"},
                created_at=datetime(2024, 3, 6, 10, 0, 0),
            ),
            Staff(id=450, fname="Grace", lname="Eze", email="grace@example.com", password="x"),
        ]
    )
    await db_session.commit()
