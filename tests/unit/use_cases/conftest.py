import pytest
from unittest.mock import AsyncMock, MagicMock
from src.adapter.services.in_memory_key_value_store import InMemoryKeyValueStore
from src.app.services.role_resolver import RoleResolver


def mock_savepoint():
    savepoint = MagicMock()
    savepoint.__aenter__ = AsyncMock(return_value=savepoint)
    savepoint.__aexit__ = AsyncMock(return_value=False)
    return savepoint


@pytest.fixture
def mock_uow():
    """Create a mock unit of work"""
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()
    uow.savepoint = MagicMock(side_effect=mock_savepoint)
    uow.student_nysc = MagicMock()
    uow.students = MagicMock()
    uow.payments = MagicMock()
    uow.submissions = MagicMock()
    uow.staff = MagicMock()
    return uow


@pytest.fixture
def mock_audit_service():
    """Create a mock audit service"""
    service = MagicMock()
    service.log_event = AsyncMock()
    return service


@pytest.fixture
def store():
    return InMemoryKeyValueStore()


@pytest.fixture
def role_resolver(store):
    return RoleResolver(store)
