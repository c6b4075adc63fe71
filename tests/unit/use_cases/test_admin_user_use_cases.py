"""
Unit tests for the admin user use cases
"""
import pytest
from datetime import datetime
from unittest.mock import AsyncMock, MagicMock
from pydantic import ValidationError
from src.app.use_cases.admin_users import (
    CreateAdminUserCommand,
    CreateAdminUserUseCase,
    DeleteAdminUserCommand,
    DeleteAdminUserUseCase,
    ListAdminUsersQuery,
    ListAdminUsersUseCase,
    UpdateAdminUserCommand,
    UpdateAdminUserUseCase,
)
from src.domain import Staff


@pytest.fixture
def password_hasher():
    hasher = MagicMock()
    hasher.hash = MagicMock(side_effect=lambda password: f"hashed:{password}")
    return hasher


def make_staff(staff_id, email="staff@example.com", status="active"):
    now = datetime.utcnow()
    return Staff(
        id=staff_id, fname="Grace", lname="Eze", email=email, password="hashed:old",
        status=status, created_at=now, updated_at=now,
    )


def create_command(**overrides):
    values = dict(
        fname="Grace", lname="Eze", email="grace@example.com", password="secret1",
        role="sub_admin", status="active", actor_id="596",
    )
    values.update(overrides)
    return CreateAdminUserCommand(**values)


@pytest.mark.asyncio
async def test_list_admin_users_resolves_roles(mock_uow, role_resolver):
    # Arrange
    mock_uow.staff.search = AsyncMock(
        return_value=[make_staff(596), make_staff(120, email="m@example.com", status="suspended")]
    )
    await role_resolver.assign_role(120, "admin")

    # Act
    result = await ListAdminUsersUseCase(mock_uow, role_resolver).execute(ListAdminUsersQuery(search="e"))

    # Assert
    assert result.is_ok()
    super_admin, overridden = result.value.users
    assert super_admin.role == "super_admin"
    assert super_admin.permissions["canAssignRoles"] is True
    assert overridden.role == "admin"
    assert overridden.status == "inactive"
    assert overridden.name == "Grace Eze"
    mock_uow.staff.search.assert_called_once_with(search="e", status=None)


@pytest.mark.asyncio
async def test_create_admin_user_success(mock_uow, role_resolver, password_hasher, mock_audit_service):
    mock_uow.staff.get_by_email = AsyncMock(return_value=None)

    async def assign_id(staff):
        staff.id = 321
        return staff

    mock_uow.staff.create = AsyncMock(side_effect=assign_id)
    use_case = CreateAdminUserUseCase(mock_uow, role_resolver, password_hasher, mock_audit_service)

    result = await use_case.execute(create_command())

    assert result.is_ok()
    user = result.value.user
    assert user.id == 321
    assert user.role == "sub_admin"
    assert user.permissions["canDeleteStudentNysc"] is False
    created_staff = mock_uow.staff.create.call_args[0][0]
    assert created_staff.password == "hashed:secret1"
    assert await role_resolver.resolve_role(321) == "sub_admin"
    mock_uow.commit.assert_called_once()
    mock_audit_service.log_event.assert_called_once()
    assert mock_audit_service.log_event.call_args.kwargs["event_type"] == "admin_user_created"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "overrides",
    [
        {"password": "12345"},
        {"role": "owner"},
        {"status": "suspended"},
        {"fname": ""},
    ],
)
async def test_create_admin_user_validation(mock_uow, role_resolver, password_hasher, mock_audit_service, overrides):
    mock_uow.staff.create = AsyncMock()
    use_case = CreateAdminUserUseCase(mock_uow, role_resolver, password_hasher, mock_audit_service)

    result = await use_case.execute(create_command(**overrides))

    assert result.is_err()
    assert result.error.code == "VALIDATION_ERROR"
    mock_uow.staff.create.assert_not_called()


@pytest.mark.parametrize("email", ["not-an-email", "@example.com", "grace@"])
def test_admin_user_commands_reject_malformed_email(email):
    with pytest.raises(ValidationError):
        create_command(email=email)
    with pytest.raises(ValidationError):
        UpdateAdminUserCommand(staff_id=450, email=email, actor_id="596")


@pytest.mark.asyncio
async def test_create_admin_user_duplicate_email(mock_uow, role_resolver, password_hasher, mock_audit_service):
    mock_uow.staff.get_by_email = AsyncMock(return_value=make_staff(5, email="grace@example.com"))
    mock_uow.staff.create = AsyncMock()
    use_case = CreateAdminUserUseCase(mock_uow, role_resolver, password_hasher, mock_audit_service)

    result = await use_case.execute(create_command())

    assert result.is_err()
    assert result.error.code == "VALIDATION_ERROR"
    mock_uow.staff.create.assert_not_called()


@pytest.mark.asyncio
async def test_update_admin_user_keeps_password_when_empty(mock_uow, role_resolver, password_hasher, mock_audit_service):
    staff = make_staff(450)
    mock_uow.staff.get_by_id = AsyncMock(return_value=staff)
    mock_uow.staff.update = AsyncMock(side_effect=lambda s: s)
    use_case = UpdateAdminUserUseCase(mock_uow, role_resolver, password_hasher, mock_audit_service)

    result = await use_case.execute(
        UpdateAdminUserCommand(staff_id=450, fname="Grace", password="", actor_id="596")
    )

    assert result.is_ok()
    assert staff.password == "hashed:old"
    assert result.value.user.role == "sub_admin"
    password_hasher.hash.assert_not_called()


@pytest.mark.asyncio
async def test_update_admin_user_rewrites_role_and_password(mock_uow, role_resolver, password_hasher, mock_audit_service):
    staff = make_staff(450)
    mock_uow.staff.get_by_id = AsyncMock(return_value=staff)
    mock_uow.staff.update = AsyncMock(side_effect=lambda s: s)
    use_case = UpdateAdminUserUseCase(mock_uow, role_resolver, password_hasher, mock_audit_service)

    result = await use_case.execute(
        UpdateAdminUserCommand(staff_id=450, role="manager", password="newsecret", actor_id="596")
    )

    assert result.is_ok()
    assert result.value.user.role == "manager"
    assert staff.password == "hashed:newsecret"
    assert await role_resolver.resolve_role(450) == "manager"


@pytest.mark.asyncio
async def test_update_admin_user_email_taken_by_another(mock_uow, role_resolver, password_hasher, mock_audit_service):
    mock_uow.staff.get_by_id = AsyncMock(return_value=make_staff(450, email="grace@example.com"))
    mock_uow.staff.get_by_email = AsyncMock(return_value=make_staff(451, email="taken@example.com"))
    mock_uow.staff.update = AsyncMock()
    use_case = UpdateAdminUserUseCase(mock_uow, role_resolver, password_hasher, mock_audit_service)

    result = await use_case.execute(
        UpdateAdminUserCommand(staff_id=450, email="taken@example.com", actor_id="596")
    )

    assert result.is_err()
    assert result.error.code == "VALIDATION_ERROR"
    mock_uow.staff.update.assert_not_called()


@pytest.mark.asyncio
async def test_update_unknown_admin_user(mock_uow, role_resolver, password_hasher, mock_audit_service):
    mock_uow.staff.get_by_id = AsyncMock(return_value=None)
    use_case = UpdateAdminUserUseCase(mock_uow, role_resolver, password_hasher, mock_audit_service)

    result = await use_case.execute(UpdateAdminUserCommand(staff_id=9, fname="X", actor_id="596"))

    assert result.is_err()
    assert result.error.code == "NOT_FOUND"


@pytest.mark.asyncio
async def test_delete_super_admin_is_forbidden(mock_uow, role_resolver, mock_audit_service):
    mock_uow.staff.get_by_id = AsyncMock(return_value=make_staff(596))
    mock_uow.staff.delete = AsyncMock()

    result = await DeleteAdminUserUseCase(mock_uow, role_resolver, mock_audit_service).execute(
        DeleteAdminUserCommand(staff_id=596, actor_id="596")
    )

    assert result.is_err()
    assert result.error.code == "FORBIDDEN"
    mock_uow.staff.delete.assert_not_called()


@pytest.mark.asyncio
async def test_delete_admin_user_removes_override(mock_uow, role_resolver, store, mock_audit_service):
    staff = make_staff(120)
    mock_uow.staff.get_by_id = AsyncMock(return_value=staff)
    mock_uow.staff.delete = AsyncMock()
    await role_resolver.assign_role(120, "admin")

    result = await DeleteAdminUserUseCase(mock_uow, role_resolver, mock_audit_service).execute(
        DeleteAdminUserCommand(staff_id=120, actor_id="596")
    )

    assert result.is_ok()
    mock_uow.staff.delete.assert_called_once_with(staff)
    assert await store.get("user_role_120") is None


@pytest.mark.asyncio
async def test_delete_unknown_admin_user(mock_uow, role_resolver, mock_audit_service):
    mock_uow.staff.get_by_id = AsyncMock(return_value=None)

    result = await DeleteAdminUserUseCase(mock_uow, role_resolver, mock_audit_service).execute(
        DeleteAdminUserCommand(staff_id=7, actor_id="596")
    )

    assert result.is_err()
    assert result.error.code == "NOT_FOUND"
