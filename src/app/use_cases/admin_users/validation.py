"""Field rules shared by admin user creation and update"""
from typing import Optional
from libs.result import Error
from src.domain import AdminRole, StaffStatus

MIN_PASSWORD_LENGTH = 6
MAX_NAME_LENGTH = 255

VALID_ROLES = {role.value for role in AdminRole}
VALID_STATUSES = {status.value for status in StaffStatus}


def _invalid(message: str) -> Error:
    return Error(code="VALIDATION_ERROR", message=message)


def validate_admin_user_fields(
    fname: Optional[str] = None,
    lname: Optional[str] = None,
    password: Optional[str] = None,
    role: Optional[str] = None,
    status: Optional[str] = None,
) -> Optional[Error]:
    """
    Check every provided field; None means "not provided"

    Returns:
        Error for the first failing field, None when all pass
    """
    for label, value in (("First name", fname), ("Last name", lname)):
        if value is None:
            continue
        if not value.strip():
            return _invalid(f"{label} is required")
        if len(value) > MAX_NAME_LENGTH:
            return _invalid(f"{label} may not be greater than {MAX_NAME_LENGTH} characters")

    if password is not None and len(password) < MIN_PASSWORD_LENGTH:
        return _invalid(f"The password must be at least {MIN_PASSWORD_LENGTH} characters")

    if role is not None and role not in VALID_ROLES:
        return _invalid(f"The selected role is invalid: {role}")

    if status is not None and status not in VALID_STATUSES:
        return _invalid(f"The selected status is invalid: {status}")

    return None
