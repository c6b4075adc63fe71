"""Settings API Routes

System control window, portal settings, email settings and cache reset.
"""
from fastapi import APIRouter, Depends
from src.app.services.audit_service import AuditService
from src.app.services.settings_service import SettingsService
from src.depends import get_settings_service, get_audit_service, get_current_user, require_permission
from src.app.use_cases.settings import (
    GetSystemControlUseCase,
    UpdateSystemControlUseCase,
    GetSystemSettingsUseCase,
    UpdateSystemSettingsUseCase,
    GetEmailSettingsUseCase,
    UpdateEmailSettingsUseCase,
    ClearCacheUseCase,
    SystemStatusDTO,
    UpdateSystemControlRequest,
    UpdateSystemControlCommand,
    UpdateSystemControlResponseDTO,
    SettingsDTO,
    UpdateSystemSettingsRequest,
    UpdateEmailSettingsRequest,
    UpdateSettingsCommand,
    UpdateSettingsResponseDTO,
    ClearCacheResponseDTO,
)

router = APIRouter()


@router.get("/control", response_model=SystemStatusDTO)
async def get_control(
    current_user: dict = Depends(get_current_user),
    settings_service: SettingsService = Depends(get_settings_service),
):
    result = await GetSystemControlUseCase(settings_service).execute()
    return result.value


@router.post("/control", response_model=UpdateSystemControlResponseDTO)
async def update_control(
    request: UpdateSystemControlRequest,
    current_user: dict = Depends(require_permission("canManageSystem")),
    settings_service: SettingsService = Depends(get_settings_service),
    audit_service: AuditService = Depends(get_audit_service),
):
    use_case = UpdateSystemControlUseCase(settings_service, audit_service)
    result = await use_case.execute(
        UpdateSystemControlCommand(**request.model_dump(), actor_id=current_user["user_id"])
    )
    return result.value


@router.get("/settings", response_model=SettingsDTO)
async def get_system_settings(
    current_user: dict = Depends(require_permission("canManageSystem")),
    settings_service: SettingsService = Depends(get_settings_service),
):
    result = await GetSystemSettingsUseCase(settings_service).execute()
    return result.value


@router.put("/settings", response_model=UpdateSettingsResponseDTO)
async def update_system_settings(
    request: UpdateSystemSettingsRequest,
    current_user: dict = Depends(require_permission("canManageSystem")),
    settings_service: SettingsService = Depends(get_settings_service),
    audit_service: AuditService = Depends(get_audit_service),
):
    use_case = UpdateSystemSettingsUseCase(settings_service, audit_service)
    result = await use_case.execute(
        UpdateSettingsCommand(values=request.model_dump(exclude_unset=True), actor_id=current_user["user_id"])
    )
    return result.value


@router.get("/email-settings", response_model=SettingsDTO)
async def get_email_settings(
    current_user: dict = Depends(require_permission("canManageSystem")),
    settings_service: SettingsService = Depends(get_settings_service),
):
    result = await GetEmailSettingsUseCase(settings_service).execute()
    return result.value


@router.put("/email-settings", response_model=UpdateSettingsResponseDTO)
async def update_email_settings(
    request: UpdateEmailSettingsRequest,
    current_user: dict = Depends(require_permission("canManageSystem")),
    settings_service: SettingsService = Depends(get_settings_service),
    audit_service: AuditService = Depends(get_audit_service),
):
    use_case = UpdateEmailSettingsUseCase(settings_service, audit_service)
    result = await use_case.execute(
        UpdateSettingsCommand(values=request.model_dump(exclude_unset=True), actor_id=current_user["user_id"])
    )
    return result.value


@router.post("/cache/clear", response_model=ClearCacheResponseDTO)
async def clear_cache(
    current_user: dict = Depends(require_permission("canManageSystem")),
    settings_service: SettingsService = Depends(get_settings_service),
):
    """Flush every stored setting, role override and export job record"""
    result = await ClearCacheUseCase(settings_service).execute()
    return result.value
