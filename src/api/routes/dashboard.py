from fastapi import APIRouter, Depends
from src.app.services.settings_service import SettingsService
from src.app.services.unit_of_work import UnitOfWork
from src.depends import get_unit_of_work, get_settings_service, get_current_user, require_permission
from src.app.use_cases.dashboard import (
    GetDashboardUseCase,
    GetPaymentsUseCase,
    DashboardDTO,
    PaymentsDTO,
)

router = APIRouter()


@router.get("/dashboard", response_model=DashboardDTO)
async def get_dashboard(
    current_user: dict = Depends(require_permission("canViewAnalytics")),
    uow: UnitOfWork = Depends(get_unit_of_work),
    settings_service: SettingsService = Depends(get_settings_service),
):
    """Registration, payment and review figures for the admin home page"""
    result = await GetDashboardUseCase(uow, settings_service).execute()
    return result.value


@router.get("/payments", response_model=PaymentsDTO)
async def get_payments(
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await GetPaymentsUseCase(uow).execute()
    return result.value
