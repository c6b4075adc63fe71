from fastapi import APIRouter, Depends
from src.api.error import http_error_for
from src.app.services.audit_service import AuditService
from src.app.services.unit_of_work import UnitOfWork
from src.depends import get_unit_of_work, get_audit_service, get_current_user, require_permission
from src.app.use_cases.submissions import (
    ListSubmissionsUseCase,
    GetSubmissionDetailsUseCase,
    UpdateSubmissionStatusUseCase,
    ListSubmissionsQuery,
    SubmissionListDTO,
    SubmissionDetailsDTO,
    UpdateSubmissionStatusRequest,
    UpdateSubmissionStatusCommand,
    UpdateSubmissionStatusResponseDTO,
)

router = APIRouter()


@router.get("/submissions", response_model=SubmissionListDTO)
async def list_submissions(
    page: int = 1,
    limit: int = 10,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ListSubmissionsUseCase(uow).execute(ListSubmissionsQuery(page=page, limit=limit))
    return result.value


@router.get("/submissions/{submission_id}", response_model=SubmissionDetailsDTO)
async def get_submission_details(
    submission_id: int,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await GetSubmissionDetailsUseCase(uow).execute(submission_id)

    if result.is_err():
        raise http_error_for(result.error)

    return result.value


@router.put("/submissions/{submission_id}/status", response_model=UpdateSubmissionStatusResponseDTO)
async def update_submission_status(
    submission_id: int,
    request: UpdateSubmissionStatusRequest,
    current_user: dict = Depends(require_permission("canEditTempSubmissions")),
    uow: UnitOfWork = Depends(get_unit_of_work),
    audit_service: AuditService = Depends(get_audit_service),
):
    """Approve or reject a submission; the current admin is recorded as reviewer"""
    use_case = UpdateSubmissionStatusUseCase(uow, audit_service)
    result = await use_case.execute(
        UpdateSubmissionStatusCommand(
            submission_id=submission_id,
            status=request.status,
            notes=request.notes,
            actor_id=current_user["user_id"],
        )
    )

    if result.is_err():
        raise http_error_for(result.error)

    return result.value
