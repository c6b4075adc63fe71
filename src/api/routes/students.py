"""Student API Routes

Student NYSC records plus the bulk CSV import.
"""
from typing import Optional
from fastapi import APIRouter, Depends, File, Response, UploadFile
from config import ApplicationConfig
from src.api.error import http_error_for
from src.app.services.audit_service import AuditService
from src.app.services.unit_of_work import UnitOfWork
from src.depends import get_unit_of_work, get_audit_service, get_current_user, require_permission
from src.app.use_cases.students import (
    ListStudentsUseCase,
    ListAllStudentsUseCase,
    GetStudentDetailsUseCase,
    UpdateStudentUseCase,
    ListStudentsQuery,
    StudentPageDTO,
    AllStudentsDTO,
    StudentDetailsResponseDTO,
    UpdateStudentRequest,
    UpdateStudentCommand,
    UpdateStudentResponseDTO,
)
from src.app.use_cases.student_import import (
    ImportStudentsCsvUseCase,
    GetCsvTemplateUseCase,
    ImportStudentsCsvCommand,
    ImportStudentsCsvResponseDTO,
)

router = APIRouter()


@router.get("/students", response_model=StudentPageDTO)
async def list_students(
    search: Optional[str] = None,
    payment_status: str = "all",
    sort_by: str = "created_at",
    sort_order: str = "desc",
    page: int = 1,
    per_page: int = 15,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Submitted records, searchable and paginated"""
    query = ListStudentsQuery(
        search=search,
        payment_status=payment_status,
        sort_by=sort_by,
        sort_order=sort_order,
        page=page,
        per_page=per_page,
    )
    result = await ListStudentsUseCase(uow).execute(query)
    return result.value


@router.get("/students/all", response_model=AllStudentsDTO)
async def list_all_students(
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ListAllStudentsUseCase(uow).execute()
    return result.value


@router.get("/students/csv-template")
async def download_csv_template(current_user: dict = Depends(get_current_user)):
    result = await GetCsvTemplateUseCase().execute()
    template = result.value
    return Response(
        content=template.content,
        media_type=template.media_type,
        headers={"Content-Disposition": f'attachment; filename="{template.file_name}"'},
    )


@router.post("/students/upload-csv", response_model=ImportStudentsCsvResponseDTO)
async def upload_csv(
    csv_file: UploadFile = File(...),
    current_user: dict = Depends(require_permission("canAddStudentNysc")),
    uow: UnitOfWork = Depends(get_unit_of_work),
    audit_service: AuditService = Depends(get_audit_service),
):
    """
    Bulk import students from a CSV upload

    Rows are matched on matric number: existing students are updated,
    the rest are created.
    """
    # One byte past the limit is enough for the size check
    content = await csv_file.read(ApplicationConfig.CSV_UPLOAD_MAX_BYTES + 1)
    use_case = ImportStudentsCsvUseCase(uow, audit_service, max_bytes=ApplicationConfig.CSV_UPLOAD_MAX_BYTES)
    result = await use_case.execute(
        ImportStudentsCsvCommand(
            file_name=csv_file.filename or "",
            content=content,
            actor_id=current_user["user_id"],
        )
    )

    if result.is_err():
        raise http_error_for(result.error)

    return result.value


@router.get("/students/{identifier}", response_model=StudentDetailsResponseDTO)
async def get_student_details(
    identifier: int,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await GetStudentDetailsUseCase(uow).execute(identifier)

    if result.is_err():
        raise http_error_for(result.error)

    return result.value


@router.put("/students/{student_id}", response_model=UpdateStudentResponseDTO)
async def update_student(
    student_id: int,
    request: UpdateStudentRequest,
    current_user: dict = Depends(require_permission("canEditStudentNysc")),
    uow: UnitOfWork = Depends(get_unit_of_work),
    audit_service: AuditService = Depends(get_audit_service),
):
    use_case = UpdateStudentUseCase(uow, audit_service)
    result = await use_case.execute(
        UpdateStudentCommand(
            student_id=student_id,
            changes=request.model_dump(exclude_unset=True),
            actor_id=current_user["user_id"],
        )
    )

    if result.is_err():
        raise http_error_for(result.error)

    return result.value
