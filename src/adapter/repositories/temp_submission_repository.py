from typing import List, Optional, Tuple
from sqlalchemy import func
from sqlmodel.ext.asyncio.session import AsyncSession
from sqlmodel import col, select
from src.app.repositories import TempSubmissionRepository
from src.domain import ExportFilter, NyscTempSubmission, SubmissionStatus
from ._filters import date_bounds


class SqlAlchemyTempSubmissionRepository(TempSubmissionRepository):
    """SQLAlchemy implementation of TempSubmissionRepository"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, submission_id: int) -> Optional[NyscTempSubmission]:
        statement = select(NyscTempSubmission).where(NyscTempSubmission.id == submission_id)
        result = await self.session.exec(statement)
        return result.first()

    async def count_by_status(self, status: SubmissionStatus) -> int:
        statement = select(func.count()).select_from(NyscTempSubmission).where(
            NyscTempSubmission.status == status
        )
        return (await self.session.execute(statement)).scalar_one()

    async def list_paginated(self, offset: int, limit: int) -> Tuple[List[NyscTempSubmission], int]:
        total = (
            await self.session.execute(select(func.count()).select_from(NyscTempSubmission))
        ).scalar_one()
        statement = (
            select(NyscTempSubmission)
            .order_by(col(NyscTempSubmission.created_at).desc(), col(NyscTempSubmission.id).desc())
            .offset(offset)
            .limit(limit)
        )
        result = await self.session.exec(statement)
        return list(result.all()), total

    async def find_for_export(self, filters: ExportFilter) -> List[NyscTempSubmission]:
        statement = select(NyscTempSubmission)

        bounds = date_bounds(filters)
        if bounds:
            statement = statement.where(
                NyscTempSubmission.created_at >= bounds[0],
                NyscTempSubmission.created_at < bounds[1],
            )

        statement = statement.order_by(col(NyscTempSubmission.id).asc())
        result = await self.session.exec(statement)
        submissions = list(result.all())

        # department lives inside the JSON form data
        if filters.department:
            submissions = [
                submission
                for submission in submissions
                if (submission.form_data or {}).get("department") == filters.department
            ]
        return submissions

    async def update(self, submission: NyscTempSubmission) -> NyscTempSubmission:
        self.session.add(submission)
        await self.session.flush()
        await self.session.refresh(submission)
        return submission
