from typing import List, Optional, Tuple
from sqlalchemy import func, or_
from sqlmodel.ext.asyncio.session import AsyncSession
from sqlmodel import col, select
from src.app.repositories import StudentNyscRepository
from src.domain import StudentNysc, ExportFilter
from ._filters import date_bounds

SORTABLE_COLUMNS = {
    "created_at",
    "updated_at",
    "fname",
    "lname",
    "matric_no",
    "department",
    "is_paid",
    "payment_date",
}


class SqlAlchemyStudentNyscRepository(StudentNyscRepository):
    """SQLAlchemy implementation of StudentNyscRepository"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_student_id(self, student_id: int) -> Optional[StudentNysc]:
        statement = select(StudentNysc).where(StudentNysc.student_id == student_id)
        result = await self.session.exec(statement)
        return result.first()

    async def get_by_student_id_or_id(self, identifier: int) -> Optional[StudentNysc]:
        statement = (
            select(StudentNysc)
            .where(or_(StudentNysc.student_id == identifier, StudentNysc.id == identifier))
            .order_by(col(StudentNysc.id).asc())
        )
        result = await self.session.exec(statement)
        return result.first()

    async def list_submitted(self) -> List[StudentNysc]:
        statement = (
            select(StudentNysc)
            .where(StudentNysc.is_submitted == True)  # noqa: E712
            .order_by(col(StudentNysc.created_at).desc())
        )
        result = await self.session.exec(statement)
        return list(result.all())

    async def list_all(self) -> List[StudentNysc]:
        statement = select(StudentNysc).order_by(col(StudentNysc.created_at).desc())
        result = await self.session.exec(statement)
        return list(result.all())

    async def search_submitted(
        self,
        search: Optional[str],
        is_paid: Optional[bool],
        sort_by: str,
        sort_order: str,
        offset: int,
        limit: int,
    ) -> Tuple[List[StudentNysc], int]:
        statement = select(StudentNysc).where(StudentNysc.is_submitted == True)  # noqa: E712

        if search:
            pattern = f"%{search}%"
            statement = statement.where(
                or_(
                    col(StudentNysc.fname).ilike(pattern),
                    col(StudentNysc.lname).ilike(pattern),
                    col(StudentNysc.matric_no).ilike(pattern),
                    col(StudentNysc.email).ilike(pattern),
                )
            )

        if is_paid is not None:
            statement = statement.where(StudentNysc.is_paid == is_paid)

        count_statement = select(func.count()).select_from(statement.subquery())
        total = (await self.session.execute(count_statement)).scalar_one()

        sort_column = getattr(StudentNysc, sort_by if sort_by in SORTABLE_COLUMNS else "created_at")
        ordering = col(sort_column).asc() if sort_order == "asc" else col(sort_column).desc()
        statement = statement.order_by(ordering).offset(offset).limit(limit)

        result = await self.session.exec(statement)
        return list(result.all()), total

    async def get_by_student_ids(self, student_ids: List[int]) -> List[StudentNysc]:
        if not student_ids:
            return []
        statement = select(StudentNysc).where(col(StudentNysc.student_id).in_(student_ids))
        result = await self.session.exec(statement)
        return list(result.all())

    async def find_for_export(self, filters: ExportFilter) -> List[StudentNysc]:
        statement = select(StudentNysc)

        if filters.department:
            statement = statement.where(StudentNysc.department == filters.department)
        if filters.gender:
            statement = statement.where(StudentNysc.gender == filters.gender)
        if filters.state:
            statement = statement.where(StudentNysc.state_of_origin == filters.state)
        if filters.payment_status:
            statement = statement.where(StudentNysc.is_paid == (filters.payment_status == "paid"))
        if filters.matric_numbers:
            statement = statement.where(col(StudentNysc.matric_no).in_(filters.matric_numbers))

        bounds = date_bounds(filters)
        if bounds:
            statement = statement.where(
                StudentNysc.created_at >= bounds[0], StudentNysc.created_at < bounds[1]
            )

        statement = statement.order_by(col(StudentNysc.id).asc())
        result = await self.session.exec(statement)
        return list(result.all())

    async def update(self, record: StudentNysc) -> StudentNysc:
        self.session.add(record)
        await self.session.flush()
        await self.session.refresh(record)
        return record
