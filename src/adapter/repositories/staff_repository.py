from typing import List, Optional
from sqlalchemy import or_
from sqlmodel.ext.asyncio.session import AsyncSession
from sqlmodel import col, select
from src.app.repositories import StaffRepository
from src.domain import Staff


class SqlAlchemyStaffRepository(StaffRepository):
    """SQLAlchemy implementation of StaffRepository"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def search(self, search: Optional[str] = None, status: Optional[str] = None) -> List[Staff]:
        statement = select(Staff)

        if search:
            pattern = f"%{search}%"
            statement = statement.where(
                or_(
                    col(Staff.fname).ilike(pattern),
                    col(Staff.lname).ilike(pattern),
                    col(Staff.email).ilike(pattern),
                )
            )
        if status:
            statement = statement.where(Staff.status == status)

        statement = statement.order_by(col(Staff.id).asc())
        result = await self.session.exec(statement)
        return list(result.all())

    async def get_by_id(self, staff_id: int) -> Optional[Staff]:
        statement = select(Staff).where(Staff.id == staff_id)
        result = await self.session.exec(statement)
        return result.first()

    async def get_by_email(self, email: str) -> Optional[Staff]:
        statement = select(Staff).where(Staff.email == email)
        result = await self.session.exec(statement)
        return result.first()

    async def create(self, staff: Staff) -> Staff:
        self.session.add(staff)
        await self.session.flush()
        await self.session.refresh(staff)
        return staff

    async def update(self, staff: Staff) -> Staff:
        self.session.add(staff)
        await self.session.flush()
        await self.session.refresh(staff)
        return staff

    async def delete(self, staff: Staff) -> None:
        await self.session.delete(staff)
        await self.session.flush()
