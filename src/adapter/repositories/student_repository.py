from typing import List, Optional
from sqlmodel.ext.asyncio.session import AsyncSession
from sqlmodel import col, select
from src.app.repositories import StudentRepository
from src.domain import Student


class SqlAlchemyStudentRepository(StudentRepository):
    """SQLAlchemy implementation of StudentRepository"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_matric_no(self, matric_no: str) -> Optional[Student]:
        statement = select(Student).where(Student.matric_no == matric_no)
        result = await self.session.exec(statement)
        return result.first()

    async def get_by_ids(self, student_ids: List[int]) -> List[Student]:
        if not student_ids:
            return []
        statement = select(Student).where(col(Student.id).in_(student_ids))
        result = await self.session.exec(statement)
        return list(result.all())

    async def create(self, student: Student) -> Student:
        self.session.add(student)
        await self.session.flush()
        await self.session.refresh(student)
        return student

    async def update(self, student: Student) -> Student:
        self.session.add(student)
        await self.session.flush()
        await self.session.refresh(student)
        return student
