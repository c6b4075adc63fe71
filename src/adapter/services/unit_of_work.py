from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.services.unit_of_work import UnitOfWork
from src.adapter.repositories.student_nysc_repository import SqlAlchemyStudentNyscRepository
from src.adapter.repositories.student_repository import SqlAlchemyStudentRepository
from src.adapter.repositories.payment_repository import SqlAlchemyPaymentRepository
from src.adapter.repositories.temp_submission_repository import SqlAlchemyTempSubmissionRepository
from src.adapter.repositories.staff_repository import SqlAlchemyStaffRepository


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.student_nysc = SqlAlchemyStudentNyscRepository(self.session)
        self.students = SqlAlchemyStudentRepository(self.session)
        self.payments = SqlAlchemyPaymentRepository(self.session)
        self.submissions = SqlAlchemyTempSubmissionRepository(self.session)
        self.staff = SqlAlchemyStaffRepository(self.session)
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()

    def savepoint(self):
        return self.session.begin_nested()
