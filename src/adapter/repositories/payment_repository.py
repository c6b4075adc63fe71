from typing import Dict, List
from sqlmodel.ext.asyncio.session import AsyncSession
from sqlmodel import col, select
from src.app.repositories import PaymentRepository
from src.domain import ExportFilter, NyscPayment, PaymentStatus, StudentNysc
from ._filters import date_bounds


class SqlAlchemyPaymentRepository(PaymentRepository):
    """SQLAlchemy implementation of PaymentRepository"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_all(self) -> List[NyscPayment]:
        statement = select(NyscPayment).order_by(
            col(NyscPayment.payment_date).desc().nulls_last(), col(NyscPayment.id).desc()
        )
        result = await self.session.exec(statement)
        return list(result.all())

    async def list_successful(self) -> List[NyscPayment]:
        statement = select(NyscPayment).where(NyscPayment.status == PaymentStatus.successful)
        result = await self.session.exec(statement)
        return list(result.all())

    async def get_by_student(self, student_id: int) -> List[NyscPayment]:
        statement = (
            select(NyscPayment)
            .where(NyscPayment.student_id == student_id)
            .order_by(col(NyscPayment.created_at).desc(), col(NyscPayment.id).desc())
        )
        result = await self.session.exec(statement)
        return list(result.all())

    async def latest_successful_by_student(self, student_ids: List[int]) -> Dict[int, NyscPayment]:
        if not student_ids:
            return {}
        statement = (
            select(NyscPayment)
            .where(
                col(NyscPayment.student_id).in_(student_ids),
                NyscPayment.status == PaymentStatus.successful,
            )
            .order_by(col(NyscPayment.payment_date).desc().nulls_last(), col(NyscPayment.id).desc())
        )
        result = await self.session.exec(statement)
        latest: Dict[int, NyscPayment] = {}
        for payment in result.all():
            # rows arrive newest first, keep the first one per student
            latest.setdefault(payment.student_id, payment)
        return latest

    async def find_for_export(self, filters: ExportFilter) -> List[NyscPayment]:
        statement = select(NyscPayment)

        if filters.department:
            statement = statement.join(
                StudentNysc, StudentNysc.student_id == NyscPayment.student_id
            ).where(StudentNysc.department == filters.department)
        if filters.payment_status:
            if filters.payment_status not in {status.value for status in PaymentStatus}:
                return []
            statement = statement.where(NyscPayment.status == filters.payment_status)

        bounds = date_bounds(filters)
        if bounds:
            statement = statement.where(
                NyscPayment.payment_date >= bounds[0], NyscPayment.payment_date < bounds[1]
            )

        statement = statement.order_by(col(NyscPayment.id).asc())
        result = await self.session.exec(statement)
        return list(result.all())
