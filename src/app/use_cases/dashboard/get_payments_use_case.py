from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.settings_service import LATE_FEE, REGISTRATION_FEE
from .dtos import PaymentRowDTO, PaymentStatisticsDTO, PaymentsDTO

NOT_AVAILABLE = "N/A"


class GetPaymentsUseCase:
    """Use case for the payments ledger and fee statistics"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> Result[PaymentsDTO]:
        async with self.uow:
            payments = await self.uow.payments.list_all()
            student_ids = list({payment.student_id for payment in payments})
            records = {
                record.student_id: record
                for record in await self.uow.student_nysc.get_by_student_ids(student_ids)
            }
            students = {student.id: student for student in await self.uow.students.get_by_ids(student_ids)}

        rows = []
        for payment in payments:
            record = records.get(payment.student_id)
            student = students.get(payment.student_id)
            rows.append(
                PaymentRowDTO(
                    id=payment.id,
                    student_id=payment.student_id,
                    student_name=(
                        " ".join(part for part in (record.fname, record.mname, record.lname) if part)
                        if record
                        else NOT_AVAILABLE
                    ),
                    matric_number=(record.matric_no or NOT_AVAILABLE) if record else NOT_AVAILABLE,
                    email=(student.email or NOT_AVAILABLE) if student else NOT_AVAILABLE,
                    department=(record.department or NOT_AVAILABLE) if record else NOT_AVAILABLE,
                    amount=payment.amount,
                    payment_method=payment.payment_method or "paystack",
                    payment_status=str(getattr(payment.status, "value", payment.status)),
                    transaction_reference=payment.payment_reference,
                    payment_date=payment.payment_date,
                    created_at=payment.created_at,
                    updated_at=payment.updated_at,
                )
            )

        successful = [payment for payment in payments if payment.is_successful()]
        statistics = PaymentStatisticsDTO(
            total_amount=sum(payment.amount for payment in successful),
            standard_fee_count=sum(1 for payment in successful if payment.amount == REGISTRATION_FEE),
            late_fee_count=sum(1 for payment in successful if payment.amount == LATE_FEE),
        )

        return Return.ok(PaymentsDTO(payments=rows, total=len(rows), statistics=statistics))
