from libs.result import Result, Error, Return
from src.app.services.unit_of_work import UnitOfWork
from .dtos import StudentDetailsDTO, StudentDetailsResponseDTO, StudentPaymentDTO


class GetStudentDetailsUseCase:
    """Use case for one NYSC record with its full payment history"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, identifier: int) -> Result[StudentDetailsResponseDTO]:
        """
        Get student details

        Args:
            identifier: Either the student id or the NYSC record id

        Returns:
            Result[StudentDetailsResponseDTO]: Record and payments, or NOT_FOUND
        """
        async with self.uow:
            record = await self.uow.student_nysc.get_by_student_id_or_id(identifier)
            if record is None:
                return Return.err(Error(code="NOT_FOUND", message="Student not found"))

            payments = await self.uow.payments.get_by_student(record.student_id)

        details = StudentDetailsDTO(
            **record.model_dump(
                include={
                    "id",
                    "student_id",
                    "fname",
                    "lname",
                    "mname",
                    "email",
                    "phone",
                    "matric_no",
                    "department",
                    "course_of_study",
                    "graduation_year",
                    "cgpa",
                    "gender",
                    "state_of_origin",
                    "lga",
                    "address",
                    "emergency_contact_name",
                    "emergency_contact_phone",
                    "emergency_contact_relationship",
                    "is_paid",
                    "payment_amount",
                    "payment_reference",
                    "payment_date",
                    "is_submitted",
                    "created_at",
                    "updated_at",
                }
            ),
            date_of_birth=record.dob,
            payments=[StudentPaymentDTO.from_payment(payment) for payment in payments],
        )
        return Return.ok(StudentDetailsResponseDTO(data=details))
