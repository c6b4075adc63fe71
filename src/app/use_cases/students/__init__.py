from .dtos import (
    ListStudentsQuery,
    StudentPageDTO,
    StudentSummaryDTO,
    AllStudentsDTO,
    StudentPaymentDTO,
    StudentDetailsDTO,
    StudentDetailsResponseDTO,
    UpdateStudentRequest,
    UpdateStudentCommand,
    UpdateStudentResponseDTO,
)
from .list_students_use_case import ListStudentsUseCase
from .list_all_students_use_case import ListAllStudentsUseCase
from .get_student_details_use_case import GetStudentDetailsUseCase
from .update_student_use_case import UpdateStudentUseCase

__all__ = [
    "ListStudentsQuery",
    "StudentPageDTO",
    "StudentSummaryDTO",
    "AllStudentsDTO",
    "StudentPaymentDTO",
    "StudentDetailsDTO",
    "StudentDetailsResponseDTO",
    "UpdateStudentRequest",
    "UpdateStudentCommand",
    "UpdateStudentResponseDTO",
    "ListStudentsUseCase",
    "ListAllStudentsUseCase",
    "GetStudentDetailsUseCase",
    "UpdateStudentUseCase",
]
