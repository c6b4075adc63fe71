from .dtos import (
    ListSubmissionsQuery,
    SubmissionDTO,
    SubmissionListDTO,
    SubmissionDetailsDTO,
    UpdateSubmissionStatusRequest,
    UpdateSubmissionStatusCommand,
    UpdateSubmissionStatusResponseDTO,
)
from .list_submissions_use_case import ListSubmissionsUseCase
from .get_submission_details_use_case import GetSubmissionDetailsUseCase
from .update_submission_status_use_case import UpdateSubmissionStatusUseCase

__all__ = [
    "ListSubmissionsQuery",
    "SubmissionDTO",
    "SubmissionListDTO",
    "SubmissionDetailsDTO",
    "UpdateSubmissionStatusRequest",
    "UpdateSubmissionStatusCommand",
    "UpdateSubmissionStatusResponseDTO",
    "ListSubmissionsUseCase",
    "GetSubmissionDetailsUseCase",
    "UpdateSubmissionStatusUseCase",
]
