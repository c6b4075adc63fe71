from fastapi import status
from libs.result import Error


class ClientError(Exception):
    """Expected failure reported to the caller with its error code"""

    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        super().__init__(base_error.message)
        self.base_error = base_error
        self.status_code = status_code


class ServerError(Exception):
    """Failure on our side (export generation, CSV processing)"""

    def __init__(self, base_error: Error):
        super().__init__(base_error.message)
        self.base_error = base_error
        self.status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


ERROR_STATUS_CODES = {
    "VALIDATION_ERROR": status.HTTP_422_UNPROCESSABLE_ENTITY,
    "NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "INVALID_EXPORT_TYPE": status.HTTP_400_BAD_REQUEST,
    "UNSUPPORTED_FORMAT": status.HTTP_400_BAD_REQUEST,
    "FORBIDDEN": status.HTTP_403_FORBIDDEN,
    "INSUFFICIENT_PERMISSIONS": status.HTTP_403_FORBIDDEN,
    "EXPORT_GENERATION_FAILED": status.HTTP_500_INTERNAL_SERVER_ERROR,
    "CSV_IMPORT_FAILED": status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def status_for(error: Error) -> int:
    return ERROR_STATUS_CODES.get(error.code, status.HTTP_400_BAD_REQUEST)


def http_error_for(error: Error) -> Exception:
    """ServerError for 5xx codes, ClientError with the mapped status otherwise"""
    status_code = status_for(error)
    if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        return ServerError(error)
    return ClientError(error, status_code=status_code)
