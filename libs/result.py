"""Result type returned by every use case

Expected failures travel as an Error with a machine-readable code rather
than as exceptions; the API layer maps the code to an HTTP status.
"""
from dataclasses import dataclass
from typing import Any, Dict, Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass
class Error:
    code: str
    message: str
    reason: Optional[str] = None

    def to_payload(self) -> Dict[str, Any]:
        """Error body sent to API clients"""
        payload = {"success": False, "message": self.message, "error": self.code}
        if self.reason:
            payload["detail"] = self.reason
        return payload


class Result(Generic[T]):
    def __init__(self, value: Optional[T] = None, error: Optional[Error] = None):
        self._value = value
        self._error = error

    def is_ok(self) -> bool:
        return self._error is None

    def is_err(self) -> bool:
        return self._error is not None

    @property
    def value(self) -> T:
        return self._value

    @property
    def error(self) -> Error:
        return self._error


class Return:
    @staticmethod
    def ok(value: T) -> Result[T]:
        return Result(value=value)

    @staticmethod
    def err(error: Error) -> Result[Any]:
        return Result(error=error)
