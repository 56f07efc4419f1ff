"""
Custom Exceptions for the CityTeam Guests Application

Every failure surfaced to API callers is one of four kinds: the referenced
resource does not exist, the request is invalid, a uniqueness rule would be
violated, or something unexpected went wrong. Messages follow the
``"field: description"`` convention so clients can attribute the failure.
"""

from enum import Enum
from typing import Any, Dict, Optional


class ErrorCode(str, Enum):
    """Standard error codes for the application"""
    BAD_REQUEST = "BAD_REQUEST"
    FORBIDDEN = "FORBIDDEN"
    NOT_FOUND = "NOT_FOUND"
    NOT_UNIQUE = "NOT_UNIQUE"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class BaseAppException(Exception):
    """
    Base exception class for all application exceptions.

    Provides consistent error handling across the application with
    structured error information.
    """

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: Optional[Dict[str, Any]] = None,
        status_code: int = 500
    ):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.status_code = status_code
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary format"""
        return {
            "error": {
                "message": self.message,
                "code": self.error_code.value,
                "details": self.details,
                "type": self.__class__.__name__
            }
        }

    def __str__(self) -> str:
        return f"{self.error_code.value}: {self.message}"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message='{self.message}', error_code='{self.error_code.value}')"


class BadRequestError(BaseAppException):
    """Structural or semantic validation failure, or an invalid state transition"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, ErrorCode.BAD_REQUEST, details, 400)


class GuestAlreadyAssignedError(BadRequestError):
    """The guest already occupies a different mat on the same date"""

    def __init__(self, guest_id: int, mat_number: int):
        super().__init__(
            f"guestId: Guest {guest_id} is already assigned to mat {mat_number}",
            details={"guest_id": guest_id, "mat_number": mat_number},
        )
        self.guest_id = guest_id
        self.mat_number = mat_number


class ForbiddenError(BaseAppException):
    """Operation is disabled by configuration"""

    def __init__(self, message: str):
        super().__init__(message, ErrorCode.FORBIDDEN, None, 403)


class NotFoundError(BaseAppException):
    """Referenced identifier does not exist"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, ErrorCode.NOT_FOUND, details, 404)


class NotUniqueError(BaseAppException):
    """A uniqueness rule would be violated"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, ErrorCode.NOT_UNIQUE, details, 409)


class InternalServerError(BaseAppException):
    """Unexpected failure, or a call the API never supports"""

    def __init__(self, message: str = "Internal server error", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, ErrorCode.INTERNAL_ERROR, details, 500)


class MatsListError(ValueError):
    """Invalid mats list syntax, tied to the offending list item"""

    def __init__(self, message: str, item: Optional[str] = None):
        super().__init__(message)
        self.item = item


__all__ = [
    "ErrorCode",
    "BaseAppException",
    "BadRequestError",
    "GuestAlreadyAssignedError",
    "ForbiddenError",
    "NotFoundError",
    "NotUniqueError",
    "InternalServerError",
    "MatsListError",
]
