"""
Error taxonomy shared by services and the request layer
"""
from typing import Optional


class QuizServiceError(Exception):
    """Base class for errors raised by the service layer"""

    error = "service_error"
    status_code = 500

    def __init__(self, message: str, detail: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.detail = detail


class ValidationError(QuizServiceError):
    """Missing or malformed required input"""

    error = "validation_error"
    status_code = 400


class NotFound(QuizServiceError):
    """Referenced entity does not exist"""

    error = "not_found"
    status_code = 404


class StoreError(QuizServiceError):
    """The database is unreachable or rejected an operation"""

    error = "store_error"
    status_code = 500
