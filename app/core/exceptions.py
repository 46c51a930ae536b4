from fastapi import status


class BaseAPIException(Exception):
    """
    Base class for every custom error raised by the service.

    The handler in app.core.handlers writes `message` as a plain-text body
    with `status_code`.
    """
    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
    ):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)

# =========================================================
# 1. COMMON ERRORS
# =========================================================

class BadRequestException(BaseAPIException):
    """400: the request body could not be decoded"""
    def __init__(self, message: str = "Bad Request"):
        super().__init__(
            message=message,
            status_code=status.HTTP_400_BAD_REQUEST
        )

class NotFoundException(BaseAPIException):
    """404: resource not found"""
    def __init__(self, message: str = "Resource not found"):
        super().__init__(
            message=message,
            status_code=status.HTTP_404_NOT_FOUND
        )

class InternalServerError(BaseAPIException):
    """500: unclassified failure"""
    def __init__(self, message: str = "internal server error"):
        super().__init__(
            message=message,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
        )

# =========================================================
# 2. STORAGE ERRORS
# =========================================================

class DataNotFoundError(NotFoundException):
    """
    404: no student matches the requested NIM.
    """
    def __init__(self, message: str = "data not found"):
        super().__init__(message=message)

class StorageError(InternalServerError):
    """
    500: the database rejected a statement (constraint violation, missing
    table, unusable connection...). `message` is the driver's own text.
    """
    def __init__(self, message: str):
        super().__init__(message=message)
