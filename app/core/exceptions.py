from fastapi import status

class BaseAPIException(Exception):
    """
    Base class for every custom error raised by the API.
    Carries the HTTP status and the client-facing message for the envelope.
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
    """400: invalid request (missing required fields...)"""
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

class ConflictException(BaseAPIException):
    """409: a unique value is already taken"""
    def __init__(self, message: str = "Resource already exists"):
        super().__init__(
            message=message,
            status_code=status.HTTP_409_CONFLICT
        )

# =========================================================
# 2. STORAGE ERRORS
# =========================================================

class DatabaseException(BaseAPIException):
    """
    500: the database rejected the statement or could not be reached.
    The message is what the client sees; the driver error is only logged.
    """
    def __init__(self, message: str = "Database error"):
        super().__init__(
            message=message,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
        )
