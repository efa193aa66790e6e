"""Custom exceptions for the application"""
from typing import Optional, Dict, Any


class AppException(Exception):
    """Base exception for the application"""
    def __init__(
        self,
        message: str,
        code: str = "APP_ERROR",
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class NotFoundError(AppException):
    """Resource not found"""
    def __init__(self, message: str = "Resource not found", details: Optional[Dict[str, Any]] = None):
        super().__init__(message=message, code="NOT_FOUND", status_code=404, details=details)


class ValidationError(AppException):
    """Validation error"""
    def __init__(self, message: str = "Invalid request", details: Optional[Dict[str, Any]] = None):
        super().__init__(message=message, code="VALIDATION_ERROR", status_code=422, details=details)


class StorageError(AppException):
    """Storage statement failed"""
    def __init__(self, message: str = "Storage operation failed", details: Optional[Dict[str, Any]] = None):
        super().__init__(message=message, code="STORAGE_ERROR", status_code=500, details=details)


class StorageTimeoutError(AppException):
    """Storage statement did not complete in time"""
    def __init__(self, message: str = "Storage operation timed out", details: Optional[Dict[str, Any]] = None):
        super().__init__(message=message, code="STORAGE_TIMEOUT", status_code=504, details=details)
