"""
Custom exception classes for better error handling
"""
from typing import Optional, Dict, Any


class ReadingTrackerException(Exception):
    """Base exception for all custom exceptions"""
    status_code: int = 500

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ValidationException(ReadingTrackerException):
    """Raised when input validation fails"""
    status_code = 400


class ResourceNotFoundException(ReadingTrackerException):
    """Raised when a requested resource is not found"""
    status_code = 404


class FirestoreException(ReadingTrackerException):
    """Raised when Firestore operations fail"""
    status_code = 500
