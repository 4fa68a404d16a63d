"""Custom exceptions for the Reformed Chapter API."""
from fastapi import HTTPException


class DatabaseError(HTTPException):
    """Database-related errors."""
    def __init__(self, detail: str = "Database operation failed"):
        super().__init__(status_code=500, detail=detail)


class PaymentError(HTTPException):
    """Payment provider errors."""
    def __init__(self, detail: str = "Failed to create payment intent"):
        super().__init__(status_code=502, detail=detail)


class ValidationError(HTTPException):
    """Input validation errors."""
    def __init__(self, detail: str = "Invalid input"):
        super().__init__(status_code=400, detail=detail)
