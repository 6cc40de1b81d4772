"""
Custom exceptions for the application.
"""


class JezikException(Exception):
    """Base exception for all Jezik application exceptions."""
    pass


class ValidationError(JezikException):
    """Raised when validation fails."""
    pass


class NotFoundError(JezikException):
    """Raised when a requested resource is not found."""
    pass


class ConflictError(JezikException):
    """Raised when there's a conflict (e.g., duplicate entry)."""
    pass


class UpstreamError(JezikException):
    """Raised when a call to the generative AI service fails."""
    pass
