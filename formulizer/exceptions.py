"""Custom exceptions for Formulizer"""

from __future__ import annotations

from typing import Optional


class FormulizerError(Exception):
    """Base exception for all Formulizer errors"""
    pass


class ConfigurationError(FormulizerError):
    """Missing or invalid configuration"""
    pass


class RemoteCallError(FormulizerError):
    """A call to the platform service failed"""
    def __init__(self, message: str, status_code: Optional[int] = None, error_code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.error_code = error_code


class EvaluationError(RemoteCallError):
    """Formula evaluation was rejected by the platform"""
    pass


class MetadataError(RemoteCallError):
    """Queryable object list could not be retrieved"""
    pass


class ClipboardError(FormulizerError):
    """Writing to the clipboard failed"""
    pass


class UnknownFieldError(FormulizerError):
    """Form field identifier is not part of the form definition"""
    def __init__(self, field_id: str):
        super().__init__(f"Unknown form field: {field_id!r}")
        self.field_id = field_id
