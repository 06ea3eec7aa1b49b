"""
Error handling utilities for the launch analyzer.

This module defines the custom exception classes raised by the analyzer
and its configuration layer.
"""

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel


class ErrorCode(str, Enum):
    """Error codes for the launch analyzer."""

    # General errors
    UNKNOWN_ERROR = "UNKNOWN_ERROR"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"

    # Input errors
    INVALID_INPUT_FILE = "INVALID_INPUT_FILE"


class ErrorResponse(BaseModel):
    """Standard error payload, as printed by the CLI."""

    code: str
    message: str
    details: Optional[Dict[str, Any]] = None


class LaunchAnalyzerError(Exception):
    """Base exception for all launch analyzer errors."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.UNKNOWN_ERROR,
        details: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize a new launch analyzer error.

        Args:
            message: Error message
            code: Error code
            details: Additional error details
        """
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert the error to a dictionary.

        Returns:
            Dictionary representation of the error
        """
        return {
            "code": self.code.value,
            "message": self.message,
            "details": self.details
        }

    def to_response(self) -> ErrorResponse:
        """Convert the error to an ErrorResponse model."""
        return ErrorResponse(**self.to_dict())


class ValidationError(LaunchAnalyzerError):
    """Exception for malformed analyzer input."""

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        errors: Optional[List[Dict[str, Any]]] = None
    ):
        error_details = details or {}
        if errors:
            error_details["errors"] = errors

        super().__init__(
            message=message,
            code=ErrorCode.VALIDATION_ERROR,
            details=error_details
        )


class ConfigurationError(LaunchAnalyzerError):
    """Exception for invalid configuration values."""

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=message,
            code=ErrorCode.CONFIGURATION_ERROR,
            details=details
        )


class InputFileError(LaunchAnalyzerError):
    """Exception for unreadable or unparsable input documents."""

    def __init__(
        self,
        message: str,
        path: Optional[str] = None
    ):
        super().__init__(
            message=message,
            code=ErrorCode.INVALID_INPUT_FILE,
            details={"path": path} if path else None
        )
