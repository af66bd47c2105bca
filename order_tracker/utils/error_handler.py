"""
Custom error handling.

Defines the application's exception hierarchy and helpers for
consistent error logging.
"""

import logging
import traceback
from datetime import UTC, datetime
from enum import Enum
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


class ErrorCode(Enum):
    """
    Standardized error codes.
    """

    # General
    UNKNOWN_ERROR = "UNKNOWN_ERROR"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"

    # Tracking endpoint
    LOOKUP_TRANSPORT_FAILED = "LOOKUP_TRANSPORT_FAILED"
    LOOKUP_HTTP_STATUS = "LOOKUP_HTTP_STATUS"
    LOOKUP_PARSE_FAILED = "LOOKUP_PARSE_FAILED"


class ErrorSeverity(Enum):
    """
    Error severity levels.
    """

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class AppException(Exception):
    """
    Base exception for every application error.
    """

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.UNKNOWN_ERROR,
        details: Optional[Dict[str, Any]] = None,
        severity: ErrorSeverity = ErrorSeverity.MEDIUM,
        is_retryable: bool = False,
    ):
        """
        Initialize the exception.

        Args:
            message: Error message
            error_code: Standardized error code
            details: Extra error information
            severity: Error severity
            is_retryable: Whether the operation could be retried
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.severity = severity
        self.is_retryable = is_retryable
        self.timestamp = datetime.now(UTC)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert the exception to a dictionary.

        Returns:
            Dict: Exception representation
        """
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "error_code": self.error_code.value,
            "details": self.details,
            "severity": self.severity.value,
            "is_retryable": self.is_retryable,
            "timestamp": self.timestamp.isoformat(),
        }

    def __str__(self) -> str:
        return f"{self.error_code.value}: {self.message}"


class ValidationException(AppException):
    """
    Raised when operator or file input fails validation.
    """

    def __init__(
        self,
        message: str,
        field: str,
        invalid_value: Any = None,
        expected_format: Optional[str] = None,
        **kwargs,
    ):
        """
        Initialize the validation exception.

        Args:
            message: Error message
            field: Field that failed validation
            invalid_value: Offending value
            expected_format: Expected format
            **kwargs: Extra arguments for AppException
        """
        super().__init__(
            message=message,
            error_code=ErrorCode.VALIDATION_ERROR,
            severity=ErrorSeverity.LOW,
            **kwargs,
        )
        self.field = field
        self.invalid_value = invalid_value
        self.expected_format = expected_format

        self.details.update(
            {
                "field": field,
                "invalid_value": str(invalid_value) if invalid_value is not None else None,
                "expected_format": expected_format,
            }
        )


class LookupTransportException(AppException):
    """
    Network-level failure or non-2xx status from the tracking endpoint.
    """

    def __init__(
        self,
        message: str,
        order_id: Optional[str] = None,
        status_code: Optional[int] = None,
        **kwargs,
    ):
        """
        Initialize the transport exception.

        Args:
            message: Error message
            order_id: Order number being looked up
            status_code: HTTP status when a response was received
            **kwargs: Extra arguments for AppException
        """
        super().__init__(
            message=message,
            error_code=ErrorCode.LOOKUP_HTTP_STATUS if status_code is not None else ErrorCode.LOOKUP_TRANSPORT_FAILED,
            severity=ErrorSeverity.MEDIUM,
            is_retryable=True,
            **kwargs,
        )
        self.order_id = order_id
        self.status_code = status_code
        self.details.update({"order_id": order_id, "status_code": status_code})


class ConfigurationException(AppException):
    """
    Raised when the application settings cannot be loaded.
    """

    def __init__(self, message: str, setting: Optional[str] = None, **kwargs):
        super().__init__(
            message=message,
            error_code=ErrorCode.CONFIGURATION_ERROR,
            severity=ErrorSeverity.HIGH,
            **kwargs,
        )
        self.setting = setting
        self.details.update({"setting": setting})


class LookupParseException(AppException):
    """
    The tracking endpoint answered with a body we cannot interpret.
    """

    def __init__(self, message: str, order_id: Optional[str] = None, **kwargs):
        super().__init__(
            message=message,
            error_code=ErrorCode.LOOKUP_PARSE_FAILED,
            severity=ErrorSeverity.MEDIUM,
            **kwargs,
        )
        self.order_id = order_id
        self.details.update({"order_id": order_id})


def log_error(
    exception: Exception,
    context: Optional[Dict[str, Any]] = None,
    level: int = logging.ERROR,
) -> None:
    """
    Log an error consistently.

    Args:
        exception: Exception to log
        context: Extra context
        level: Logging level
    """
    context = context or {}

    log_data = {
        "exception_type": type(exception).__name__,
        "exception_message": str(exception),
        "traceback": "".join(traceback.format_exception(exception)),
        **context,
    }

    if isinstance(exception, AppException):
        message = f"{exception.error_code.value}: {exception.message}"
        log_data.update(
            {
                "error_code": exception.error_code.value,
                "severity": exception.severity.value,
                "is_retryable": exception.is_retryable,
            }
        )
    else:
        message = f"Unhandled exception: {type(exception).__name__}: {str(exception)}"

    logger.log(level, message, extra=log_data)
