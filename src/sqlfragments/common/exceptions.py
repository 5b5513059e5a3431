from enum import Enum
from typing import Any, Dict, Optional


class ErrorCode(Enum):
    """Standard error codes for sqlfragments.

    The package raises a single exception class and tells error kinds
    apart by code. Each category has its own prefix.

    Attributes:
        VALIDATION_*: Invalid arguments passed to the builder or fragments
        BUILDER_*: Builder used out of sequence
    """
    # Validation errors
    VALIDATION_ERROR = "VALIDATION_001"
    INVALID_OPERAND = "VALIDATION_002"

    # Builder state errors
    BUILDER_NOT_STARTED = "BUILDER_001"


class FragmentError(Exception):
    """Base exception for all sqlfragments errors.

    Attributes:
        message: Error message
        error_code: Error code from ErrorCode enum
        details: Additional error details
        cause: Optional underlying exception
    """

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.VALIDATION_ERROR,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None,
    ):
        """Initialize the error.

        Args:
            message: Error message
            error_code: Error code from ErrorCode enum
            details: Additional error details
            cause: Optional underlying exception
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.cause = cause

        # Lazy import, logging imports settings which imports this module
        from sqlfragments.logging import get_logger
        logger = get_logger(__name__)
        logger.error(
            message,
            extra={
                "error_code": error_code.value,
                "details": self.details,
            },
            exc_info=cause is not None,
        )

    def __str__(self) -> str:
        """String representation of the error."""
        msg = f"[{self.error_code.value}] {self.message}"
        if self.cause:
            msg = f"{msg} (caused by: {type(self.cause).__name__}: {str(self.cause)})"
        return msg

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for serialization."""
        return {
            "type": self.__class__.__name__,
            "message": self.message,
            "error_code": self.error_code.value,
            "error_name": self.error_code.name,
            "details": self.details,
        }


# Helper functions for common error scenarios
def validation_error(
    message: str,
    field: Optional[str] = None,
    value: Any = None,
    **kwargs
) -> FragmentError:
    """Create a validation error.

    Args:
        message: Error message
        field: Field that failed validation
        value: Invalid value
        **kwargs: Additional error details

    Returns:
        FragmentError with VALIDATION_ERROR code
    """
    details = kwargs.get('details', {})
    if field:
        details["field"] = field
    if value is not None:
        details["value"] = str(value)

    return FragmentError(
        message=message,
        error_code=ErrorCode.VALIDATION_ERROR,
        details=details,
        **{k: v for k, v in kwargs.items() if k != 'details'}
    )


def invalid_operand_error(value: Any, **kwargs) -> FragmentError:
    """Create an error for a value that cannot become a fragment.

    Args:
        value: The rejected operand
        **kwargs: Additional error details

    Returns:
        FragmentError with INVALID_OPERAND code
    """
    details = kwargs.get('details', {})
    details["operand_type"] = type(value).__name__

    return FragmentError(
        message=(
            f"Cannot use {type(value).__name__} as a SQL operand. "
            "Expected text, a number or a Fragment."
        ),
        error_code=ErrorCode.INVALID_OPERAND,
        details=details,
        **{k: v for k, v in kwargs.items() if k != 'details'}
    )


def builder_not_started_error(operation: str, **kwargs) -> FragmentError:
    """Create an error for a clause added before any statement was started.

    Args:
        operation: Name of the clause operation that was called
        **kwargs: Additional error details

    Returns:
        FragmentError with BUILDER_NOT_STARTED code
    """
    details = kwargs.get('details', {})
    details["operation"] = operation

    return FragmentError(
        message=(
            f"Cannot call {operation}() before a statement is started. "
            "Call select(), insert(), update() or delete() first."
        ),
        error_code=ErrorCode.BUILDER_NOT_STARTED,
        details=details,
        **{k: v for k, v in kwargs.items() if k != 'details'}
    )
