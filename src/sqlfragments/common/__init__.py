"""Common exceptions for sqlfragments.

Exception Design:
    The exception system uses error codes for categorization rather than
    numerous specific exception classes. All exceptions are FragmentError
    instances carrying structured error information.

    Formatting problems (empty clauses, mismatched value lists) are not
    errors: the fragment tree renders whatever it was given. Exceptions are
    reserved for arguments that cannot be turned into fragments at all and
    for builder calls made out of sequence.
"""

from sqlfragments.common.exceptions import (
    FragmentError,
    ErrorCode,
    # Helper functions
    validation_error,
    invalid_operand_error,
    builder_not_started_error,
)

__all__ = [
    # Base Exception and Error Codes
    "FragmentError",
    "ErrorCode",
    # Helper functions
    "validation_error",
    "invalid_operand_error",
    "builder_not_started_error",
]
