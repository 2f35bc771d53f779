# ABOUTME: Core exception classes for the wire query library
# ABOUTME: Provides structured error handling with context and error codes

from typing import Dict, Any


class CoreException(Exception):
    """Base exception class for the wire query library.

    Provides structured error handling with optional error codes and contextual
    details. All custom exceptions in the library inherit from this class
    to ensure consistent error handling patterns.

    Attributes:
        message: Human-readable error message
        code: Optional error code for programmatic handling
        details: Optional dictionary containing contextual information
    """

    def __init__(self, message: str, code: str | None = None, details: Dict[str, Any] | None = None):
        """Initialize CoreException with message, optional code and details.

        Args:
            message: Human-readable error message
            code: Optional error code for programmatic handling
            details: Optional dictionary containing contextual information
        """
        self.message = message
        self.code = code
        self.details = details.copy() if details else {}
        super().__init__(self.message)


class ValidationException(CoreException):
    """Exception raised for data validation errors.

    Used when input data fails validation checks, such as:
    - Missing required arguments
    - Values that cannot be represented on the wire
    - Type mismatches

    Should include specific details about what validation failed.
    """

    pass


class InvalidArgumentError(ValidationException, ValueError):
    """Exception raised when an operation receives an unusable argument.

    Raised by the query option mutators when the option set is missing or
    contains something other than `QueryOption` members. It is also a
    `ValueError`, so callers that only know the builtin hierarchy can catch it.
    """

    def __init__(self, message: str, code: str | None = "INVALID_ARGUMENT", details: Dict[str, Any] | None = None):
        super().__init__(message, code, details)


class WireEncodingError(ValidationException):
    """Exception raised when a value cannot be placed into a wire message field.

    Used at the encoding boundary, for example when numberToReturn or
    numberToSkip falls outside the signed 32-bit range.
    """

    pass


class FrozenQuerySpecError(CoreException):
    """Exception raised when a frozen query spec is mutated.

    Once a spec has been handed off with `freeze()`, every mutator raises this
    error and the spec keeps its values.
    """

    def __init__(self, message: str, code: str | None = "QUERY_SPEC_FROZEN", details: Dict[str, Any] | None = None):
        super().__init__(message, code, details)


class ConfigurationException(CoreException):
    """Exception raised for configuration errors.

    Used when library configuration is invalid or missing, such as:
    - Unknown read preference modes
    - Invalid configuration format
    - Environment setup issues

    Should include details about the configuration issue.
    """

    pass
