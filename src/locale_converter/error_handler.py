"""Error handling implementation for the Locale Converter."""

import logging
from typing import Optional

from .constants import DEFAULT_MAX_INPUT_SIZE
from .types import (
    ConversionError,
    EmptyInput,
    ErrorResponse,
    ErrorType,
    InputTooLarge,
    ValidationResult,
)
from .utils.validation import ValidationUtils


class ErrorHandler:
    """
    Error handler for conversion calls.

    Validates uploads before any conversion work starts and maps
    failures to the response the request layer returns: client errors
    (every ConversionError) become 400 with the message verbatim,
    anything else becomes 500.
    """

    def __init__(self, logger: Optional[logging.Logger] = None,
                 max_input_size: int = DEFAULT_MAX_INPUT_SIZE):
        """
        Initialize the error handler.

        Args:
            logger: Optional logger instance for error reporting
            max_input_size: Largest accepted upload in bytes
        """
        self.logger = logger or logging.getLogger(__name__)
        self.max_input_size = max_input_size

    def validate_input(self, raw_input: Optional[bytes]) -> ValidationResult:
        """
        Validate uploaded bytes.

        Args:
            raw_input: Uploaded payload, possibly empty

        Returns:
            ValidationResult with validation details
        """
        result = ValidationUtils.validate_raw_input(raw_input or b"", self.max_input_size)
        for error in result.errors:
            self.logger.warning(f"Rejected input: {error.message}")
        return result

    def check_input(self, raw_input: Optional[bytes]) -> None:
        """
        Validate uploaded bytes and raise on the first error.

        Raises:
            EmptyInput: If nothing was uploaded
            InputTooLarge: If the upload exceeds the size limit
        """
        result = self.validate_input(raw_input)
        if result.is_valid:
            return

        error = result.errors[0]
        if error.type == ErrorType.SIZE:
            raise InputTooLarge(error.message, context={"limit": self.max_input_size})
        raise EmptyInput(error.message)

    def handle_conversion_error(self, error: Exception) -> ErrorResponse:
        """
        Map a failed conversion to a response.

        Args:
            error: Exception raised by the conversion call

        Returns:
            ErrorResponse with status code and user-facing message
        """
        if isinstance(error, ConversionError):
            self.logger.warning(f"Conversion rejected ({error.error_type.value}): {error}")
            return ErrorResponse(
                status_code=400,
                message=error.message,
                error_type=error.error_type
            )

        self.logger.error(f"Conversion error: {error}")
        return ErrorResponse(
            status_code=500,
            message=str(error) or "Conversion failed"
        )
