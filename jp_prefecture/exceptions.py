"""
Custom exception classes for the jp_prefecture package.

Lookup failures are plain input-validation errors raised straight to the
caller. The remaining classes cover the bulk mapping tooling (loading CSV
input and writing mapping output).
"""

from typing import Optional, Dict, Any


class PrefectureError(Exception):
    """Base exception class for all prefecture errors."""

    def __init__(self, message: str, error_code: Optional[str] = None,
                 context: Optional[Dict[str, Any]] = None):
        """
        Initialize the base prefecture error.

        Args:
            message: Human-readable error message
            error_code: Optional error code for programmatic handling
            context: Optional context information about the error
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.context = context or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging/serialization."""
        return {
            'error_type': self.__class__.__name__,
            'message': self.message,
            'error_code': self.error_code,
            'context': self.context
        }


class InvalidPrefectureName(PrefectureError):
    """Raised when a name matches none of the 47 prefectures."""

    def __init__(self, name: Any):
        super().__init__(
            f"Invalid prefecture name: {name}",
            error_code='INVALID_PREFECTURE_NAME',
            context={'name': name}
        )
        self.name = name


class InvalidPrefectureCode(PrefectureError):
    """Raised when a code is not one of 1..47."""

    def __init__(self, code: Any):
        super().__init__(
            f"Invalid prefecture code: {code}",
            error_code='INVALID_PREFECTURE_CODE',
            context={'code': code}
        )
        self.code = code


class DataLoadError(PrefectureError):
    """Exception raised for data loading errors."""

    def __init__(self, message: str, file_path: Optional[str] = None,
                 column: Optional[str] = None, original_error: Optional[Exception] = None):
        """
        Initialize data load error.

        Args:
            message: Human-readable error message
            file_path: Path to the file that caused the error
            column: Column that was being read, if relevant
            original_error: Original exception that caused this error
        """
        context = {
            'file_path': file_path,
            'column': column,
            'original_error': str(original_error) if original_error else None,
            'original_error_type': type(original_error).__name__ if original_error else None
        }
        super().__init__(message, error_code='DATA_LOAD_ERROR', context=context)
        self.file_path = file_path
        self.column = column
        self.original_error = original_error


class FileAccessError(PrefectureError):
    """Exception raised for file access and I/O errors."""

    def __init__(self, message: str, file_path: str, operation: str,
                 original_error: Optional[Exception] = None):
        """
        Initialize file access error.

        Args:
            message: Human-readable error message
            file_path: Path to the file that caused the error
            operation: Type of operation that failed (read, write, create, etc.)
            original_error: Original exception that caused this error
        """
        context = {
            'file_path': file_path,
            'operation': operation,
            'original_error': str(original_error) if original_error else None,
            'original_error_type': type(original_error).__name__ if original_error else None
        }
        super().__init__(message, error_code='FILE_ACCESS_ERROR', context=context)
        self.file_path = file_path
        self.operation = operation
        self.original_error = original_error


class OutputGenerationError(PrefectureError):
    """Exception raised for errors during output generation."""

    def __init__(self, message: str, output_type: Optional[str] = None,
                 output_path: Optional[str] = None, record_count: Optional[int] = None,
                 original_error: Optional[Exception] = None):
        """
        Initialize output generation error.

        Args:
            message: Human-readable error message
            output_type: Type of output being generated (CSV, report)
            output_path: Path where output was being written
            record_count: Number of records being written
            original_error: Original exception that caused this error
        """
        context = {
            'output_type': output_type,
            'output_path': output_path,
            'record_count': record_count,
            'original_error': str(original_error) if original_error else None,
            'original_error_type': type(original_error).__name__ if original_error else None
        }
        super().__init__(message, error_code='OUTPUT_GENERATION_ERROR', context=context)
        self.output_type = output_type
        self.output_path = output_path
        self.record_count = record_count
        self.original_error = original_error


def create_file_error(operation: str, file_path: str, original_error: Exception) -> FileAccessError:
    """
    Create a standardized file access error.

    Args:
        operation: Type of file operation that failed
        file_path: Path to the file
        original_error: Original exception

    Returns:
        FileAccessError instance
    """
    message = f"Failed to {operation} file '{file_path}': {str(original_error)}"

    return FileAccessError(
        message=message,
        file_path=file_path,
        operation=operation,
        original_error=original_error
    )
