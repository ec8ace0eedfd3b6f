"""
Custom exceptions for the HUB3 report decoder.

Every decoding failure is a HUB3Error carrying an error code and structured
details. The string form of an error is its message followed by the details
rendered as ``key=value`` pairs, e.g.::

    Failed to parse HUB3. Unknown line record: type=123, lineno=4
"""
from typing import Any, Dict, Optional


class HUB3Error(Exception):
    """
    Base exception for all HUB3 decoding errors.

    Attributes:
        error_code: Unique error code (e.g., HUB3-100)
        message: Human-readable error message
        details: Structured error context
    """
    error_code: str = "HUB3-000"

    def __init__(
        self,
        message: str = "Failed to parse HUB3",
        details: Optional[Dict[str, Any]] = None,
        error_code: Optional[str] = None,
    ):
        self.message = message
        self.details = details or {}
        if error_code:
            self.error_code = error_code
        super().__init__(self._format())

    def _format(self) -> str:
        context = ", ".join(f"{key}={value}" for key, value in self.details.items())
        return " ".join(part for part in (self.message, context) if part)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for reporting."""
        return {
            "error": True,
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
        }


def is_hub3_error(err: BaseException) -> bool:
    """Tell HUB3 decoding errors apart from unrelated runtime faults."""
    return isinstance(err, HUB3Error)


# Document Structure Errors (HUB3-1XX)
class UnknownRecordTypeError(HUB3Error):
    """A line ends with a record type code that has no registered layout."""
    error_code = "HUB3-100"

    def __init__(self, code: str, line_number: int, **kwargs):
        self.code = code
        self.line_number = line_number
        super().__init__(
            "Failed to parse HUB3. Unknown line record:",
            details={"type": code, "lineno": line_number},
            **kwargs,
        )


class LineLengthMismatchError(HUB3Error):
    """The layout of a line does not consume exactly the whole line."""
    error_code = "HUB3-101"

    def __init__(self, offset: int, length: int, line_number: int, **kwargs):
        self.offset = offset
        self.length = length
        self.line_number = line_number
        super().__init__(
            "Parsing line record failed:",
            details={"offset": offset, "length": length, "lineno": line_number},
            **kwargs,
        )


class RecordCountMismatchError(HUB3Error):
    """The closing summary declares a record count other than its own line number."""
    error_code = "HUB3-102"

    def __init__(self, expected: int, actual: int, **kwargs):
        self.expected = expected
        self.actual = actual
        super().__init__(
            "Failed to parse HUB3. Line record count mismatch:",
            details={"actual": actual, "expected": expected},
            **kwargs,
        )


class InvalidFieldValueError(HUB3Error):
    """A numeric field holds something other than an integer."""
    error_code = "HUB3-103"

    def __init__(self, field: str, value: str, line_number: int, **kwargs):
        self.field = field
        self.value = value
        self.line_number = line_number
        super().__init__(
            "Parsing line record failed. Invalid field value:",
            details={"field": field, "value": value, "lineno": line_number},
            **kwargs,
        )
