"""Custom exceptions for the modeling context."""

from typing import Optional


class InvalidResumeRecordError(ValueError):
    """
    Exception raised when resume input does not match the ResumeRecord shape.

    Raised for structural problems only (a list where a mapping is expected and
    vice versa). Empty or missing values are valid: every section is optional.

    Attributes:
        message: Error description
        field_path: Dotted wire path of the offending field (e.g. 'technicalSkills')
    """

    def __init__(self, message: str, field_path: Optional[str] = None):
        self.message = message
        self.field_path = field_path

        if field_path:
            message = f"{message} (at '{field_path}')"

        super().__init__(message)
