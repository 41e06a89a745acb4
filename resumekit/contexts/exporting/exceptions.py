"""Custom exceptions for the exporting context."""

from typing import Optional


class AssetFetchError(Exception):
    """
    Exception raised when a static asset needed by an encoder cannot be retrieved.

    The DOCX encoder cannot build its header without the badge image, so this
    aborts the whole export; no partial document is produced.

    Attributes:
        message: Error description
        location: URL or path that was fetched
        original_error: The underlying transport or file-system error
    """

    def __init__(
        self,
        message: str,
        location: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.location = location
        self.original_error = original_error

        parts = [message]

        if location:
            parts.append(f"Location: {location}")

        if original_error:
            parts.append(f"Original error: {original_error}")

        super().__init__("\n".join(parts))
