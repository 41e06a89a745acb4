"""
File delivery for exported documents.

The browser/native download shim of the web app is modelled as a Delivery:
anything that accepts a finished blob plus a filename and makes it available
to the user. DirectoryDelivery writes the blob into a local directory.
"""

import re
from pathlib import Path
from typing import Protocol, Union

from resumekit.contexts.exporting.logger import _log_info
from resumekit.contexts.modeling.resume_record import ResumeRecord

DOCX_MIME_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
PDF_MIME_TYPE = "application/pdf"

# Characters that cannot appear in a filename on common platforms
UNSAFE_FILENAME_CHARS = re.compile(r'[\\/:*?"<>|\x00-\x1f]')


class Delivery(Protocol):
    def deliver(self, blob: bytes, filename: str, mime_type: str) -> Path: ...


def safe_filename(filename: str) -> str:
    """Replace characters that are not allowed in filenames with underscores."""
    cleaned = UNSAFE_FILENAME_CHARS.sub("_", filename).strip()
    return cleaned or "Resume"


def rich_filename(record: ResumeRecord) -> str:
    """Default DOCX filename: the candidate name, or 'Resume'."""
    return f"{record.display_name}.docx"


class DirectoryDelivery:
    """
    Deliver blobs by writing them into a directory.

    Args:
        directory: Target directory (created on first delivery)
    """

    def __init__(self, directory: Union[str, Path]):
        self.directory = Path(directory)

    def deliver(self, blob: bytes, filename: str, mime_type: str) -> Path:
        self.directory.mkdir(parents=True, exist_ok=True)
        path = self.directory / safe_filename(filename)
        path.write_bytes(blob)
        _log_info(f"Saved {mime_type} ({len(blob)} bytes) to: {path}")
        return path
