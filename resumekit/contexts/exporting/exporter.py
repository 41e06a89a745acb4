"""
Export orchestration.

Drives one download the way the resume builder does: validate the record,
snapshot it, run the encoder for the requested format, hand the blob to the
delivery target and record the outcome in both logging tiers.
"""

import copy
import os
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Union

from dotenv import load_dotenv

from resumekit.contexts.exporting.delivery import DOCX_MIME_TYPE, PDF_MIME_TYPE, DirectoryDelivery
from resumekit.contexts.exporting.exceptions import AssetFetchError
from resumekit.contexts.exporting.logger import (
    _log_error,
    _log_warning,
    log_export_result,
    log_export_start,
)
from resumekit.contexts.exporting.paged_encoder import encode_paged
from resumekit.contexts.exporting.rich_encoder import encode_rich
from resumekit.contexts.modeling.resume_record import ResumeRecord
from resumekit.utils.document_text import page_count
from resumekit.utils.event_logging import log_export_event
from resumekit.utils.timestamp import today

load_dotenv()
EXPORTS_PATH = Path(os.getenv("RESUMEKIT_EXPORTS_PATH", "outs/exports"))

EXPORT_FORMATS = ("docx", "pdf")
MIME_TYPES = {"docx": DOCX_MIME_TYPE, "pdf": PDF_MIME_TYPE}

MISSING_NAME_MESSAGE = "Please enter your name before downloading."


@dataclass
class ExportResult:
    """
    Result of one export.

    Attributes:
        success: Whether a file was produced and delivered
        fmt: "docx" or "pdf"
        output_path: Path of the delivered file (None if failed)
        filename: Delivered filename (None if failed)
        mime_type: MIME type of the blob
        size_bytes: Blob size in bytes
        page_count: Number of pages (PDF only)
        errors: Error messages for a failed export
        elapsed_s: Wall-clock duration of the export
    """

    success: bool
    fmt: str
    output_path: Optional[Path] = None
    filename: Optional[str] = None
    mime_type: str = ""
    size_bytes: int = 0
    page_count: Optional[int] = None
    errors: List[str] = field(default_factory=list)
    elapsed_s: float = 0.0


def export_filename(record: ResumeRecord, fmt: str) -> str:
    """Download filename for a format: '<name>_Resume.docx' or '<name>_Resume_<date>.pdf'."""
    name = record.personal_info.name
    if fmt == "pdf":
        return f"{name}_Resume_{today()}.pdf"
    return f"{name}_Resume.docx"


async def _encode(record: ResumeRecord, fmt: str, badge_location: Optional[str]) -> Optional[bytes]:
    if fmt == "docx":
        return await encode_rich(record, badge_location=badge_location)
    return await encode_paged(record)


async def export_resume(
    record: ResumeRecord,
    fmt: str,
    output_dir: Optional[Union[str, Path]] = None,
    badge_location: Optional[str] = None,
    events_file: Optional[Path] = None,
) -> ExportResult:
    """
    Export a resume record to DOCX or PDF and save it to a directory.

    The record is deep-copied before encoding, so later edits to the caller's
    record cannot leak into an export in progress.

    Args:
        record: Resume record to export
        fmt: "docx" or "pdf"
        output_dir: Target directory (default: EXPORTS_PATH/YYYY-MM-DD)
        badge_location: Badge URL or path for the DOCX header (default: BADGE_LOCATION)
        events_file: Export event log (default: EXPORT_EVENTS_FILE)

    Returns:
        ExportResult with success status and file details

    Raises:
        ValueError: If fmt is not a supported format
    """
    if fmt not in EXPORT_FORMATS:
        raise ValueError(f"Unsupported export format: {fmt!r} (expected one of {EXPORT_FORMATS})")

    # Early validation before anything is logged or written
    if not record.personal_info.name.strip():
        _log_warning(MISSING_NAME_MESSAGE)
        return ExportResult(success=False, fmt=fmt, errors=[MISSING_NAME_MESSAGE])

    snapshot = copy.deepcopy(record)
    resume_name = snapshot.personal_info.name
    output_dir = Path(output_dir) if output_dir is not None else EXPORTS_PATH / today()

    log_export_start(resume_name, fmt, output_dir)
    log_export_event("export_started", resume_name, source="exporting", events_file=events_file, fmt=fmt)

    start_time = time.time()
    result = ExportResult(success=False, fmt=fmt, mime_type=MIME_TYPES[fmt])

    try:
        blob = await _encode(snapshot, fmt, badge_location)
    except AssetFetchError as e:
        result.errors.append(str(e))
        blob = None
    except Exception as e:
        # Encoder failures of either format end as a failed export, not a traceback
        _log_error(f"Error generating {fmt.upper()}: {e}")
        result.errors.append(f"Failed to generate {fmt.upper()}: {e}")
        blob = None
    else:
        if blob is None:
            result.errors.append("No file blob generated")

    if blob is not None:
        filename = export_filename(snapshot, fmt)
        result.output_path = DirectoryDelivery(output_dir).deliver(blob, filename, result.mime_type)
        result.filename = result.output_path.name
        result.size_bytes = len(blob)
        if fmt == "pdf":
            result.page_count = page_count(blob)
        result.success = True

    result.elapsed_s = time.time() - start_time
    log_export_result(resume_name, result)

    if result.success:
        log_export_event(
            "export_completed",
            resume_name,
            source="exporting",
            events_file=events_file,
            fmt=fmt,
            output_path=str(result.output_path),
            size_bytes=result.size_bytes,
            page_count=result.page_count,
            elapsed_s=round(result.elapsed_s, 2),
        )
    else:
        log_export_event(
            "export_failed",
            resume_name,
            source="exporting",
            events_file=events_file,
            fmt=fmt,
            errors=result.errors,
            elapsed_s=round(result.elapsed_s, 2),
        )

    return result
