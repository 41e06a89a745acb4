"""
Exporting Context

Responsibilities:
- Encodes a resume record as a DOCX document (python-docx) or paginated PDF (reportlab)
- Fetches the header badge image
- Delivers finished documents to a directory under download filenames
- Logs export activity (loguru + JSON Lines event log)

Owns: Document encoders, page layout, badge asset, file delivery
Never: Modifies the resume record
"""

from resumekit.contexts.exporting.assets import fetch_badge
from resumekit.contexts.exporting.delivery import Delivery, DirectoryDelivery, rich_filename
from resumekit.contexts.exporting.exceptions import AssetFetchError
from resumekit.contexts.exporting.exporter import ExportResult, export_resume
from resumekit.contexts.exporting.layout import LayoutCursor, PagedLayout, layout_paged
from resumekit.contexts.exporting.paged_encoder import encode_paged, paint_layout
from resumekit.contexts.exporting.rich_encoder import encode_rich

__all__ = [
    # Encoders
    "encode_rich",
    "encode_paged",
    "paint_layout",
    "layout_paged",
    "LayoutCursor",
    "PagedLayout",
    # Orchestration
    "export_resume",
    "ExportResult",
    # Collaborators
    "fetch_badge",
    "Delivery",
    "DirectoryDelivery",
    "rich_filename",
    "AssetFetchError",
]
