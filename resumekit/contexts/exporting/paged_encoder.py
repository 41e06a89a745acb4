"""
Portable document encoder (PDF).

Two stages:
1. layout_paged() folds the section plan into page-tagged draw operations
2. paint_layout() replays those operations onto a reportlab canvas

Both stages are CPU-only. encode_paged() is async so that both encoders share
one calling convention.
"""

from collections import defaultdict
from io import BytesIO
from typing import Dict, List

from reportlab.lib.pagesizes import A4
from reportlab.lib.units import mm
from reportlab.pdfgen import canvas

from resumekit.contexts.exporting.layout import (
    PAGE_HEIGHT,
    FilledRect,
    Operation,
    PagedLayout,
    RGB,
    layout_paged,
)
from resumekit.contexts.exporting.logger import _log_debug, _log_info
from resumekit.contexts.modeling.resume_record import ResumeRecord
from resumekit.contexts.planning.section_plan import PAGED_POLICY, plan_sections, planned_kinds


def _fill(pdf: canvas.Canvas, color: RGB) -> None:
    red, green, blue = color
    pdf.setFillColorRGB(red / 255, green / 255, blue / 255)


def _paint(pdf: canvas.Canvas, op: Operation) -> None:
    _fill(pdf, op.color)
    if isinstance(op, FilledRect):
        # reportlab measures from the bottom-left corner
        pdf.rect(
            op.x * mm,
            (PAGE_HEIGHT - op.y - op.height) * mm,
            op.width * mm,
            op.height * mm,
            stroke=0,
            fill=1,
        )
        return

    pdf.setFont(op.font, op.size)
    pdf.drawString(op.x * mm, (PAGE_HEIGHT - op.y) * mm, op.text)


def paint_layout(layout: PagedLayout, title: str = "Resume", author: str = "") -> bytes:
    """
    Paint a layout onto A4 pages.

    Args:
        layout: Result of layout_paged()
        title: PDF document title metadata
        author: PDF author metadata

    Returns:
        PDF bytes
    """
    by_page: Dict[int, List[Operation]] = defaultdict(list)
    for op in layout.operations:
        by_page[op.page].append(op)

    buffer = BytesIO()
    pdf = canvas.Canvas(buffer, pagesize=A4)
    pdf.setTitle(title)
    pdf.setAuthor(author)

    for page in range(layout.page_count):
        for op in by_page.get(page, []):
            _paint(pdf, op)
        pdf.showPage()

    pdf.save()
    return buffer.getvalue()


async def encode_paged(record: ResumeRecord) -> bytes:
    """
    Encode a resume as a paginated PDF.

    Every project entry is rendered (no project-name filter) and the
    declaration includes the signature line.

    Args:
        record: Resume record snapshot

    Returns:
        PDF bytes. The caller decides the filename and when to save.
    """
    plan = plan_sections(record, PAGED_POLICY)
    _log_debug(f"Planned sections: {[kind.value for kind in planned_kinds(plan)]}")

    layout = layout_paged(record.personal_info, plan)
    blob = paint_layout(layout, title=f"{record.display_name} Resume", author=record.personal_info.name)

    _log_info(f"PDF composed for {record.display_name} ({layout.page_count} pages, {len(blob)} bytes)")
    return blob
