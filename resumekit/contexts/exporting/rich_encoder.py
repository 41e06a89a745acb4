"""
Rich document encoder (DOCX).

Builds a word-processor resume with python-docx:
- Borderless two-column header table (contact lines left, badge image right)
- One light-green shaded header paragraph per planned section
- Section bodies as bullets, label/value lines and per-entry sub-blocks

This encoder suspends once, on the badge fetch, which may take real wall-clock
time (network). Composition and packing are CPU-only.
"""

from io import BytesIO
from typing import Callable, Dict, List, Optional

from docx import Document
from docx.document import Document as DocxDocument
from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.image.exceptions import UnrecognizedImageError
from docx.oxml import OxmlElement
from docx.oxml.ns import qn
from docx.shared import Inches, Length, Pt
from docx.table import Table
from docx.text.paragraph import Paragraph

from resumekit.contexts.exporting.assets import fetch_badge
from resumekit.contexts.exporting.delivery import DOCX_MIME_TYPE, Delivery, rich_filename
from resumekit.contexts.exporting.exceptions import AssetFetchError
from resumekit.contexts.exporting.logger import _log_debug, _log_error, _log_info
from resumekit.contexts.modeling.resume_record import PersonalInfo, ResumeRecord
from resumekit.contexts.planning.section_plan import (
    RICH_POLICY,
    SectionDescriptor,
    SectionKind,
    plan_sections,
    planned_kinds,
)

FONT_NAME = "Calibri"
NAME_SIZE = Pt(13)
BODY_SIZE = Pt(11)
SECTION_HEADER_SIZE = Pt(14)
DECLARATION_META_SIZE = Pt(10)

SECTION_FILL = "C5E1C5"
SECTION_PADDING = Pt(9)

# Header table split 70/30 over the 6.5in text width of the default template
CONTACT_CELL_WIDTH = Inches(4.55)
BADGE_CELL_WIDTH = Inches(1.95)
BADGE_WIDTH = Pt(75)
BADGE_HEIGHT = Pt(60)

BULLET = "•"


def _add_run(paragraph: Paragraph, text: str, bold: bool = False, size: Length = BODY_SIZE):
    run = paragraph.add_run(text)
    if bold:
        run.bold = True
    run.font.name = FONT_NAME
    run.font.size = size
    return run


def _add_text(document: DocxDocument, text: str) -> Paragraph:
    paragraph = document.add_paragraph()
    _add_run(paragraph, text)
    return paragraph


def _add_labeled(document: DocxDocument, label: str, value: str) -> Paragraph:
    """Bold 'Label: ' followed by the plain value."""
    paragraph = document.add_paragraph()
    _add_run(paragraph, f"{label}: ", bold=True)
    _add_run(paragraph, value)
    return paragraph


def _add_bullets(document: DocxDocument, items: List[str]) -> None:
    for item in items:
        _add_text(document, f"{BULLET} {item}")


def _remove_table_borders(table: Table) -> None:
    """Set every table border (outer and inner) to nil."""
    tbl_pr = table._tbl.tblPr
    borders = OxmlElement("w:tblBorders")
    for edge in ("top", "left", "bottom", "right", "insideH", "insideV"):
        element = OxmlElement(f"w:{edge}")
        element.set(qn("w:val"), "nil")
        borders.append(element)

    # tblBorders must precede tblLook in tblPr
    look = tbl_pr.find(qn("w:tblLook"))
    if look is not None:
        look.addprevious(borders)
    else:
        tbl_pr.append(borders)


def _shade_paragraph(paragraph: Paragraph, fill: str) -> None:
    # Must run before spacing/alignment are set so w:shd keeps its schema position
    shading = OxmlElement("w:shd")
    shading.set(qn("w:val"), "clear")
    shading.set(qn("w:color"), "auto")
    shading.set(qn("w:fill"), fill)
    paragraph._p.get_or_add_pPr().append(shading)


def add_section_header(document: DocxDocument, title: str) -> Paragraph:
    """Bold title on a light-green bar with padding above and below."""
    paragraph = document.add_paragraph()
    _shade_paragraph(paragraph, SECTION_FILL)
    paragraph.alignment = WD_ALIGN_PARAGRAPH.LEFT
    paragraph.paragraph_format.space_before = SECTION_PADDING
    paragraph.paragraph_format.space_after = SECTION_PADDING
    _add_run(paragraph, title, bold=True, size=SECTION_HEADER_SIZE)
    return paragraph


def add_header_table(document: DocxDocument, info: PersonalInfo, badge: bytes) -> Table:
    """
    Add the two-column header: contact lines left, badge right.

    All four contact lines are always printed, with an empty value when the
    field is empty.

    Raises:
        AssetFetchError: If the badge bytes are not a recognized image
    """
    table = document.add_table(rows=1, cols=2)
    _remove_table_borders(table)
    table.autofit = False

    contact_cell, badge_cell = table.rows[0].cells
    contact_cell.width = CONTACT_CELL_WIDTH
    badge_cell.width = BADGE_CELL_WIDTH

    contact_lines = [
        (f"Name: {info.name}", True, NAME_SIZE),
        (f"Email: {info.email}", False, BODY_SIZE),
        (f"Mobile: {info.phone}", False, BODY_SIZE),
        (f"Location: {info.location}", False, BODY_SIZE),
    ]
    for index, (text, bold, size) in enumerate(contact_lines):
        paragraph = contact_cell.paragraphs[0] if index == 0 else contact_cell.add_paragraph()
        _add_run(paragraph, text, bold=bold, size=size)

    paragraph = badge_cell.paragraphs[0]
    paragraph.alignment = WD_ALIGN_PARAGRAPH.CENTER
    try:
        paragraph.add_run().add_picture(BytesIO(badge), width=BADGE_WIDTH, height=BADGE_HEIGHT)
    except UnrecognizedImageError as e:
        raise AssetFetchError("Badge is not a recognized image", original_error=e) from e

    return table


# Section body writers


def _write_single(document: DocxDocument, section: SectionDescriptor) -> None:
    _add_text(document, section.items[0])


def _write_bullets(document: DocxDocument, section: SectionDescriptor) -> None:
    _add_bullets(document, section.items)


def _write_certifications(document: DocxDocument, section: SectionDescriptor) -> None:
    for cert in section.items:
        paragraph = document.add_paragraph()
        _add_run(paragraph, cert.name, bold=True)
        year = f" | {cert.year}" if cert.year else ""
        _add_run(paragraph, f" | {cert.issuer}{year}")


def _write_labeled_values(document: DocxDocument, section: SectionDescriptor) -> None:
    for item in section.items:
        _add_labeled(document, item.label, item.value)


def _write_work_experience(document: DocxDocument, section: SectionDescriptor) -> None:
    work = section.items[0]
    for label, value in (
        ("Position", work.position),
        ("Company", work.company),
        ("Location", work.location),
        ("Duration", work.duration),
    ):
        if value:
            _add_labeled(document, label, value)


def _write_professional_experience(document: DocxDocument, section: SectionDescriptor) -> None:
    for exp in section.items:
        _add_labeled(document, "Project", exp.project_name)
        for label, value in (
            ("Client", exp.client),
            ("Role", exp.role),
            ("Designation", exp.designation),
            ("Duration", exp.duration),
        ):
            if value:
                _add_labeled(document, label, value)
        if exp.roles_responsibilities:
            paragraph = document.add_paragraph()
            _add_run(paragraph, "Roles & Responsibilities:", bold=True)
            _add_bullets(document, exp.roles_responsibilities)


def _write_declaration(document: DocxDocument, section: SectionDescriptor) -> None:
    declaration = section.items[0]
    _add_text(document, declaration.text)

    # No signature line in this format
    if declaration.date or declaration.place:
        paragraph = document.add_paragraph()
        if declaration.date:
            _add_run(paragraph, f"Date: {declaration.date}     ", size=DECLARATION_META_SIZE)
        if declaration.place:
            _add_run(paragraph, f"Place: {declaration.place}", size=DECLARATION_META_SIZE)


SECTION_WRITERS: Dict[SectionKind, Callable[[DocxDocument, SectionDescriptor], None]] = {
    SectionKind.OBJECTIVE: _write_single,
    SectionKind.PROFILE_SUMMARY: _write_bullets,
    SectionKind.ACADEMIC_PROFILE: _write_single,
    SectionKind.CERTIFICATIONS: _write_certifications,
    SectionKind.TECHNICAL_SKILLS: _write_labeled_values,
    SectionKind.WORK_EXPERIENCE: _write_work_experience,
    SectionKind.PROFESSIONAL_EXPERIENCE: _write_professional_experience,
    SectionKind.KEY_STRENGTHS: _write_bullets,
    SectionKind.PERSONAL_PROFILE: _write_labeled_values,
    SectionKind.DECLARATION: _write_declaration,
}


def compose_rich_document(record: ResumeRecord, badge: bytes) -> DocxDocument:
    """
    Compose the DOCX document in memory.

    Args:
        record: Resume record snapshot
        badge: Badge image bytes for the header

    Returns:
        python-docx Document (not yet serialized)
    """
    document = Document()
    add_header_table(document, record.personal_info, badge)

    plan = plan_sections(record, RICH_POLICY)
    _log_debug(f"Planned sections: {[kind.value for kind in planned_kinds(plan)]}")

    for section in plan:
        add_section_header(document, f"{section.title}:")
        SECTION_WRITERS[section.kind](document, section)

    return document


def serialize_document(document: DocxDocument) -> Optional[bytes]:
    """Pack the document to bytes, or None if packing fails (the error is logged)."""
    buffer = BytesIO()
    try:
        document.save(buffer)
    except Exception as e:
        _log_error(f"Error creating DOCX: {e}")
        return None
    return buffer.getvalue()


async def encode_rich(
    record: ResumeRecord,
    badge_location: Optional[str] = None,
    delivery: Optional[Delivery] = None,
) -> Optional[bytes]:
    """
    Encode a resume as a DOCX document.

    Args:
        record: Resume record snapshot
        badge_location: Badge URL or path (default: BADGE_LOCATION)
        delivery: When given, the finished blob is handed over immediately as
            '<name or Resume>.docx' with no confirmation step

    Returns:
        DOCX bytes, or None if packing the document failed

    Raises:
        AssetFetchError: If the badge cannot be fetched (no partial document is produced)
    """
    badge = await fetch_badge(badge_location)
    document = compose_rich_document(record, badge)

    blob = serialize_document(document)
    if blob is None:
        return None

    _log_info(f"DOCX composed for {record.display_name} ({len(blob)} bytes)")

    if delivery is not None:
        delivery.deliver(blob, rich_filename(record), DOCX_MIME_TYPE)

    return blob
