"""
Fixed-page layout for the portable (PDF) encoder.

Lays out a planned resume on A4 pages with absolute text placement. The layout
is a fold over the section plan: an immutable LayoutCursor (vertical position,
page index, content bounds) is threaded through every emission step and each
step returns the advanced cursor.

Coordinates are millimetres measured from the top-left corner of the page.
The painter in paged_encoder.py converts them to PDF points.

Pagination rule: every block (a wrapped bullet, a label line, a project head)
is measured first and the cursor breaks to a new page *before* the block when
the whole block would cross the bottom limit. Blocks are never split.
"""

from dataclasses import dataclass, field, replace
from typing import Callable, Dict, List, Tuple, Union

from reportlab.lib.units import mm
from reportlab.lib.utils import simpleSplit

from resumekit.contexts.modeling.resume_record import (
    Certification,
    PersonalInfo,
    ProjectExperience,
    WorkExperience,
)
from resumekit.contexts.planning.section_plan import SectionDescriptor, SectionKind

RGB = Tuple[int, int, int]

# A4 page geometry (mm)
PAGE_WIDTH = 210.0
PAGE_HEIGHT = 297.0
MARGIN_X = 20.0
TOP_Y = 20.0
BOTTOM_Y = 277.0

TEXT_X = 25.0
NESTED_TEXT_X = 35.0
PLACE_X = 120.0
CONTENT_WIDTH = 165.0
NESTED_CONTENT_WIDTH = 155.0

# Vertical rhythm (mm)
NAME_ADVANCE = 15.0
CONTACT_ADVANCE = 7.0
PERSONAL_BLOCK_GAP = 10.0
HEADER_BAR_WIDTH = 170.0
HEADER_BAR_HEIGHT = 12.0
HEADER_BAR_RISE = 5.0
HEADER_TEXT_DROP = 3.0
HEADER_ADVANCE = 18.0
WRAPPED_LINE = 6.0
LABEL_LINE = 7.0
SUBHEAD_GAP = 3.0
ENTRY_GAP = 10.0
SECTION_GAP = 10.0
DECLARATION_GAP = 10.0
SIGNATURE_ADVANCE = 15.0

# A section header starts a new page once the cursor is past its threshold.
# Sections whose first rows should stay with the header use a higher threshold.
DEFAULT_HEADER_THRESHOLD = 250.0
HEADER_THRESHOLDS: Dict[SectionKind, float] = {
    SectionKind.TECHNICAL_SKILLS: 200.0,
    SectionKind.PROFESSIONAL_EXPERIENCE: 200.0,
    SectionKind.PERSONAL_PROFILE: 200.0,
    SectionKind.DECLARATION: 220.0,
}

FONT_REGULAR = "Helvetica"
FONT_BOLD = "Helvetica-Bold"
NAME_SIZE = 24.0
BODY_SIZE = 11.0
HEADER_SIZE = 14.0

PRIMARY_COLOR: RGB = (34, 197, 94)
TEXT_COLOR: RGB = (0, 0, 0)
HEADER_TEXT_COLOR: RGB = (255, 255, 255)

BULLET = "•"


@dataclass(frozen=True)
class LayoutCursor:
    """
    Vertical layout position.

    Attributes:
        y: Current baseline position (mm from page top)
        page: Zero-based page index
        top: Where content starts on a fresh page
        bottom: Lowest position content may reach
    """

    y: float = TOP_Y
    page: int = 0
    top: float = TOP_Y
    bottom: float = BOTTOM_Y

    @property
    def at_page_top(self) -> bool:
        return self.y <= self.top

    def advance(self, dy: float) -> "LayoutCursor":
        return replace(self, y=self.y + dy)

    def next_page(self) -> "LayoutCursor":
        return replace(self, y=self.top, page=self.page + 1)

    def fits(self, height: float) -> bool:
        return self.y + height <= self.bottom


def reserve(cursor: LayoutCursor, height: float) -> LayoutCursor:
    """
    Make room for a block of the given height.

    Returns the cursor unchanged if the block fits on the current page, or a
    cursor at the top of the next page otherwise. A block taller than a whole
    page is placed at the page top as is.
    """
    if cursor.fits(height) or cursor.at_page_top:
        return cursor
    return cursor.next_page()


def break_for_header(cursor: LayoutCursor, threshold: float) -> LayoutCursor:
    """Start a new page for a section header once the cursor is past threshold."""
    if cursor.y > threshold and not cursor.at_page_top:
        return cursor.next_page()
    return cursor


def wrap_text(text: str, width: float, font: str = FONT_REGULAR, size: float = BODY_SIZE) -> List[str]:
    """Wrap text to a width in millimetres using the font's metrics."""
    return simpleSplit(text, font, size, width * mm) or [""]


@dataclass(frozen=True)
class TextLine:
    page: int
    block: int
    x: float
    y: float
    text: str
    font: str = FONT_REGULAR
    size: float = BODY_SIZE
    color: RGB = TEXT_COLOR


@dataclass(frozen=True)
class FilledRect:
    page: int
    block: int
    x: float
    y: float
    width: float
    height: float
    color: RGB = PRIMARY_COLOR


Operation = Union[TextLine, FilledRect]


@dataclass
class PagedLayout:
    """
    Result of laying out a resume.

    Attributes:
        operations: Draw operations in paint order
        page_count: Number of pages the layout spans
    """

    operations: List[Operation] = field(default_factory=list)
    page_count: int = 1

    def text_lines(self) -> List[TextLine]:
        return [op for op in self.operations if isinstance(op, TextLine)]

    def pages_by_block(self) -> Dict[int, set]:
        """Map each block id to the set of pages its operations landed on."""
        pages: Dict[int, set] = {}
        for op in self.operations:
            pages.setdefault(op.block, set()).add(op.page)
        return pages


class PageComposer:
    """Collects draw operations; every method takes a cursor and returns the advanced one."""

    def __init__(self):
        self.operations: List[Operation] = []
        self._block = 0

    def new_block(self) -> int:
        self._block += 1
        return self._block

    def text(
        self,
        cursor: LayoutCursor,
        block: int,
        x: float,
        text: str,
        font: str = FONT_REGULAR,
        size: float = BODY_SIZE,
        color: RGB = TEXT_COLOR,
    ) -> None:
        self.operations.append(
            TextLine(page=cursor.page, block=block, x=x, y=cursor.y, text=text, font=font, size=size, color=color)
        )

    def header(self, cursor: LayoutCursor, title: str, threshold: float) -> LayoutCursor:
        """Colored bar with the section title in light text on top."""
        cursor = break_for_header(cursor, threshold)
        block = self.new_block()
        self.operations.append(
            FilledRect(
                page=cursor.page,
                block=block,
                x=MARGIN_X,
                y=cursor.y - HEADER_BAR_RISE,
                width=HEADER_BAR_WIDTH,
                height=HEADER_BAR_HEIGHT,
            )
        )
        self.operations.append(
            TextLine(
                page=cursor.page,
                block=block,
                x=TEXT_X,
                y=cursor.y + HEADER_TEXT_DROP,
                text=title,
                size=HEADER_SIZE,
                color=HEADER_TEXT_COLOR,
            )
        )
        return cursor.advance(HEADER_ADVANCE)

    def wrapped(
        self,
        cursor: LayoutCursor,
        text: str,
        x: float = TEXT_X,
        width: float = CONTENT_WIDTH,
        line_height: float = WRAPPED_LINE,
        font: str = FONT_REGULAR,
    ) -> LayoutCursor:
        """Wrap text, reserve room for all of its lines, then emit them as one block."""
        lines = wrap_text(text, width, font)
        cursor = reserve(cursor, len(lines) * line_height)
        block = self.new_block()
        for line in lines:
            self.text(cursor, block, x, line, font=font)
            cursor = cursor.advance(line_height)
        return cursor


def certification_line(cert: Certification) -> str:
    line = cert.name
    if cert.issuer:
        line += f" - {cert.issuer}"
    if cert.year:
        line += f" ({cert.year})"
    return line


def work_sentence(work: WorkExperience) -> str:
    line = " at ".join(part for part in (work.position, work.company) if part)
    if work.location:
        line = f"{line}, {work.location}" if line else work.location
    if work.duration:
        line = f"{line} ({work.duration})" if line else work.duration
    return line


def layout_personal_info(composer: PageComposer, cursor: LayoutCursor, info: PersonalInfo) -> LayoutCursor:
    """Name in large type, then the contact lines that are present."""
    block = composer.new_block()
    composer.text(cursor, block, MARGIN_X, info.name, size=NAME_SIZE, color=PRIMARY_COLOR)
    cursor = cursor.advance(NAME_ADVANCE)

    for label, value in (("Email", info.email), ("Phone", info.phone), ("Location", info.location)):
        if value:
            composer.text(cursor, block, MARGIN_X, f"{label}: {value}")
            cursor = cursor.advance(CONTACT_ADVANCE)

    return cursor.advance(PERSONAL_BLOCK_GAP)


# Section body layouts


def _layout_bullets(composer: PageComposer, cursor: LayoutCursor, items: List[str]) -> LayoutCursor:
    for item in items:
        cursor = composer.wrapped(cursor, f"{BULLET} {item}")
    return cursor


def _layout_text_items(composer: PageComposer, cursor: LayoutCursor, section: SectionDescriptor) -> LayoutCursor:
    return _layout_bullets(composer, cursor, section.items)


def _layout_certifications(composer: PageComposer, cursor: LayoutCursor, section: SectionDescriptor) -> LayoutCursor:
    return _layout_bullets(composer, cursor, [certification_line(cert) for cert in section.items])


def _layout_work_experience(composer: PageComposer, cursor: LayoutCursor, section: SectionDescriptor) -> LayoutCursor:
    return _layout_bullets(composer, cursor, [work_sentence(section.items[0])])


def _layout_skills(composer: PageComposer, cursor: LayoutCursor, section: SectionDescriptor) -> LayoutCursor:
    for item in section.items:
        cursor = composer.wrapped(cursor, f"{BULLET} {item.label}: {item.value}", line_height=LABEL_LINE)
    return cursor


def _layout_profile(composer: PageComposer, cursor: LayoutCursor, section: SectionDescriptor) -> LayoutCursor:
    for item in section.items:
        cursor = composer.wrapped(cursor, f"{item.label}: {item.value}", line_height=LABEL_LINE)
    return cursor


def _project_head(exp: ProjectExperience) -> List[Tuple[str, str]]:
    return [
        (f"Project: {exp.project_name}", FONT_BOLD),
        (f"Client: {exp.client}", FONT_REGULAR),
        (f"Role: {exp.role}", FONT_REGULAR),
        (f"Designation: {exp.designation}", FONT_REGULAR),
        (f"Duration: {exp.duration}", FONT_REGULAR),
    ]


def _layout_project(composer: PageComposer, cursor: LayoutCursor, exp: ProjectExperience) -> LayoutCursor:
    head = _project_head(exp)
    head_height = len(head) * LABEL_LINE + SUBHEAD_GAP + LABEL_LINE

    # Project lines and the responsibilities sub-header stay together
    cursor = reserve(cursor, head_height)
    block = composer.new_block()
    for text, font in head:
        composer.text(cursor, block, TEXT_X, text, font=font)
        cursor = cursor.advance(LABEL_LINE)
    cursor = cursor.advance(SUBHEAD_GAP)
    composer.text(cursor, block, TEXT_X, "Roles & Responsibilities:", font=FONT_BOLD)
    cursor = cursor.advance(LABEL_LINE)

    for responsibility in exp.roles_responsibilities:
        cursor = composer.wrapped(
            cursor, f"{BULLET} {responsibility}", x=NESTED_TEXT_X, width=NESTED_CONTENT_WIDTH
        )
    return cursor


def _layout_professional_experience(
    composer: PageComposer, cursor: LayoutCursor, section: SectionDescriptor
) -> LayoutCursor:
    for index, exp in enumerate(section.items):
        if index:
            cursor = cursor.advance(ENTRY_GAP)
        cursor = _layout_project(composer, cursor, exp)
    return cursor


def _layout_declaration(composer: PageComposer, cursor: LayoutCursor, section: SectionDescriptor) -> LayoutCursor:
    declaration = section.items[0]
    cursor = composer.wrapped(cursor, declaration.text)
    cursor = cursor.advance(DECLARATION_GAP)

    # Date, place and signature are printed even when empty
    cursor = reserve(cursor, SIGNATURE_ADVANCE + LABEL_LINE)
    block = composer.new_block()
    composer.text(cursor, block, TEXT_X, f"Date: {declaration.date}")
    composer.text(cursor, block, PLACE_X, f"Place: {declaration.place}")
    cursor = cursor.advance(SIGNATURE_ADVANCE)
    composer.text(cursor, block, TEXT_X, f"Signature: {declaration.signature}")
    return cursor.advance(LABEL_LINE)


SECTION_LAYOUTS: Dict[SectionKind, Callable[[PageComposer, LayoutCursor, SectionDescriptor], LayoutCursor]] = {
    SectionKind.OBJECTIVE: _layout_text_items,
    SectionKind.PROFILE_SUMMARY: _layout_text_items,
    SectionKind.ACADEMIC_PROFILE: _layout_text_items,
    SectionKind.CERTIFICATIONS: _layout_certifications,
    SectionKind.TECHNICAL_SKILLS: _layout_skills,
    SectionKind.WORK_EXPERIENCE: _layout_work_experience,
    SectionKind.PROFESSIONAL_EXPERIENCE: _layout_professional_experience,
    SectionKind.KEY_STRENGTHS: _layout_text_items,
    SectionKind.PERSONAL_PROFILE: _layout_profile,
    SectionKind.DECLARATION: _layout_declaration,
}


def layout_paged(info: PersonalInfo, plan: List[SectionDescriptor]) -> PagedLayout:
    """
    Lay out the personal block and every planned section.

    Args:
        info: Contact block printed at the top of page one
        plan: Planned sections (PAGED_POLICY)

    Returns:
        PagedLayout with draw operations and the page count
    """
    composer = PageComposer()
    cursor = layout_personal_info(composer, LayoutCursor(), info)

    for section in plan:
        threshold = HEADER_THRESHOLDS.get(section.kind, DEFAULT_HEADER_THRESHOLD)
        cursor = composer.header(cursor, section.title, threshold)
        cursor = SECTION_LAYOUTS[section.kind](composer, cursor, section)
        cursor = cursor.advance(SECTION_GAP)

    return PagedLayout(operations=composer.operations, page_count=cursor.page + 1)
