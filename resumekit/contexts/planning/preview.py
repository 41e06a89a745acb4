"""
Markdown preview of a resume.

Renders the planned sections as markdown for terminal preview, mirroring the
in-browser resume preview: placeholder contact lines, curated skill labels and
named projects only.
"""

from typing import List

from resumekit.contexts.modeling.resume_record import ResumeRecord
from resumekit.contexts.planning.section_plan import (
    PREVIEW_POLICY,
    SectionDescriptor,
    SectionKind,
    plan_sections,
)


def format_list_markdown(items: List[str]) -> List[str]:
    return [f"- {item}" for item in items]


def _format_section(section: SectionDescriptor) -> List[str]:
    """Format the body of one planned section as markdown lines."""
    kind = section.kind
    lines: List[str] = []

    if kind in (SectionKind.OBJECTIVE, SectionKind.ACADEMIC_PROFILE):
        lines.append(section.items[0])
    elif kind in (SectionKind.PROFILE_SUMMARY, SectionKind.KEY_STRENGTHS):
        lines.extend(format_list_markdown(section.items))
    elif kind == SectionKind.CERTIFICATIONS:
        for cert in section.items:
            details = " | ".join(part for part in (cert.issuer, cert.year) if part)
            lines.append(f"- **{cert.name}**" + (f" ({details})" if details else ""))
    elif kind in (SectionKind.TECHNICAL_SKILLS, SectionKind.PERSONAL_PROFILE):
        lines.extend(f"- **{item.label}:** {item.value}" for item in section.items)
    elif kind == SectionKind.WORK_EXPERIENCE:
        work = section.items[0]
        sentence = f"Working as {work.position} in {work.company}"
        if work.location:
            sentence += f", {work.location}"
        if work.duration:
            sentence += f" from {work.duration}"
        lines.append(sentence + ".")
    elif kind == SectionKind.PROFESSIONAL_EXPERIENCE:
        for exp in section.items:
            lines.append(f"### Project: {exp.project_name}")
            for label, value in (
                ("Client", exp.client),
                ("Role", exp.role),
                ("Designation", exp.designation),
                ("Duration", exp.duration),
            ):
                if value:
                    lines.append(f"**{label}:** {value}  ")
            if exp.roles_responsibilities:
                lines.append("")
                lines.append("**Roles & Responsibilities:**")
                lines.extend(format_list_markdown(exp.roles_responsibilities))
            lines.append("")
    elif kind == SectionKind.DECLARATION:
        declaration = section.items[0]
        if declaration.text:
            lines.append(declaration.text)
            lines.append("")
        if declaration.date:
            lines.append(f"**Date:** {declaration.date}  ")
        if declaration.place:
            lines.append(f"**Place:** {declaration.place}  ")
        if declaration.signature:
            lines.append(f"**Signature:** {declaration.signature}")

    return lines


def render_markdown(record: ResumeRecord) -> str:
    """
    Render a markdown preview of the resume.

    Args:
        record: Resume record snapshot

    Returns:
        Markdown text with a contact header and one '##' heading per planned section
    """
    info = record.personal_info
    parts = [
        f"**Name:** {info.name or 'Your Name'}  ",
        f"**Email:** {info.email or 'your.email@example.com'}  ",
        f"**Mobile:** {info.phone or 'Your Phone'}  ",
    ]
    if info.location:
        parts.append(f"**Location:** {info.location}  ")

    for section in plan_sections(record, PREVIEW_POLICY):
        parts.append("")
        parts.append(f"## {section.title}")
        parts.append("")
        parts.extend(_format_section(section))

    return "\n".join(parts).rstrip() + "\n"
