"""
Planning Context

Responsibilities:
- Decides which resume sections are included (inclusion predicate)
- Owns label tables and entry filters shared by all encoders
- Renders a markdown preview of the planned resume

Owns: Section plan, encoder policies, markdown preview
Never: Produces binary documents
"""

from resumekit.contexts.planning.preview import render_markdown
from resumekit.contexts.planning.section_plan import (
    PAGED_POLICY,
    PREVIEW_POLICY,
    RICH_POLICY,
    LabeledValue,
    PlanPolicy,
    SectionDescriptor,
    SectionKind,
    derive_skill_label,
    plan_sections,
)

__all__ = [
    "plan_sections",
    "SectionDescriptor",
    "SectionKind",
    "LabeledValue",
    "PlanPolicy",
    "RICH_POLICY",
    "PAGED_POLICY",
    "PREVIEW_POLICY",
    "derive_skill_label",
    "render_markdown",
]
