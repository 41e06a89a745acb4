"""
Resume Section Plan

Pure function from a ResumeRecord to the ordered list of sections a document
should contain. Both encoders (and the markdown preview) consume the plan, so
inclusion rules, label tables and entry filters are defined here once and the
encoders only decide how each section looks.

The encoders do not render identical content. The known divergences are
expressed as PlanPolicy settings rather than hidden in encoder code:

- Technical-skill labels: RICH_POLICY derives them mechanically from the field
  identifier (cloudPlatform -> "cloud Platform"); PAGED_POLICY uses the
  curated table ("Cloud Platform").
- Professional experience: RICH_POLICY keeps only entries with a project name;
  PAGED_POLICY keeps every entry.
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, List

from resumekit.contexts.modeling.resume_record import ResumeRecord


class SectionKind(str, Enum):
    """Resume sections, in the fixed order they are rendered."""

    OBJECTIVE = "objective"
    PROFILE_SUMMARY = "profile_summary"
    ACADEMIC_PROFILE = "academic_profile"
    CERTIFICATIONS = "certifications"
    TECHNICAL_SKILLS = "technical_skills"
    WORK_EXPERIENCE = "work_experience"
    PROFESSIONAL_EXPERIENCE = "professional_experience"
    KEY_STRENGTHS = "key_strengths"
    PERSONAL_PROFILE = "personal_profile"
    DECLARATION = "declaration"


SECTION_TITLES: Dict[SectionKind, str] = {
    SectionKind.OBJECTIVE: "OBJECTIVE",
    SectionKind.PROFILE_SUMMARY: "PROFILE SUMMARY",
    SectionKind.ACADEMIC_PROFILE: "ACADEMIC PROFILE",
    SectionKind.CERTIFICATIONS: "CERTIFICATIONS",
    SectionKind.TECHNICAL_SKILLS: "TECHNICAL SKILLS",
    SectionKind.WORK_EXPERIENCE: "WORK EXPERIENCE",
    SectionKind.PROFESSIONAL_EXPERIENCE: "PROFESSIONAL EXPERIENCE",
    SectionKind.KEY_STRENGTHS: "KEY STRENGTHS",
    SectionKind.PERSONAL_PROFILE: "PERSONAL PROFILE",
    SectionKind.DECLARATION: "DECLARATION",
}

CURATED_SKILL_LABELS: Dict[str, str] = {
    "operatingSystem": "Operating System",
    "cloudPlatform": "Cloud Platform",
    "orchestration": "Orchestration",
    "ticketingTools": "Ticketing Tools",
    "cicd": "CI/CD",
    "iaac": "IaaC",
    "versionControl": "Version Control",
    "scripting": "Scripting",
}

# Personal-profile labels keyed by wire key
RICH_PROFILE_LABELS: Dict[str, str] = {
    "fatherName": "Father Name",
    "dob": "Date of Birth",
    "nationality": "Nationality",
    "languages": "Languages",
    "maritalStatus": "Marital Status",
}

PAGED_PROFILE_LABELS: Dict[str, str] = {
    "fatherName": "Father's Name",
    "dob": "Date of Birth",
    "nationality": "Nationality",
    "languages": "Languages Known",
    "maritalStatus": "Marital Status",
}


def derive_skill_label(key: str) -> str:
    """
    Derive a skill label by inserting a space before every capital letter.

    The first letter is left lowercase on purpose: cloudPlatform -> "cloud Platform",
    cicd -> "cicd".
    """
    return re.sub(r"([A-Z])", r" \1", key)


def curated_skill_label(key: str) -> str:
    """Look up the curated label for a skill field (falls back to the derived one)."""
    return CURATED_SKILL_LABELS.get(key, derive_skill_label(key))


@dataclass(frozen=True)
class LabeledValue:
    label: str
    value: str


@dataclass(frozen=True)
class PlanPolicy:
    """
    Encoder-specific rules applied while planning.

    Attributes:
        name: Policy identifier (for logging)
        skill_label: Maps a technical-skill wire key to its display label
        profile_labels: Personal-profile display labels by wire key
        require_project_name: Drop professional-experience entries without a project name
    """

    name: str
    skill_label: Callable[[str], str]
    profile_labels: Dict[str, str]
    require_project_name: bool


RICH_POLICY = PlanPolicy(
    name="rich",
    skill_label=derive_skill_label,
    profile_labels=RICH_PROFILE_LABELS,
    require_project_name=True,
)

PAGED_POLICY = PlanPolicy(
    name="paged",
    skill_label=curated_skill_label,
    profile_labels=PAGED_PROFILE_LABELS,
    require_project_name=False,
)

PREVIEW_POLICY = PlanPolicy(
    name="preview",
    skill_label=curated_skill_label,
    profile_labels=PAGED_PROFILE_LABELS,
    require_project_name=True,
)


@dataclass
class SectionDescriptor:
    """
    One planned section.

    Item types by kind:
        OBJECTIVE, ACADEMIC_PROFILE: [str] (single item)
        PROFILE_SUMMARY, KEY_STRENGTHS: List[str]
        CERTIFICATIONS: List[Certification] (named entries only)
        TECHNICAL_SKILLS, PERSONAL_PROFILE: List[LabeledValue] (non-empty fields only)
        WORK_EXPERIENCE: [WorkExperience]
        PROFESSIONAL_EXPERIENCE: List[ProjectExperience]
        DECLARATION: [Declaration]
    """

    kind: SectionKind
    items: List[Any] = field(default_factory=list)

    @property
    def title(self) -> str:
        return SECTION_TITLES[self.kind]


def _labeled(values: Dict[str, str], labels: Callable[[str], str]) -> List[LabeledValue]:
    return [LabeledValue(labels(key), value) for key, value in values.items() if value]


def plan_sections(record: ResumeRecord, policy: PlanPolicy) -> List[SectionDescriptor]:
    """
    Plan the sections of a resume document.

    A section is planned iff at least one of its fields or items is non-empty;
    empty sections are left out entirely (no header, no placeholder). Sections
    come back in SectionKind order and list items keep the record's order.

    Args:
        record: Resume record snapshot
        policy: Encoder-specific labels and filters

    Returns:
        Ordered list of SectionDescriptor for the included sections
    """
    plan: List[SectionDescriptor] = []

    def include(kind: SectionKind, items: List[Any], when: bool) -> None:
        if when:
            plan.append(SectionDescriptor(kind=kind, items=items))

    objective = record.personal_info.objective
    include(SectionKind.OBJECTIVE, [objective], bool(objective))

    include(
        SectionKind.PROFILE_SUMMARY,
        list(record.profile_summary),
        any(record.profile_summary),
    )

    include(SectionKind.ACADEMIC_PROFILE, [record.academic_profile], bool(record.academic_profile))

    named_certifications = [cert for cert in record.certifications if cert.name]
    include(SectionKind.CERTIFICATIONS, named_certifications, bool(named_certifications))

    skills = _labeled(dict(record.technical_skills), policy.skill_label)
    include(SectionKind.TECHNICAL_SKILLS, skills, bool(skills))

    work = record.work_experience
    include(SectionKind.WORK_EXPERIENCE, [work], work.has_content())

    projects = list(record.professional_experience)
    if policy.require_project_name:
        projects = [exp for exp in projects if exp.project_name]
    include(
        SectionKind.PROFESSIONAL_EXPERIENCE,
        projects,
        any(exp.has_content() for exp in projects),
    )

    include(SectionKind.KEY_STRENGTHS, list(record.strengths), any(record.strengths))

    profile = _labeled(record.personal_profile.to_dict(), policy.profile_labels.__getitem__)
    include(SectionKind.PERSONAL_PROFILE, profile, bool(profile))

    declaration = record.declaration
    include(SectionKind.DECLARATION, [declaration], declaration.has_content())

    return plan


def planned_kinds(plan: List[SectionDescriptor]) -> List[SectionKind]:
    """Section kinds in plan order."""
    return [section.kind for section in plan]
