"""Unit tests for section planning, label rules and encoder policies."""

import pytest

from resumekit.contexts.modeling import ResumeRecord
from resumekit.contexts.planning import (
    PAGED_POLICY,
    PREVIEW_POLICY,
    RICH_POLICY,
    SectionKind,
    derive_skill_label,
    plan_sections,
)
from resumekit.contexts.planning.section_plan import curated_skill_label, planned_kinds

# One record per section kind, holding just enough data for that section alone
SINGLE_SECTION_RECORDS = [
    (SectionKind.OBJECTIVE, {"personalInfo": {"objective": "Grow"}}),
    (SectionKind.PROFILE_SUMMARY, {"profileSummary": ["", "Eight years"]}),
    (SectionKind.ACADEMIC_PROFILE, {"academicProfile": "B.E."}),
    (SectionKind.CERTIFICATIONS, {"certifications": [{"name": "CKA"}]}),
    (SectionKind.TECHNICAL_SKILLS, {"technicalSkills": {"scripting": "Bash"}}),
    (SectionKind.WORK_EXPERIENCE, {"workExperience": {"duration": "2021"}}),
    (SectionKind.PROFESSIONAL_EXPERIENCE, {"professionalExperience": [{"projectName": "Atlas"}]}),
    (SectionKind.KEY_STRENGTHS, {"strengths": ["Calm"]}),
    (SectionKind.PERSONAL_PROFILE, {"personalProfile": {"nationality": "Indian"}}),
    (SectionKind.DECLARATION, {"declaration": {"place": "Pune"}}),
]


@pytest.mark.unit
@pytest.mark.parametrize("policy", [RICH_POLICY, PAGED_POLICY, PREVIEW_POLICY], ids=lambda p: p.name)
def test_empty_record_plans_no_sections(empty_record, policy):
    assert plan_sections(empty_record, policy) == []


@pytest.mark.unit
@pytest.mark.parametrize("policy", [RICH_POLICY, PAGED_POLICY], ids=lambda p: p.name)
@pytest.mark.parametrize(
    "kind, data", SINGLE_SECTION_RECORDS, ids=[kind.value for kind, _ in SINGLE_SECTION_RECORDS]
)
def test_single_non_empty_field_plans_only_its_section(kind, data, policy):
    record = ResumeRecord.from_dict(data)

    assert planned_kinds(plan_sections(record, policy)) == [kind]


@pytest.mark.unit
def test_full_record_plans_every_section_in_order(full_record):
    kinds = planned_kinds(plan_sections(full_record, PAGED_POLICY))

    assert kinds == list(SectionKind)


@pytest.mark.unit
def test_section_titles_are_uppercase(full_record):
    titles = [section.title for section in plan_sections(full_record, RICH_POLICY)]

    assert titles[0] == "OBJECTIVE"
    assert "PROFESSIONAL EXPERIENCE" in titles
    assert all(title == title.upper() and not title.endswith(":") for title in titles)


@pytest.mark.unit
def test_unnamed_certifications_are_skipped(full_record):
    plan = plan_sections(full_record, PAGED_POLICY)
    certifications = next(s for s in plan if s.kind == SectionKind.CERTIFICATIONS)

    assert [cert.id for cert in certifications.items] == ["c1", "c2"]


@pytest.mark.unit
def test_certifications_without_any_name_omit_section():
    record = ResumeRecord.from_dict({"certifications": [{"issuer": "CNCF", "year": "2020"}]})

    assert plan_sections(record, PAGED_POLICY) == []


@pytest.mark.unit
@pytest.mark.parametrize(
    "key, derived, curated",
    [
        ("cloudPlatform", "cloud Platform", "Cloud Platform"),
        ("operatingSystem", "operating System", "Operating System"),
        ("cicd", "cicd", "CI/CD"),
        ("iaac", "iaac", "IaaC"),
        ("scripting", "scripting", "Scripting"),
    ],
)
def test_skill_labels(key, derived, curated):
    assert derive_skill_label(key) == derived
    assert curated_skill_label(key) == curated


@pytest.mark.unit
def test_skill_labels_follow_policy(full_record):
    rich = next(s for s in plan_sections(full_record, RICH_POLICY) if s.kind == SectionKind.TECHNICAL_SKILLS)
    paged = next(s for s in plan_sections(full_record, PAGED_POLICY) if s.kind == SectionKind.TECHNICAL_SKILLS)

    assert rich.items[1].label == "cloud Platform"
    assert paged.items[1].label == "Cloud Platform"
    # ticketingTools is empty in the fixture
    assert len(rich.items) == len(paged.items) == 7


@pytest.mark.unit
def test_profile_labels_follow_policy(full_record):
    rich = next(s for s in plan_sections(full_record, RICH_POLICY) if s.kind == SectionKind.PERSONAL_PROFILE)
    paged = next(s for s in plan_sections(full_record, PAGED_POLICY) if s.kind == SectionKind.PERSONAL_PROFILE)

    assert [item.label for item in rich.items] == ["Father Name", "Date of Birth", "Nationality", "Languages"]
    assert [item.label for item in paged.items] == [
        "Father's Name",
        "Date of Birth",
        "Nationality",
        "Languages Known",
    ]


@pytest.mark.unit
def test_project_name_filter_differs_between_policies(full_record):
    def projects(policy):
        plan = plan_sections(full_record, policy)
        return next(s for s in plan if s.kind == SectionKind.PROFESSIONAL_EXPERIENCE).items

    assert [exp.id for exp in projects(RICH_POLICY)] == ["p1"]
    assert [exp.id for exp in projects(PREVIEW_POLICY)] == ["p1"]
    assert [exp.id for exp in projects(PAGED_POLICY)] == ["p1", "p2"]


@pytest.mark.unit
def test_only_unnamed_projects_plan_section_for_paged_policy_only():
    record = ResumeRecord.from_dict({"professionalExperience": [{"client": "Orbit Retail"}]})

    assert plan_sections(record, RICH_POLICY) == []
    assert planned_kinds(plan_sections(record, PAGED_POLICY)) == [SectionKind.PROFESSIONAL_EXPERIENCE]


@pytest.mark.unit
def test_plan_keeps_list_order(full_record):
    full_record.strengths = ["third", "first", "second"]
    plan = plan_sections(full_record, RICH_POLICY)
    strengths = next(s for s in plan if s.kind == SectionKind.KEY_STRENGTHS)

    assert strengths.items == ["third", "first", "second"]
