"""Unit tests for the resume record model and loader."""

import json

import pytest

from resumekit.contexts.modeling import (
    DEFAULT_DECLARATION_TEXT,
    InvalidResumeRecordError,
    ResumeRecord,
    load_resume_record,
    new_resume_record,
)
from resumekit.contexts.modeling.resume_record import TechnicalSkills, wire_key


@pytest.mark.unit
@pytest.mark.parametrize(
    "attribute, expected",
    [
        ("name", "name"),
        ("operating_system", "operatingSystem"),
        ("roles_responsibilities", "rolesResponsibilities"),
        ("project_name", "projectName"),
    ],
)
def test_wire_key(attribute, expected):
    assert wire_key(attribute) == expected


@pytest.mark.unit
def test_from_dict_fills_missing_fields_with_empty_values():
    """Test that an empty mapping yields a fully-empty record."""
    record = ResumeRecord.from_dict({})

    assert record.personal_info.name == ""
    assert record.profile_summary == []
    assert record.certifications == []
    assert record.professional_experience == []
    assert record.declaration.text == ""


@pytest.mark.unit
def test_from_dict_coerces_scalars_and_none():
    """Test that numbers become text and None becomes empty."""
    record = ResumeRecord.from_dict(
        {
            "personalInfo": {"name": "Asha", "phone": None},
            "certifications": [{"name": "CKA", "year": 2021}],
        }
    )

    assert record.personal_info.phone == ""
    assert record.certifications[0].year == "2021"


@pytest.mark.unit
def test_from_dict_rejects_wrong_container_types():
    """Test that a mapping where a list belongs raises with the field path."""
    with pytest.raises(InvalidResumeRecordError) as exc_info:
        ResumeRecord.from_dict({"strengths": {"a": "b"}})

    assert exc_info.value.field_path == "strengths"
    assert "strengths" in str(exc_info.value)


@pytest.mark.unit
def test_from_dict_rejects_nested_value_in_flat_record():
    with pytest.raises(InvalidResumeRecordError) as exc_info:
        ResumeRecord.from_dict({"technicalSkills": {"cloudPlatform": ["AWS"]}})

    assert exc_info.value.field_path == "technicalSkills.cloudPlatform"


@pytest.mark.unit
def test_to_dict_uses_wire_keys(full_record):
    data = full_record.to_dict()

    assert data["personalInfo"]["name"] == "Asha Verma"
    assert data["technicalSkills"]["cloudPlatform"] == "AWS, Azure"
    assert data["professionalExperience"][0]["rolesResponsibilities"][0].startswith("Designed")
    assert ResumeRecord.from_dict(data) == full_record


@pytest.mark.unit
def test_technical_skills_iterate_in_declaration_order():
    keys = [key for key, _ in TechnicalSkills()]

    assert keys == [
        "operatingSystem",
        "cloudPlatform",
        "orchestration",
        "ticketingTools",
        "cicd",
        "iaac",
        "versionControl",
        "scripting",
    ]


@pytest.mark.unit
def test_project_has_content_ignores_id():
    record = ResumeRecord.from_dict({"professionalExperience": [{"id": "p1"}]})

    assert not record.professional_experience[0].has_content()


@pytest.mark.unit
def test_new_resume_record_only_prefills_declaration():
    record = new_resume_record()

    assert record.declaration.text == DEFAULT_DECLARATION_TEXT
    assert record.personal_info.name == ""
    assert record.display_name == "Resume"


@pytest.mark.unit
def test_load_yaml_fixture(full_record):
    assert full_record.personal_info.name == "Asha Verma"
    assert full_record.personal_info.phone == "+91 98765 43210"
    assert full_record.personal_profile.dob == "1992-04-17"
    assert [exp.id for exp in full_record.professional_experience] == ["p1", "p2"]


@pytest.mark.unit
def test_load_json_record_under_resume_key(tmp_path):
    path = tmp_path / "record.json"
    path.write_text(json.dumps({"resume": {"personalInfo": {"name": "Ravi"}}}), encoding="utf-8")

    record = load_resume_record(path)

    assert record.personal_info.name == "Ravi"


@pytest.mark.unit
def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_resume_record(tmp_path / "missing.yaml")


@pytest.mark.unit
def test_load_unsupported_suffix(tmp_path):
    path = tmp_path / "record.txt"
    path.write_text("personalInfo: {}", encoding="utf-8")

    with pytest.raises(ValueError, match="Unsupported record format"):
        load_resume_record(path)


@pytest.mark.unit
def test_load_non_mapping_file(tmp_path):
    path = tmp_path / "record.yaml"
    path.write_text("- just\n- a list\n", encoding="utf-8")

    with pytest.raises(InvalidResumeRecordError):
        load_resume_record(path)
