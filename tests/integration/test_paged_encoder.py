"""
Integration tests for the PDF encoder - builds real PDFs and extracts their text.
"""

import asyncio
import re

import pytest

from resumekit.contexts.exporting.paged_encoder import encode_paged
from resumekit.utils.document_text import page_count, pdf_text


def _squash(text: str) -> str:
    """Drop all whitespace so wrapped lines compare equal to the source value."""
    return re.sub(r"\s+", "", text)


def _pages(record):
    blob = asyncio.run(encode_paged(record))
    assert blob.startswith(b"%PDF")
    return blob, pdf_text(blob)


@pytest.mark.integration
def test_empty_record_is_one_page(empty_record):
    blob, pages = _pages(empty_record)

    assert page_count(blob) == 1
    assert len(pages) == 1


@pytest.mark.integration
def test_full_record_field_fidelity(full_record):
    _, pages = _pages(full_record)
    text = _squash("".join("".join(lines) for lines in pages))

    info = full_record.personal_info
    values = [
        info.name,
        info.email,
        info.phone,
        info.location,
        info.objective,
        full_record.academic_profile,
        full_record.declaration.text,
        full_record.declaration.signature,
        "Cloud Platform:AWS,Azure",
        "LanguagesKnown:English,Hindi,Marathi",
        "AWSCertifiedSolutionsArchitect-AmazonWebServices(2021)",
        "CertifiedKubernetesAdministrator-CNCF",
    ]
    values += [item for item in full_record.profile_summary if item]
    values += full_record.strengths
    for exp in full_record.professional_experience:
        values += [exp.client, exp.role, exp.designation, exp.duration]
        values += exp.roles_responsibilities

    for value in values:
        assert _squash(value) in text


@pytest.mark.integration
def test_all_projects_and_signature_are_rendered(full_record):
    _, pages = _pages(full_record)
    lines = [line for page in pages for line in page]

    assert sum(1 for line in lines if line.startswith("Roles & Responsibilities:")) == 2
    assert any("Internal Tools Group" in line for line in lines)
    assert any(line.startswith("Signature:") for line in lines)


@pytest.mark.integration
def test_section_headers_appear_once(full_record):
    _, pages = _pages(full_record)
    lines = [line.strip() for page in pages for line in page]

    for title in ("OBJECTIVE", "TECHNICAL SKILLS", "PROFESSIONAL EXPERIENCE", "DECLARATION"):
        assert lines.count(title) == 1


@pytest.mark.integration
def test_long_record_spans_multiple_pages(long_record):
    blob, pages = _pages(long_record)

    assert page_count(blob) == len(pages) > 1
    strengths = [line for page in pages for line in page if "Strength number" in line]
    assert len(strengths) == 60
