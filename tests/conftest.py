"""Shared fixtures: resume records loaded from tests/fixtures."""

from pathlib import Path

import pytest

from resumekit.contexts.modeling import ResumeRecord, load_resume_record

FIXTURES_PATH = Path(__file__).parent / "fixtures"


@pytest.fixture
def full_record() -> ResumeRecord:
    return load_resume_record(FIXTURES_PATH / "resume_full.yaml")


@pytest.fixture
def empty_record() -> ResumeRecord:
    return load_resume_record(FIXTURES_PATH / "resume_empty.yaml")


@pytest.fixture
def long_record(full_record) -> ResumeRecord:
    """Full record padded with enough strengths to span several pages."""
    full_record.strengths = [f"Strength number {i} with a short description" for i in range(60)]
    return full_record
