"""
Modeling Context

Responsibilities:
- Defines the ResumeRecord data model consumed by every encoder
- Converts between the camelCase wire form (UI payload, YAML/JSON files) and dataclasses
- Provides the blank record the resume builder starts from

Owns: Resume data model, record loading
Never: Decides which sections are rendered
"""

from resumekit.contexts.modeling.defaults import DEFAULT_DECLARATION_TEXT, new_resume_record
from resumekit.contexts.modeling.exceptions import InvalidResumeRecordError
from resumekit.contexts.modeling.loader import load_resume_record
from resumekit.contexts.modeling.resume_record import (
    Certification,
    Declaration,
    PersonalInfo,
    PersonalProfile,
    ProjectExperience,
    ResumeRecord,
    TechnicalSkills,
    WorkExperience,
)

__all__ = [
    # Data structure classes
    "ResumeRecord",
    "PersonalInfo",
    "Certification",
    "TechnicalSkills",
    "WorkExperience",
    "ProjectExperience",
    "PersonalProfile",
    "Declaration",
    # Loading and defaults
    "load_resume_record",
    "new_resume_record",
    "DEFAULT_DECLARATION_TEXT",
    "InvalidResumeRecordError",
]
