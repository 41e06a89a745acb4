"""
Resume Record Data Structures

Defines the structured resume record produced by the resume-builder forms and
consumed by every export encoder.

Attributes are snake_case. The wire form (UI payload, YAML/JSON record files)
uses camelCase keys, derived mechanically from attribute names
(operating_system -> operatingSystem).
"""

from dataclasses import dataclass, field, fields
from typing import Any, Dict, Iterator, List, Mapping, Tuple

from resumekit.contexts.modeling.exceptions import InvalidResumeRecordError


def wire_key(attribute: str) -> str:
    """Convert a snake_case attribute name to its camelCase wire key."""
    head, *rest = attribute.split("_")
    return head + "".join(part.title() for part in rest)


def _text(value: Any) -> str:
    """Coerce a scalar wire value to text (None becomes empty)."""
    if value is None:
        return ""
    if isinstance(value, (dict, list, tuple)):
        raise TypeError(f"expected a scalar, got {type(value).__name__}")
    return str(value)


def _mapping(value: Any, path: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise InvalidResumeRecordError(
            f"Expected a mapping, got {type(value).__name__}", field_path=path
        )
    return value


def _sequence(value: Any, path: str) -> List[Any]:
    if value is None:
        return []
    if isinstance(value, (str, bytes)) or not isinstance(value, (list, tuple)):
        raise InvalidResumeRecordError(
            f"Expected a list, got {type(value).__name__}", field_path=path
        )
    return list(value)


def _texts(value: Any, path: str) -> List[str]:
    items = []
    for index, item in enumerate(_sequence(value, path)):
        try:
            items.append(_text(item))
        except TypeError as e:
            raise InvalidResumeRecordError(str(e), field_path=f"{path}[{index}]") from e
    return items


class _FlatRecord:
    """Mixin for records whose fields are all plain text."""

    @classmethod
    def from_dict(cls, data: Any, path: str = ""):
        data = _mapping(data, path or cls.__name__)
        values = {}
        for f in fields(cls):
            key = wire_key(f.name)
            try:
                values[f.name] = _text(data.get(key))
            except TypeError as e:
                raise InvalidResumeRecordError(str(e), field_path=f"{path}.{key}".lstrip(".")) from e
        return cls(**values)

    def to_dict(self) -> Dict[str, str]:
        return {wire_key(f.name): getattr(self, f.name) for f in fields(self)}

    def has_content(self) -> bool:
        """True if any field is non-empty."""
        return any(getattr(self, f.name) for f in fields(self))


@dataclass
class PersonalInfo(_FlatRecord):
    """Contact block plus the career objective."""

    name: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    objective: str = ""


@dataclass
class Certification(_FlatRecord):
    """
    Single certification entry.

    Entries with an empty name stay in the record but are never rendered.
    """

    id: str = ""
    name: str = ""
    issuer: str = ""
    year: str = ""


@dataclass
class TechnicalSkills(_FlatRecord):
    """
    Fixed set of eight skill fields.

    Iterating yields (wire_key, value) pairs in declaration order, which is
    also the order skills are rendered in.
    """

    operating_system: str = ""
    cloud_platform: str = ""
    orchestration: str = ""
    ticketing_tools: str = ""
    cicd: str = ""
    iaac: str = ""
    version_control: str = ""
    scripting: str = ""

    def __iter__(self) -> Iterator[Tuple[str, str]]:
        for f in fields(self):
            yield wire_key(f.name), getattr(self, f.name)


@dataclass
class WorkExperience(_FlatRecord):
    """Current position (a single record, not a list)."""

    position: str = ""
    company: str = ""
    location: str = ""
    duration: str = ""


@dataclass
class PersonalProfile(_FlatRecord):
    father_name: str = ""
    dob: str = ""
    nationality: str = ""
    languages: str = ""
    marital_status: str = ""


@dataclass
class Declaration(_FlatRecord):
    text: str = ""
    date: str = ""
    place: str = ""
    signature: str = ""


@dataclass
class ProjectExperience:
    """
    Single professional-experience (project) entry.

    Attributes:
        id: List-item identity used while editing (never rendered)
        project_name: Project title; entries without one are skipped by some encoders
        client: Client organisation
        role: Role on the project
        designation: Job title during the project
        duration: Free-text duration
        roles_responsibilities: Ordered responsibility bullets
    """

    id: str = ""
    project_name: str = ""
    client: str = ""
    role: str = ""
    designation: str = ""
    duration: str = ""
    roles_responsibilities: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any, path: str = "professionalExperience") -> "ProjectExperience":
        data = _mapping(data, path)
        values = {}
        for f in fields(cls):
            key = wire_key(f.name)
            if f.name == "roles_responsibilities":
                values[f.name] = _texts(data.get(key), f"{path}.{key}")
                continue
            try:
                values[f.name] = _text(data.get(key))
            except TypeError as e:
                raise InvalidResumeRecordError(str(e), field_path=f"{path}.{key}") from e
        return cls(**values)

    def to_dict(self) -> Dict[str, Any]:
        data = {wire_key(f.name): getattr(self, f.name) for f in fields(self)}
        data["rolesResponsibilities"] = list(self.roles_responsibilities)
        return data

    def has_content(self) -> bool:
        return any(getattr(self, f.name) for f in fields(self) if f.name != "id")


@dataclass
class ResumeRecord:
    """
    Complete resume as edited in the resume builder.

    Every top-level field is independently optional for rendering. List order
    is author-controlled and preserved by all consumers.
    """

    personal_info: PersonalInfo = field(default_factory=PersonalInfo)
    profile_summary: List[str] = field(default_factory=list)
    academic_profile: str = ""
    certifications: List[Certification] = field(default_factory=list)
    technical_skills: TechnicalSkills = field(default_factory=TechnicalSkills)
    work_experience: WorkExperience = field(default_factory=WorkExperience)
    professional_experience: List[ProjectExperience] = field(default_factory=list)
    strengths: List[str] = field(default_factory=list)
    personal_profile: PersonalProfile = field(default_factory=PersonalProfile)
    declaration: Declaration = field(default_factory=Declaration)

    @classmethod
    def from_dict(cls, data: Any) -> "ResumeRecord":
        """
        Build a record from its camelCase wire form.

        Missing keys take empty defaults, None becomes "", and scalars are
        coerced to text. Unknown keys are ignored.

        Args:
            data: Mapping in the wire form (e.g. {"personalInfo": {"name": ...}, ...})

        Returns:
            ResumeRecord instance

        Raises:
            InvalidResumeRecordError: If a field has the wrong container type
        """
        data = _mapping(data, "<root>")

        try:
            academic_profile = _text(data.get("academicProfile"))
        except TypeError as e:
            raise InvalidResumeRecordError(str(e), field_path="academicProfile") from e

        return cls(
            personal_info=PersonalInfo.from_dict(data.get("personalInfo"), "personalInfo"),
            profile_summary=_texts(data.get("profileSummary"), "profileSummary"),
            academic_profile=academic_profile,
            certifications=[
                Certification.from_dict(item, f"certifications[{i}]")
                for i, item in enumerate(_sequence(data.get("certifications"), "certifications"))
            ],
            technical_skills=TechnicalSkills.from_dict(
                data.get("technicalSkills"), "technicalSkills"
            ),
            work_experience=WorkExperience.from_dict(data.get("workExperience"), "workExperience"),
            professional_experience=[
                ProjectExperience.from_dict(item, f"professionalExperience[{i}]")
                for i, item in enumerate(
                    _sequence(data.get("professionalExperience"), "professionalExperience")
                )
            ],
            strengths=_texts(data.get("strengths"), "strengths"),
            personal_profile=PersonalProfile.from_dict(
                data.get("personalProfile"), "personalProfile"
            ),
            declaration=Declaration.from_dict(data.get("declaration"), "declaration"),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert back to the camelCase wire form."""
        return {
            "personalInfo": self.personal_info.to_dict(),
            "profileSummary": list(self.profile_summary),
            "academicProfile": self.academic_profile,
            "certifications": [cert.to_dict() for cert in self.certifications],
            "technicalSkills": self.technical_skills.to_dict(),
            "workExperience": self.work_experience.to_dict(),
            "professionalExperience": [exp.to_dict() for exp in self.professional_experience],
            "strengths": list(self.strengths),
            "personalProfile": self.personal_profile.to_dict(),
            "declaration": self.declaration.to_dict(),
        }

    @property
    def display_name(self) -> str:
        """Candidate name, or 'Resume' when the name is still empty."""
        return self.personal_info.name or "Resume"
