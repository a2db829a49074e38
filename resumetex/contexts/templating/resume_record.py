"""
Resume Record Data Structures

Defines the structured resume record produced by the form layer: contact info,
free-text sections and the experience/education/project entry lists. These
structures are the input of the LaTeX generator.

Records are built from plain mappings (form payloads or YAML files). Keys may use
the form layer's camelCase (contactInfo, startDate, githubUrl) or snake_case.
Missing and null fields are treated as empty; values of the wrong type raise
InputError.
"""

import re
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, List, Mapping

import yaml
from omegaconf import OmegaConf
from omegaconf.errors import OmegaConfBaseException

from resumetex.contexts.templating.exceptions import InputError

CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])([A-Z])")


def _snake_case(key: str) -> str:
    """contactInfo -> contact_info, githubUrl -> github_url"""
    return CAMEL_BOUNDARY.sub(r"_\1", key).lower()


def _normalize_keys(data: Any, path: str) -> Dict[str, Any]:
    if not isinstance(data, Mapping):
        raise InputError("Expected a mapping of fields", path, data)
    return {_snake_case(str(key)): value for key, value in data.items()}


def _read_text(data: Dict[str, Any], key: str, path: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise InputError("Expected text", f"{path}.{key}" if path else key, value)
    return value


def _read_flag(data: Dict[str, Any], key: str, path: str) -> bool:
    value = data.get(key)
    if value is None:
        return False
    if not isinstance(value, bool):
        raise InputError("Expected true/false", f"{path}.{key}", value)
    return value


class _RecordPart:
    """Builds a flat dataclass of text and bool fields from a mapping."""

    @classmethod
    def from_dict(cls, data: Any, path: str):
        normalized = _normalize_keys(data, path)
        values = {}
        for record_field in fields(cls):
            if record_field.type is bool:
                values[record_field.name] = _read_flag(normalized, record_field.name, path)
            else:
                values[record_field.name] = _read_text(normalized, record_field.name, path)
        return cls(**values)


@dataclass
class ContactInfo(_RecordPart):
    """
    Header contact details.

    Attributes:
        name: Full name shown as the document heading
        email: Email address (rendered as a mailto link)
        mobile: Phone number, shown verbatim after escaping
        linkedin: LinkedIn profile URL
        twitter: Twitter profile URL
    """

    name: str = ""
    email: str = ""
    mobile: str = ""
    linkedin: str = ""
    twitter: str = ""


@dataclass
class ExperienceEntry(_RecordPart):
    """One job. Dates are free text (e.g., 'Jan 2020') and are not escaped."""

    title: str = ""
    organization: str = ""
    location: str = ""
    start_date: str = ""
    end_date: str = ""
    description: str = ""
    current: bool = False


@dataclass
class EducationEntry(_RecordPart):
    """One degree or certificate. `grade` is rendered as ' -- GPA: <grade>'."""

    degree: str = ""
    institution: str = ""
    location: str = ""
    start_date: str = ""
    end_date: str = ""
    grade: str = ""
    description: str = ""
    current: bool = False


@dataclass
class ProjectEntry(_RecordPart):
    """One project, with optional technology list and repository/live links."""

    name: str = ""
    description: str = ""
    technologies: str = ""
    github_url: str = ""
    live_url: str = ""
    start_date: str = ""
    end_date: str = ""


def _read_entries(data: Dict[str, Any], key: str, entry_class) -> list:
    value = data.get(key)
    if value is None:
        return []
    if isinstance(value, (str, bytes)) or not isinstance(value, (list, tuple)):
        raise InputError("Expected a list of entries", key, value)
    return [entry_class.from_dict(item, f"{key}[{index}]") for index, item in enumerate(value)]


@dataclass
class ResumeRecord:
    """
    Complete structured resume as collected by the form layer.

    Attributes:
        contact_info: Header contact details
        summary: Professional summary paragraph
        skills: Free-text skills list
        experience: Work history entries, in display order
        education: Education entries, in display order
        projects: Project entries, in display order
    """

    contact_info: ContactInfo = field(default_factory=ContactInfo)
    summary: str = ""
    skills: str = ""
    experience: List[ExperienceEntry] = field(default_factory=list)
    education: List[EducationEntry] = field(default_factory=list)
    projects: List[ProjectEntry] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> "ResumeRecord":
        """
        Build a record from a form payload or parsed YAML.

        Raises:
            InputError: If any field has the wrong type
        """
        normalized = _normalize_keys(data, "record")
        contact = normalized.get("contact_info")

        return cls(
            contact_info=ContactInfo.from_dict(contact if contact is not None else {}, "contact_info"),
            summary=_read_text(normalized, "summary", ""),
            skills=_read_text(normalized, "skills", ""),
            experience=_read_entries(normalized, "experience", ExperienceEntry),
            education=_read_entries(normalized, "education", EducationEntry),
            projects=_read_entries(normalized, "projects", ProjectEntry),
        )

    @classmethod
    def from_yaml(cls, path: Path) -> "ResumeRecord":
        """
        Load a record from a YAML file.

        Raises:
            InputError: If the file is not valid YAML or not a mapping of fields
            OSError: If the file cannot be read
        """
        try:
            data = OmegaConf.to_container(OmegaConf.load(path), resolve=True)
        except (yaml.YAMLError, OmegaConfBaseException) as e:
            raise InputError(f"Could not parse record file {path}: {e}") from e
        return cls.from_dict(data)

    def validation_issues(self) -> List[str]:
        """
        Completeness problems the form layer would flag.

        These never block generation; missing fields simply render as empty.

        Returns:
            Human-readable issue descriptions (empty list if complete)
        """
        issues = []

        if not self.contact_info.email:
            issues.append("contact_info.email is required")
        if not self.summary:
            issues.append("summary is required")
        if not self.skills:
            issues.append("skills is required")

        for index, entry in enumerate(self.experience):
            path = f"experience[{index}]"
            for name in ("title", "organization", "start_date", "description"):
                if not getattr(entry, name):
                    issues.append(f"{path}.{name} is required")
            if not entry.current and not entry.end_date:
                issues.append(f"{path}.end_date is required unless this is the current position")

        for index, entry in enumerate(self.education):
            path = f"education[{index}]"
            for name in ("degree", "institution", "start_date"):
                if not getattr(entry, name):
                    issues.append(f"{path}.{name} is required")
            if not entry.current and not entry.end_date:
                issues.append(f"{path}.end_date is required unless currently studying")

        for index, entry in enumerate(self.projects):
            path = f"projects[{index}]"
            for name in ("name", "description"):
                if not getattr(entry, name):
                    issues.append(f"{path}.{name} is required")

        return issues
