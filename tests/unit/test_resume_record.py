"""Unit tests for the resume record model."""

import pytest

from resumetex.contexts.templating.exceptions import InputError
from resumetex.contexts.templating.resume_record import (
    ContactInfo,
    ExperienceEntry,
    ResumeRecord,
)


@pytest.mark.unit
def test_from_dict_camel_case_keys():
    """Form payload keys (camelCase) map onto snake_case fields."""
    record = ResumeRecord.from_dict(
        {
            "contactInfo": {"name": "Jane Doe", "email": "jane@example.com"},
            "experience": [{"title": "Engineer", "startDate": "Jan 2020", "current": True}],
            "projects": [{"name": "Ledger", "githubUrl": "https://github.com/j/ledger"}],
        }
    )

    assert record.contact_info == ContactInfo(name="Jane Doe", email="jane@example.com")
    assert record.experience[0].start_date == "Jan 2020"
    assert record.experience[0].current is True
    assert record.projects[0].github_url == "https://github.com/j/ledger"


@pytest.mark.unit
def test_from_dict_snake_case_keys(minimal_record_dict):
    record = ResumeRecord.from_dict(minimal_record_dict)

    assert record.contact_info.name == "Sam Lee"
    assert record.summary == "Data analyst."
    assert record.experience == []


@pytest.mark.unit
def test_missing_and_null_fields_are_empty():
    record = ResumeRecord.from_dict(
        {"contactInfo": None, "summary": None, "experience": [{"title": None, "current": None}]}
    )

    assert record.contact_info == ContactInfo()
    assert record.summary == ""
    assert record.experience == [ExperienceEntry()]


@pytest.mark.unit
def test_empty_mapping():
    assert ResumeRecord.from_dict({}) == ResumeRecord()


@pytest.mark.unit
@pytest.mark.parametrize(
    "data, field_path",
    [
        ({"summary": 42}, "summary"),
        ({"contactInfo": {"name": ["Jane"]}}, "contact_info.name"),
        ({"experience": "Engineer"}, "experience"),
        ({"experience": [{"current": "yes"}]}, "experience[0].current"),
        ({"education": ["not a mapping"]}, "education[0]"),
    ],
)
def test_wrong_types_raise_input_error(data, field_path):
    """Structurally invalid values name the offending field."""
    with pytest.raises(InputError) as excinfo:
        ResumeRecord.from_dict(data)

    assert excinfo.value.field_path == field_path
    assert field_path in str(excinfo.value)


@pytest.mark.unit
def test_non_mapping_record_raises():
    with pytest.raises(InputError):
        ResumeRecord.from_dict(["not", "a", "record"])


@pytest.mark.unit
def test_from_yaml(full_record):
    """Test loading the fully populated fixture."""
    assert full_record.contact_info.name == "Jane Doe"
    assert full_record.contact_info.mobile == "+1-555-0100"
    assert len(full_record.experience) == 2
    assert full_record.education[0].grade == "3.8"
    assert full_record.projects[0].live_url == "https://ledger.example.com"


@pytest.mark.unit
def test_validation_issues_complete_record(full_record):
    assert full_record.validation_issues() == []


@pytest.mark.unit
def test_validation_issues_reported():
    record = ResumeRecord.from_dict(
        {
            "experience": [{"title": "Engineer", "organization": "Acme", "startDate": "2020"}],
            "projects": [{"name": "Ledger"}],
        }
    )
    issues = record.validation_issues()

    assert "contact_info.email is required" in issues
    assert "summary is required" in issues
    assert "experience[0].description is required" in issues
    assert any(issue.startswith("experience[0].end_date") for issue in issues)
    assert "projects[0].description is required" in issues


@pytest.mark.unit
def test_current_entry_needs_no_end_date():
    record = ResumeRecord.from_dict(
        {
            "education": [
                {"degree": "MSc", "institution": "Uni", "startDate": "2023", "current": True}
            ]
        }
    )

    assert not any(issue.startswith("education[0]") for issue in record.validation_issues())


@pytest.mark.unit
def test_from_yaml_malformed_file(fixtures_path):
    """Unparseable YAML surfaces as InputError, chained to the parser error."""
    with pytest.raises(InputError, match="Could not parse record file") as exc_info:
        ResumeRecord.from_yaml(fixtures_path / "malformed_resume.yaml")

    assert exc_info.value.__cause__ is not None
