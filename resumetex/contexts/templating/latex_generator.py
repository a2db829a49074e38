"""
LaTeX Generator

Converts a structured resume record to a complete LaTeX document.
"""

from typing import Any, List, Mapping, Union

from jinja2 import TemplateError

from resumetex.contexts.templating.exceptions import InputError, TemplateRenderError
from resumetex.contexts.templating.latex_patterns import DateSuffixes, HeaderPatterns
from resumetex.contexts.templating.logger import log_generation_result, log_record_issues
from resumetex.contexts.templating.registries import TemplateRegistry
from resumetex.contexts.templating.resume_record import (
    ContactInfo,
    EducationEntry,
    ExperienceEntry,
    ProjectEntry,
    ResumeRecord,
)
from resumetex.utils.latex_parsing_tools import escape_latex
from resumetex.utils.text_processing import set_max_consecutive_blank_lines

DEFAULT_SOURCE_FILE = "default_resume.tex"


def format_date_range(start: str, end: str, current: bool, present_label: str) -> str:
    """
    Join the present parts of a date range with ' - '.

    A current entry shows present_label in place of its end date.

    Examples:
        >>> format_date_range("Jan 2020", "Mar 2022", False, "Present")
        'Jan 2020 - Mar 2022'
        >>> format_date_range("Jan 2020", "Mar 2022", True, "Present")
        'Jan 2020 - Present'
        >>> format_date_range("", "2019", False, "Present")
        '2019'
    """
    parts = [start] if start else []
    if current:
        parts.append(present_label)
    elif end:
        parts.append(end)
    return DateSuffixes.RANGE_SEPARATOR.join(parts)


def build_contact_line(contact: ContactInfo) -> str:
    """
    Build the header contact line from the fields that are present.

    Mobile and the email label are escaped; URLs are inserted verbatim.

    Returns:
        Fragments joined by ' $|$ ', or "" when no contact field is set
    """
    fragments = []
    if contact.mobile:
        fragments.append(escape_latex(contact.mobile))
    if contact.email:
        fragments.append(
            rf"\href{{{HeaderPatterns.MAILTO_PREFIX}{contact.email}}}"
            rf"{{\underline{{{escape_latex(contact.email)}}}}}"
        )
    if contact.linkedin:
        fragments.append(rf"\href{{{contact.linkedin}}}{{\underline{{LinkedIn}}}}")
    if contact.twitter:
        fragments.append(rf"\href{{{contact.twitter}}}{{\underline{{Twitter}}}}")
    return HeaderPatterns.CONTACT_SEPARATOR.join(fragments)


class ResumeToLaTeXConverter:
    """Converts a ResumeRecord to LaTeX using the packaged Jinja2 templates."""

    def __init__(self, template_registry: TemplateRegistry = None):
        self.template_registry = template_registry or TemplateRegistry()

    def _render(self, template_name: str, structural: bool = False, **context: Any) -> str:
        """Render a type or structural template, wrapping Jinja2 failures."""
        try:
            if structural:
                template = self.template_registry.get_structure(template_name)
            else:
                template = self.template_registry.get_template(template_name)
            return template.render(**context)
        except TemplateError as e:
            if structural:
                template_path = self.template_registry.templates_path / f"{template_name}.tex.jinja"
            else:
                template_path = self.template_registry.get_template_path(template_name)
            raise TemplateRenderError(
                f"Failed to render template '{template_name}'",
                type_name=template_name,
                template_path=template_path,
                original_error=e,
            ) from e

    def generate_heading(self, contact: ContactInfo) -> str:
        name = escape_latex(contact.name) or HeaderPatterns.DEFAULT_NAME
        return self._render(
            "structure/heading",
            structural=True,
            name=name,
            contact_line=build_contact_line(contact),
        )

    def convert_experience(self, entry: ExperienceEntry) -> str:
        return self._render(
            "experience",
            title=escape_latex(entry.title),
            dates=format_date_range(
                entry.start_date, entry.end_date, entry.current, DateSuffixes.PRESENT
            ),
            organization=escape_latex(entry.organization),
            location=escape_latex(entry.location),
            description=escape_latex(entry.description),
        )

    def convert_education(self, entry: EducationEntry) -> str:
        degree = escape_latex(entry.degree)
        if entry.grade:
            degree += f" -- GPA: {escape_latex(entry.grade)}"

        return self._render(
            "education",
            institution=escape_latex(entry.institution),
            location=escape_latex(entry.location),
            degree=degree,
            dates=format_date_range(
                entry.start_date, entry.end_date, entry.current, DateSuffixes.PRESENT_EXPECTED
            ),
            description=escape_latex(entry.description),
        )

    def convert_project(self, entry: ProjectEntry) -> str:
        heading = escape_latex(entry.name)
        separator = HeaderPatterns.CONTACT_SEPARATOR
        if entry.technologies:
            heading += rf"{separator}\emph{{{escape_latex(entry.technologies)}}}"
        if entry.github_url:
            heading += rf"{separator}\href{{{entry.github_url}}}{{\underline{{GitHub}}}}"
        if entry.live_url:
            heading += rf"{separator}\href{{{entry.live_url}}}{{\underline{{Live}}}}"

        return self._render(
            "project",
            heading=heading,
            dates=format_date_range(entry.start_date, entry.end_date, False, ""),
            description=escape_latex(entry.description),
        )

    def _wrap_section(self, label: str, title: str, content: str) -> str:
        return self._render(
            "wrappers/section", structural=True, label=label, title=title, content=content
        )

    def _wrap_entries(self, entries: List[str]) -> str:
        return self._render("wrappers/subheading_list", structural=True, entries=entries)

    def generate_sections(self, record: ResumeRecord) -> List[tuple]:
        """
        Render every non-empty section.

        Returns:
            List of (title, latex) pairs in document order
        """
        sections = []

        if record.summary:
            text = self._render("text_section", text=escape_latex(record.summary))
            sections.append(
                ("Professional Summary", self._wrap_section("SUMMARY", "Professional Summary", text))
            )

        if record.skills:
            text = self._render("text_section", text=escape_latex(record.skills))
            sections.append(("Skills", self._wrap_section("SKILLS", "Skills", text)))

        entry_sections = [
            ("EXPERIENCE", "Experience", record.experience, self.convert_experience),
            ("EDUCATION", "Education", record.education, self.convert_education),
            ("PROJECTS", "Projects", record.projects, self.convert_project),
        ]
        for label, title, entries, convert in entry_sections:
            if not entries:
                continue
            content = self._wrap_entries([convert(entry) for entry in entries])
            sections.append((title, self._wrap_section(label, title, content)))

        return sections

    def generate(self, record: Union[ResumeRecord, Mapping[str, Any]]) -> str:
        """
        Generate a complete LaTeX document from a resume record.

        Args:
            record: ResumeRecord, or a mapping accepted by ResumeRecord.from_dict()

        Returns:
            Complete LaTeX document string

        Raises:
            InputError: If the record is structurally invalid
            TemplateRenderError: If a template fails to render
        """
        if isinstance(record, Mapping):
            record = ResumeRecord.from_dict(record)
        elif not isinstance(record, ResumeRecord):
            raise InputError("Expected a ResumeRecord or a mapping", "record", record)

        log_record_issues(record.validation_issues())

        preamble = self._render("structure/preamble", structural=True)
        heading = self.generate_heading(record.contact_info)
        sections = self.generate_sections(record)

        generated_latex = self._render(
            "structure/document",
            structural=True,
            preamble=preamble,
            heading=heading,
            sections=[latex for _, latex in sections],
        )

        # Generated output follows the same normalization as hand-edited sources
        generated_latex = set_max_consecutive_blank_lines(generated_latex, max_consecutive=1)
        log_generation_result([title for title, _ in sections], len(generated_latex))
        return generated_latex

    def default_source(self) -> str:
        """Starter document offered for a brand new resume."""
        return self.template_registry.read_source(DEFAULT_SOURCE_FILE)


def generate(record: Union[ResumeRecord, Mapping[str, Any]]) -> str:
    """Generate LaTeX for a record with the packaged templates."""
    return ResumeToLaTeXConverter().generate(record)


def default_source() -> str:
    """Starter document offered for a brand new resume."""
    return ResumeToLaTeXConverter().default_source()
