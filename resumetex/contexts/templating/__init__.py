"""
Templating Context

Responsibilities:
- Models the structured resume record collected by the form layer
- Escapes free text for embedding in LaTeX
- Generates the complete LaTeX document from the packaged Jinja2 templates
- Provides the starter document for new resumes

Owns: Resume record model, record -> LaTeX generation, LaTeX template system
Never: Interprets LaTeX for display (see rendering context)
"""

from resumetex.contexts.templating.exceptions import InputError, TemplateRenderError
from resumetex.contexts.templating.latex_generator import (
    ResumeToLaTeXConverter,
    default_source,
    generate,
)
from resumetex.contexts.templating.resume_record import (
    ContactInfo,
    EducationEntry,
    ExperienceEntry,
    ProjectEntry,
    ResumeRecord,
)

__all__ = [
    # Generation
    "generate",
    "default_source",
    "ResumeToLaTeXConverter",
    # Record model
    "ResumeRecord",
    "ContactInfo",
    "ExperienceEntry",
    "EducationEntry",
    "ProjectEntry",
    # Errors
    "InputError",
    "TemplateRenderError",
]
