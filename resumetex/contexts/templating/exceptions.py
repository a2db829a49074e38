"""Custom exceptions for the templating context."""

from pathlib import Path
from typing import Any, Optional


class InputError(ValueError):
    """
    Exception raised when a resume record is structurally invalid.

    Raised for wrong field types (a number where text is expected, a string where
    a list of entries is expected). Missing or empty optional fields are never an
    error; they simply produce no section.

    Attributes:
        message: Error description
        field_path: Dotted path of the offending field (e.g., 'experience[1].title')
        value: The offending value
    """

    def __init__(self, message: str, field_path: Optional[str] = None, value: Any = None):
        self.message = message
        self.field_path = field_path
        self.value = value

        parts = [message]
        if field_path:
            parts.append(f"Field: {field_path}")
            parts.append(f"Got: {type(value).__name__}")

        super().__init__("\n".join(parts))


class TemplateRenderError(Exception):
    """
    Exception raised when template rendering fails.

    Attributes:
        message: Error description
        type_name: Name of the template type being rendered
        template_path: Path to the template file
        original_error: The original Jinja2 error
    """

    def __init__(
        self,
        message: str,
        type_name: Optional[str] = None,
        template_path: Optional[Path] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.type_name = type_name
        self.template_path = template_path
        self.original_error = original_error

        parts = [message]

        if type_name and template_path:
            parts.append(f"\nTemplate: {template_path}")
            parts.append(f"Type: {type_name}")

        if original_error:
            parts.append(f"\nOriginal error: {str(original_error)}")

        super().__init__("\n".join(parts))
