"""
Shared utilities for resumetex.

Common functionality used across contexts:
- Balanced-delimiter scanning and blank-line normalization
- LaTeX argument reading, macro replacement and escaping
- Logger setup
"""

from resumetex.utils.latex_parsing_tools import escape_latex, replace_macro
from resumetex.utils.text_processing import extract_balanced_delimiters

__all__ = ["escape_latex", "extract_balanced_delimiters", "replace_macro"]
