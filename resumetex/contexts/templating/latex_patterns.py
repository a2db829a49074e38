"""
LaTeX Pattern Constants

Centralized LaTeX strings and regexes for the resume template dialect, shared by
the generator (which emits them) and the rewrite pipeline (which consumes them).
Organized into frozen dataclasses by category for immutability and clear grouping.
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class DocumentPatterns:
    """
    Document-level LaTeX patterns.

    Used for body extraction and header detection.
    """
    BEGIN_DOCUMENT: str = r'\begin{document}'
    END_DOCUMENT: str = r'\end{document}'


@dataclass(frozen=True)
class DocumentRegex:
    """Regex forms of the document boundaries and the header block."""
    DOCUMENT_BODY: str = r'\\begin\{document\}([\s\S]*?)\\end\{document\}'
    DOCUMENT_OPEN: str = r'\\begin\{document\}([\s\S]*)$'
    CENTER_BLOCK: str = r'\\begin\{center\}([\s\S]*?)\\end\{center\}'


@dataclass(frozen=True)
class PreamblePatterns:
    """
    Preamble commands dropped by the renderer.

    Commands with arguments are removed together with every {...}/[...] group
    that follows them; GROUP_COMMANDS is ordered so that the commands with the
    largest bodies go first.
    """
    GROUP_COMMANDS: Tuple[str, ...] = (
        'newcommand',
        'renewcommand',
        'titleformat',
        'documentclass',
        'usepackage',
        'pagestyle',
        'fancyhf',
        'fancyfoot',
        'addtolength',
        'setlength',
        'urlstyle',
    )
    BARE_COMMANDS: Tuple[str, ...] = (
        'raggedbottom',
        'raggedright',
    )


@dataclass(frozen=True)
class MacroNames:
    """
    Custom macros defined by the resume template preamble.
    """
    RESUME_ITEM: str = 'resumeItem'
    RESUME_SUB_ITEM: str = 'resumeSubItem'
    RESUME_SUBHEADING: str = 'resumeSubheading'
    RESUME_PROJECT_HEADING: str = 'resumeProjectHeading'
    SUBHEADING_LIST_START: str = 'resumeSubHeadingListStart'
    SUBHEADING_LIST_END: str = 'resumeSubHeadingListEnd'
    ITEM_LIST_START: str = 'resumeItemListStart'
    ITEM_LIST_END: str = 'resumeItemListEnd'


@dataclass(frozen=True)
class HeaderPatterns:
    """
    Header line conventions: name heading and contact separators.
    """
    NAME_IN_TEXTBF: str = r'\s*\\Huge(?![A-Za-z])\s*\\scshape(?![A-Za-z])\s*(?P<name>[\s\S]*?)\s*$'
    BARE_NAME: str = r'\\Huge(?![A-Za-z])\s*\\scshape(?![A-Za-z])\s*([^\\\n]+)'
    CONTACT_SEPARATOR: str = ' $|$ '
    MAILTO_PREFIX: str = 'mailto:'
    DEFAULT_NAME: str = 'Your Name'


@dataclass(frozen=True)
class DateSuffixes:
    """
    Literal suffixes for entries marked as current.
    """
    RANGE_SEPARATOR: str = ' - '
    PRESENT: str = 'Present'
    PRESENT_EXPECTED: str = 'Present (Expected)'


@dataclass(frozen=True)
class SpecialCharacterPatterns:
    """
    Escaped characters and text-mode symbols and what the preview shows for them.
    """
    # (LaTeX, HTML) pairs for escaped characters
    ESCAPED_CHARACTERS: Tuple[Tuple[str, str], ...] = (
        (r'\$', '$'),
        (r'\&', '&'),
        (r'\%', '%'),
        (r'\_', '_'),
        (r'\#', '#'),
    )
    # Symbols the escaper emits; entities keep later passes from eating them
    TEXT_SYMBOLS: Tuple[Tuple[str, str], ...] = (
        (r'\\textbackslash(?![A-Za-z])(?:\{\})?', '&#92;'),
        (r'\\textasciitilde(?![A-Za-z])(?:\{\})?', '~'),
        (r'\\textasciicircum(?![A-Za-z])(?:\{\})?', '^'),
        (r'\\\{', '&#123;'),
        (r'\\\}', '&#125;'),
    )
    # Spacing commands (\, \; \: and backslash-space) and negative thin space
    SPACING: str = r'\\[,;: ]'
    NEGATIVE_SPACE: str = r'\\!'
    # $|$, $\cdot$ style symbols (or $$) are the separator idiom; anything else
    # with | is a bare pipe
    PIPE: str = r'(?<!\\)\$(?:\||\\[A-Za-z]+)?\$|\|'
    MATH_PIPE_REPLACEMENT: str = ' | '
    BARE_PIPE_REPLACEMENT: str = ' \u2022 '


@dataclass(frozen=True)
class RewriteRegex:
    """
    Regexes used by the LaTeX -> HTML rewrite passes that do not fit a macro call.
    """
    # \small TEXT, up to a newline, backslash or closing brace
    SMALL_INLINE: str = r'\\small\s+([^\n\\}]+)'
    SCSHAPE_INLINE: str = r'\\scshape(?![A-Za-z])\s+([^\\\n<]+)'
    ITEMIZE_BEGIN: str = r'\\begin\{itemize\}(?:\[[^\]]*\])?'
    ITEMIZE_END: str = r'\\end\{itemize\}'
    ENUMERATE_BEGIN: str = r'\\begin\{enumerate\}(?:\[[^\]]*\])?'
    ENUMERATE_END: str = r'\\end\{enumerate\}'
    ITEM: str = r'\\item(?![A-Za-z])(?:\[[^\]]*\])?\s*'
    TABULAR_BEGIN: str = r'\\begin\{(tabular\*?)\}'
    TABULAR_END: str = r'\\end\{{{environment}\}}'
    UNESCAPED_AMPERSAND: str = r'(?<!\\)&'
    # \\ with optional [length]
    LINE_BREAK: str = r'\\\\(?:\[[^\]]*\])?'
    LINE_BREAK_WITH_VSPACE: str = r'\\\\(?:\[[^\]]*\])?\s*\\vspace\*?\{[^{}]*\}'
    VSPACE: str = r'\\vspace\*?\{[^{}]*\}'
    HFILL: str = r'\\hfill(?![A-Za-z])'
    ENVIRONMENT_MARKER: str = r'\\(?:begin|end)\s*\{[^{}]*\}'
    RESIDUAL_COMMAND: str = r'\\[A-Za-z]+\*?\s*'
    INNERMOST_GROUP: str = r'\{([^{}]*)\}'
    STRAY_BRACE: str = r'[{}]'
    UNDERLINED_LABEL: str = r'\s*(?:<u>((?:(?!</?u>)[\s\S])*)</u>|\\underline\s*\{([^{}]*)\})\s*'
