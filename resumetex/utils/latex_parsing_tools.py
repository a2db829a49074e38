"""
LaTeX Parsing Tools

Fundamental utilities for reading LaTeX commands and their arguments.

Self-contained module with no context dependencies - both the generator and the
rewrite pipeline build on it. All LaTeX patterns are defined as constants below
for visibility and maintainability.
"""

import re
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from resumetex.utils.text_processing import extract_balanced_delimiters


@dataclass(frozen=True)
class LaTeXPatterns:
    """
    LaTeX pattern templates for parsing and manipulation.

    These are format string templates that accept command names.
    Use .format() to substitute the (already escaped) command name.
    """

    # \cmd not followed by another letter, optional star (\section*); the
    # lookbehind skips the second backslash of a \\ line break
    COMMAND_TOKEN: str = r"(?<!(?<!\\)\\)\\{command}(?![A-Za-z])\*?"
    # \cmd with trailing whitespace, for argument-less commands
    COMMAND_WITH_WHITESPACE: str = r"(?<!(?<!\\)\\)\\{command}(?![A-Za-z])\s*"

    # Unescaped % up to end of line
    COMMENT: str = r"(?<!\\)%.*"

    # Whitespace allowed between a command and its arguments
    ARGUMENT_GAP: str = r"\s*"
    # Whitespace allowed between preamble arguments (no line breaks)
    INLINE_GAP: str = r"[ \t]*"


# Single-scan escape table: no replacement is ever re-escaped by another
LATEX_ESCAPES = {
    "\\": r"\textbackslash{}",
    "&": r"\&",
    "%": r"\%",
    "$": r"\$",
    "#": r"\#",
    "_": r"\_",
    "{": r"\{",
    "}": r"\}",
    "~": r"\textasciitilde{}",
    "^": r"\textasciicircum{}",
    "\n": " ",
}
LATEX_ESCAPE_PATTERN = re.compile("|".join(re.escape(char) for char in LATEX_ESCAPES))


def command_pattern(command: str) -> re.Pattern:
    """Compile the token pattern for a command name (without backslash)."""
    return re.compile(LaTeXPatterns.COMMAND_TOKEN.format(command=re.escape(command)))


def read_group(
    text: str,
    pos: int,
    open_char: str = "{",
    close_char: str = "}",
    gap: str = LaTeXPatterns.ARGUMENT_GAP,
) -> Optional[Tuple[str, int]]:
    """
    Read one delimited argument starting at pos.

    Whitespace matching `gap` may precede the opening delimiter. Nested and
    escaped delimiters are handled by extract_balanced_delimiters().

    Args:
        text: LaTeX source
        pos: Position to start reading (typically right after a command token)
        open_char: Opening delimiter ('{' for mandatory, '[' for optional args)
        close_char: Matching closing delimiter
        gap: Regex for whitespace allowed before the opening delimiter

    Returns:
        (content, end_pos) or None if there is no group at pos or it never closes

    Example:
        >>> read_group("\\\\section {Skills} rest", 8)
        ('Skills', 17)
        >>> read_group("\\\\small Text", 6) is None
        True
    """
    start = re.compile(gap).match(text, pos).end()
    if start >= len(text) or text[start] != open_char:
        return None

    try:
        return extract_balanced_delimiters(text, start + 1, open_char, close_char)
    except ValueError:
        return None


def read_arguments(
    text: str, pos: int, mandatory: int, optional: int = 0
) -> Optional[Tuple[List[str], int]]:
    """
    Read optional [...] arguments (if present) followed by mandatory {...} arguments.

    Args:
        text: LaTeX source
        pos: Position right after the command token
        mandatory: Number of {...} arguments that must be present
        optional: Number of leading [...] arguments to consume when present

    Returns:
        (arguments, end_pos), with present optional arguments first, or None if
        any mandatory argument is missing or unbalanced

    Example:
        >>> read_arguments("\\\\href{https://x.com}{Site}", 5, 2)
        (['https://x.com', 'Site'], 26)
    """
    arguments = []

    for _ in range(optional):
        group = read_group(text, pos, "[", "]")
        if group is None:
            break
        arguments.append(group[0])
        pos = group[1]

    for _ in range(mandatory):
        group = read_group(text, pos)
        if group is None:
            return None
        arguments.append(group[0])
        pos = group[1]

    return arguments, pos


def skip_groups(text: str, pos: int, gap: str = LaTeXPatterns.INLINE_GAP) -> int:
    """
    Skip every {...} or [...] group that immediately follows pos.

    Used to drop preamble commands whose arity varies (\\newcommand{\\x}[2]{...},
    \\titleformat{...}{...}{...}{...}{...}[...]). Stops at the first character
    that does not open a group, or at a group that never closes.

    Returns:
        Position after the last complete group
    """
    while True:
        group = read_group(text, pos, "{", "}", gap) or read_group(text, pos, "[", "]", gap)
        if group is None:
            return pos
        pos = group[1]


def replace_macro(
    text: str,
    command: str,
    num_args: int,
    build: Callable[..., Optional[str]],
) -> str:
    """
    Replace every \\command{arg1}...{argN} with the output of build(arg1, ..., argN).

    Arguments are read with brace counting, so nested groups such as
    \\resumeProjectHeading{App $|$ \\emph{Go}}{2024} are captured whole.
    An occurrence is left untouched when its arguments are missing or unbalanced,
    or when build() returns None. Scanning resumes at the start of each
    replacement, so macros nested inside an argument are replaced too.

    Args:
        text: Text containing the command
        command: Command name without backslash (e.g., "textbf", "resumeItem")
        num_args: Number of mandatory {...} arguments
        build: Callable receiving the argument strings, returning the replacement
               or None to skip this occurrence

    Returns:
        Text with matching occurrences replaced

    Examples:
        >>> replace_macro("\\\\textbf{bold}", "textbf", 1, lambda s: f"**{s}**")
        '**bold**'
        >>> replace_macro("\\\\textbf{a \\\\textbf{b}}", "textbf", 1, lambda s: f"<b>{s}</b>")
        '<b>a <b>b</b></b>'
        >>> replace_macro("\\\\textbf{open", "textbf", 1, lambda s: s)
        '\\\\textbf{open'
    """
    pattern = command_pattern(command)
    result = text
    pos = 0

    while True:
        match = pattern.search(result, pos)
        if not match:
            return result

        parsed = read_arguments(result, match.end(), num_args)
        replacement = build(*parsed[0]) if parsed is not None else None
        if replacement is None:
            pos = match.end()
            continue

        result = result[: match.start()] + replacement + result[parsed[1]:]
        pos = match.start()


def strip_formatting(text: str, commands: List[str]) -> str:
    """
    Remove argument-less LaTeX commands from text.

    Commands are removed entirely (along with any trailing whitespace).

    Args:
        text: Text containing formatting commands
        commands: List of command names to remove (without backslash)

    Returns:
        Text with the commands removed

    Example:
        >>> strip_formatting("\\\\raggedright Some text", ["raggedright"])
        'Some text'
        >>> strip_formatting("\\\\largest", ["large"])
        '\\\\largest'
    """
    result = text
    for command in commands:
        pattern = LaTeXPatterns.COMMAND_WITH_WHITESPACE.format(command=re.escape(command))
        result = re.sub(pattern, "", result)
    return result


def strip_comments(text: str) -> str:
    """
    Remove LaTeX comments (unescaped % through end of line).

    Escaped percentages (\\%) are preserved; line breaks are kept so that
    line-oriented patterns downstream still see the same line structure.

    Example:
        >>> strip_comments("Grew revenue 40\\\\% % TODO reword\\n\\\\section{Skills}")
        'Grew revenue 40\\\\% \\n\\\\section{Skills}'
    """
    return re.sub(LaTeXPatterns.COMMENT, "", text)


def escape_latex(plaintext_str: Optional[str]) -> str:
    """
    Convert free text to LaTeX by escaping special characters.

    Conversions:
    - \\ → \\textbackslash{}
    - & % $ # _ { } → preceded by a backslash
    - ~ → \\textasciitilde{}
    - ^ → \\textasciicircum{}
    - newline → single space

    All characters are substituted in one scan, so the braces emitted for
    \\textbackslash{} are never escaped a second time. Escaping is not idempotent:
    escaping already-escaped text escapes its backslashes again.

    Args:
        plaintext_str: Plain text string (None is treated as empty)

    Returns:
        LaTeX string with special characters escaped

    Example:
        >>> escape_latex("R&D at 100%")
        'R\\\\&D at 100\\\\%'
        >>> escape_latex("C:\\\\temp")
        'C:\\\\textbackslash{}temp'
    """
    if not plaintext_str:
        return ""

    return LATEX_ESCAPE_PATTERN.sub(lambda match: LATEX_ESCAPES[match.group()], plaintext_str)
