"""
LaTeX -> HTML Rewrite Passes

Each pass is a total str -> str function over the whole text. Passes never
assume well-formed input: an occurrence whose arguments cannot be read is left
in place for the residual-command and brace cleanup passes to remove.

The order of DEFAULT_PASSES is significant. Block macros are converted before
inline emphasis so that their arguments are read intact, emphasis is converted
before links, and escaped characters are only unescaped after every pass that
reads LaTeX structure has run.
"""

import re
from dataclasses import dataclass
from typing import Callable, List, Tuple

from resumetex.contexts.rendering.html_styles import (
    EntryStyles,
    HeaderStyles,
    InlineStyles,
    LinkStyles,
    ListStyles,
    PageStyles,
    SectionStyles,
)
from resumetex.contexts.templating.latex_patterns import (
    DocumentPatterns,
    DocumentRegex,
    HeaderPatterns,
    MacroNames,
    PreamblePatterns,
    RewriteRegex,
    SpecialCharacterPatterns,
)
from resumetex.utils.latex_parsing_tools import (
    command_pattern,
    replace_macro,
    skip_groups,
    strip_comments,
    strip_formatting,
)

# Private-use stand-ins for markup characters typed into the source
MARKUP_SENTINELS = {
    "<": "\ue000",
    ">": "\ue001",
    '"': "\ue002",
    "'": "\ue003",
}
SENTINEL_ENTITIES = {
    "\ue000": "&lt;",
    "\ue001": "&gt;",
    "\ue002": "&quot;",
    "\ue003": "&#39;",
}


@dataclass(frozen=True)
class RewritePass:
    """
    One named stage of the rewrite pipeline.

    Attributes:
        name: Identifier used in diagnostics and logs
        apply: Pure function from text to text
    """

    name: str
    apply: Callable[[str], str]


def _replace_command(text: str, command: str, replacement: str) -> str:
    """Replace an argument-less command token (not its trailing text)."""
    return command_pattern(command).sub(lambda _: replacement, text)


def _remove_with_groups(text: str, command: str) -> str:
    pattern = command_pattern(command)
    pos = 0

    while True:
        match = pattern.search(text, pos)
        if not match:
            return text
        end = skip_groups(text, match.end())
        text = text[: match.start()] + text[end:]
        pos = match.start()


# ---------------------------------------------------------------------------
# 1-2: preamble and document body
# ---------------------------------------------------------------------------


def strip_preamble(text: str) -> str:
    """
    Remove comments and preamble commands.

    Commands in PreamblePatterns.GROUP_COMMANDS are removed together with every
    {...} or [...] group that immediately follows them, read with brace counting
    so that multi-line \\newcommand bodies go in one piece.
    """
    text = strip_comments(text)
    for command in PreamblePatterns.GROUP_COMMANDS:
        text = _remove_with_groups(text, command)
    return strip_formatting(text, list(PreamblePatterns.BARE_COMMANDS))


def extract_document_body(text: str) -> str:
    """
    Keep the document environment's interior.

    A source that is still being typed may have \\begin{document} without its
    end; everything after the opening marker is kept then. Without either
    marker the whole text is used.
    """
    if DocumentPatterns.BEGIN_DOCUMENT not in text:
        return text

    match = re.search(DocumentRegex.DOCUMENT_BODY, text)
    if match:
        return match.group(1)

    match = re.search(DocumentRegex.DOCUMENT_OPEN, text)
    if match:
        return match.group(1)

    return text


# ---------------------------------------------------------------------------
# 3-6: header, headings and text blocks
# ---------------------------------------------------------------------------


def convert_header_block(text: str) -> str:
    return re.sub(
        DocumentRegex.CENTER_BLOCK,
        lambda match: HeaderStyles.CENTER_BLOCK.format(content=match.group(1)),
        text,
    )


def convert_name_heading(text: str) -> str:
    """\\textbf{\\Huge \\scshape NAME} or bare \\Huge \\scshape NAME -> <h1>."""

    def build(argument: str):
        match = re.match(HeaderPatterns.NAME_IN_TEXTBF, argument)
        if match is None:
            return None
        return HeaderStyles.NAME.format(content=match.group("name"))

    text = replace_macro(text, "textbf", 1, build)
    return re.sub(
        HeaderPatterns.BARE_NAME,
        lambda match: HeaderStyles.NAME.format(content=match.group(1).strip()),
        text,
    )


def convert_sections(text: str) -> str:
    text = replace_macro(
        text, "section", 1, lambda title: SectionStyles.SECTION.format(content=title)
    )
    return replace_macro(
        text, "subsection", 1, lambda title: SectionStyles.SUBSECTION.format(content=title)
    )


def convert_small_text(text: str) -> str:
    """\\small{CONTENT} -> body text block; \\small TEXT -> inline block."""
    text = replace_macro(
        text, "small", 1, lambda content: SectionStyles.SMALL_BLOCK.format(content=content)
    )
    return re.sub(
        RewriteRegex.SMALL_INLINE,
        lambda match: SectionStyles.SMALL_INLINE.format(content=match.group(1)),
        text,
    )


# ---------------------------------------------------------------------------
# 7-10: lists and entry blocks
# ---------------------------------------------------------------------------


def convert_lists(text: str) -> str:
    """
    Convert the resume list macros and the standard list environments.

    \\item becomes an opening <li> only; browsers close it implicitly.
    """
    text = _replace_command(text, MacroNames.SUBHEADING_LIST_START, ListStyles.SUBHEADING_LIST_OPEN)
    text = _replace_command(text, MacroNames.SUBHEADING_LIST_END, ListStyles.SUBHEADING_LIST_CLOSE)
    text = _replace_command(text, MacroNames.ITEM_LIST_START, ListStyles.ITEM_LIST_OPEN)
    text = _replace_command(text, MacroNames.ITEM_LIST_END, ListStyles.ITEM_LIST_CLOSE)

    for macro in (MacroNames.RESUME_ITEM, MacroNames.RESUME_SUB_ITEM):
        text = replace_macro(
            text, macro, 1, lambda content: ListStyles.RESUME_ITEM.format(content=content)
        )

    text = re.sub(RewriteRegex.ITEMIZE_BEGIN, lambda _: ListStyles.ITEMIZE_OPEN, text)
    text = re.sub(RewriteRegex.ITEMIZE_END, lambda _: ListStyles.ITEMIZE_CLOSE, text)
    text = re.sub(RewriteRegex.ENUMERATE_BEGIN, lambda _: ListStyles.ENUMERATE_OPEN, text)
    text = re.sub(RewriteRegex.ENUMERATE_END, lambda _: ListStyles.ENUMERATE_CLOSE, text)
    return re.sub(RewriteRegex.ITEM, lambda _: ListStyles.ITEM, text)


def _entry_row(left: str, right: str) -> str:
    return EntryStyles.ROW.format(left=left, right=right)


def convert_project_headings(text: str) -> str:
    def build(heading: str, dates: str) -> str:
        row = _entry_row(
            EntryStyles.PRIMARY.format(content=heading),
            EntryStyles.ASIDE.format(content=dates),
        )
        return EntryStyles.BLOCK.format(rows=row)

    return replace_macro(text, MacroNames.RESUME_PROJECT_HEADING, 2, build)


def convert_subheadings(text: str) -> str:
    """\\resumeSubheading{A}{B}{C}{D} -> block with rows A | B and italic C | D."""

    def build(primary: str, primary_aside: str, secondary: str, secondary_aside: str) -> str:
        rows = _entry_row(
            EntryStyles.PRIMARY.format(content=primary),
            EntryStyles.ASIDE.format(content=primary_aside),
        ) + _entry_row(
            EntryStyles.SECONDARY.format(content=secondary),
            EntryStyles.ASIDE.format(content=secondary_aside),
        )
        return EntryStyles.BLOCK.format(rows=rows)

    return replace_macro(text, MacroNames.RESUME_SUBHEADING, 4, build)


def convert_tabular(text: str) -> str:
    """
    Flatten tabular/tabular* environments: cells separated by spaces, rows by <br/>.

    The column format groups after \\begin{tabular*} are skipped with
    brace counting. An environment without its \\end marker is left untouched.
    """
    begin_pattern = re.compile(RewriteRegex.TABULAR_BEGIN)
    pos = 0

    while True:
        match = begin_pattern.search(text, pos)
        if not match:
            return text

        body_start = skip_groups(text, match.end())
        end_pattern = RewriteRegex.TABULAR_END.format(environment=re.escape(match.group(1)))
        end_match = re.compile(end_pattern).search(text, body_start)
        if end_match is None:
            pos = match.end()
            continue

        body = text[body_start : end_match.start()]
        body = re.sub(RewriteRegex.UNESCAPED_AMPERSAND, " ", body)
        body = re.sub(RewriteRegex.LINE_BREAK, lambda _: InlineStyles.LINE_BREAK, body)

        text = text[: match.start()] + body + text[end_match.end() :]
        pos = match.start()


# ---------------------------------------------------------------------------
# 11-14: inline formatting, links and spacing
# ---------------------------------------------------------------------------


def convert_inline_emphasis(text: str) -> str:
    inline_macros = [
        ("emph", InlineStyles.EMPH),
        ("textbf", InlineStyles.BOLD),
        ("textit", InlineStyles.ITALIC),
        ("underline", InlineStyles.UNDERLINE),
    ]
    for command, template in inline_macros:
        text = replace_macro(text, command, 1, lambda content, t=template: t.format(content=content))

    return re.sub(
        RewriteRegex.SCSHAPE_INLINE,
        lambda match: InlineStyles.SMALL_CAPS.format(content=match.group(1)),
        text,
    )


def strip_size_commands(text: str) -> str:
    return strip_formatting(text, ["large", "footnotesize"])


def convert_links(text: str) -> str:
    """
    \\href{URL}{LABEL} -> anchor.

    An underlined label (as <u>...</u> or \\underline{...}) is unwrapped since the
    anchor is styled already. Mailto links open in place; every other link opens
    in a new tab.
    """

    def build(url: str, label: str) -> str:
        underlined = re.fullmatch(RewriteRegex.UNDERLINED_LABEL, label)
        if underlined:
            label = underlined.group(1) if underlined.group(1) is not None else underlined.group(2)

        if url.strip().startswith(HeaderPatterns.MAILTO_PREFIX):
            return LinkStyles.MAILTO.format(url=url.strip(), label=label)
        return LinkStyles.EXTERNAL.format(url=url.strip(), label=label)

    return replace_macro(text, "href", 2, build)


def convert_line_breaks(text: str) -> str:
    text = re.sub(RewriteRegex.LINE_BREAK_WITH_VSPACE, lambda _: InlineStyles.LINE_BREAK, text)
    text = re.sub(RewriteRegex.LINE_BREAK, lambda _: InlineStyles.LINE_BREAK, text)
    text = re.sub(RewriteRegex.VSPACE, "", text)
    return re.sub(RewriteRegex.HFILL, "", text)


# ---------------------------------------------------------------------------
# 15-17: characters, leftovers and braces
# ---------------------------------------------------------------------------


def _pipe_replacement(match: re.Match) -> str:
    if match.group() == "|":
        return SpecialCharacterPatterns.BARE_PIPE_REPLACEMENT
    return SpecialCharacterPatterns.MATH_PIPE_REPLACEMENT


def convert_special_characters(text: str) -> str:
    """
    Resolve separators, text symbols and escaped characters.

    $|$ and bare | are handled in one scan so the ' | ' produced for $|$ is
    never turned into a bullet, and before \\$ is unescaped so that an escaped
    dollar cannot pair up with a separator.
    """
    text = re.sub(SpecialCharacterPatterns.PIPE, _pipe_replacement, text)

    for pattern, replacement in SpecialCharacterPatterns.TEXT_SYMBOLS:
        text = re.sub(pattern, lambda _, r=replacement: r, text)

    for escaped, literal in SpecialCharacterPatterns.ESCAPED_CHARACTERS:
        text = text.replace(escaped, literal)

    text = re.sub(SpecialCharacterPatterns.SPACING, " ", text)
    return re.sub(SpecialCharacterPatterns.NEGATIVE_SPACE, "", text)


def find_residual_commands(text: str) -> List[str]:
    """Command tokens that strip_residual_commands() would delete, in order."""
    without_markers = re.sub(RewriteRegex.ENVIRONMENT_MARKER, "", text)
    return [token.strip() for token in re.findall(RewriteRegex.RESIDUAL_COMMAND, without_markers)]


def strip_residual_commands(text: str) -> str:
    text = re.sub(RewriteRegex.ENVIRONMENT_MARKER, "", text)
    return re.sub(RewriteRegex.RESIDUAL_COMMAND, "", text)


def unwrap_braces(text: str) -> str:
    """Unwrap innermost {...} groups until none are left, then drop stray braces."""
    while True:
        unwrapped = re.sub(RewriteRegex.INNERMOST_GROUP, r"\1", text)
        if unwrapped == text:
            break
        text = unwrapped
    return re.sub(RewriteRegex.STRAY_BRACE, "", text)


# ---------------------------------------------------------------------------
# 18-20: whitespace, layout and wrapper
# ---------------------------------------------------------------------------


def normalize_whitespace(text: str) -> str:
    text = re.sub(r"\n\s*\n\s*\n", "\n\n", text)
    text = text.replace("\n", " ")
    return re.sub(r"\s+", " ", text)


def tidy_structure(text: str) -> str:
    """Put headings on their own line after a closing heading or div."""
    text = re.sub(r"(</h[1-3]>)\s*(<h[1-3])", r"\1\n\2", text)
    return re.sub(r"(</div>)\s*(<h[1-3])", r"\1\n\2", text)


def make_wrap_pass(page_padding: str = PageStyles.DEFAULT_PADDING) -> RewritePass:
    """Build the final pass, wrapping everything in the page container."""

    def wrap_page(text: str) -> str:
        return PageStyles.WRAPPER.format(padding=page_padding, content=text.strip())

    return RewritePass("wrap", wrap_page)


# ---------------------------------------------------------------------------
# Optional markup escaping
# ---------------------------------------------------------------------------


def protect_markup(text: str) -> str:
    """Swap markup characters typed into the source for private-use sentinels."""
    return "".join(MARKUP_SENTINELS.get(char, char) for char in text)


def escape_markup(text: str) -> str:
    """Turn sentinels left by protect_markup() into HTML entities."""
    return "".join(SENTINEL_ENTITIES.get(char, char) for char in text)


PROTECT_MARKUP_PASS = RewritePass("protect_markup", protect_markup)
ESCAPE_MARKUP_PASS = RewritePass("escape_markup", escape_markup)

# Passes 1-19; the wrap pass depends on configuration (see renderer.build_pipeline)
DEFAULT_PASSES: Tuple[RewritePass, ...] = (
    RewritePass("preamble", strip_preamble),
    RewritePass("document_body", extract_document_body),
    RewritePass("header_block", convert_header_block),
    RewritePass("name_heading", convert_name_heading),
    RewritePass("sections", convert_sections),
    RewritePass("small_text", convert_small_text),
    RewritePass("lists", convert_lists),
    RewritePass("project_headings", convert_project_headings),
    RewritePass("subheadings", convert_subheadings),
    RewritePass("tabular", convert_tabular),
    RewritePass("inline_emphasis", convert_inline_emphasis),
    RewritePass("size_commands", strip_size_commands),
    RewritePass("links", convert_links),
    RewritePass("line_breaks", convert_line_breaks),
    RewritePass("special_characters", convert_special_characters),
    RewritePass("residual_commands", strip_residual_commands),
    RewritePass("braces", unwrap_braces),
    RewritePass("whitespace", normalize_whitespace),
    RewritePass("structure", tidy_structure),
)
