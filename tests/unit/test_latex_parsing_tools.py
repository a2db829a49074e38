"""
Unit tests for LaTeX parsing tools.

Tests core parsing utilities in resumetex.utils.latex_parsing_tools.
"""

import pytest

from resumetex.utils.latex_parsing_tools import (
    escape_latex,
    read_arguments,
    read_group,
    replace_macro,
    skip_groups,
    strip_comments,
    strip_formatting,
)


class TestEscapeLatex:
    """Tests for escape_latex function."""

    @pytest.mark.unit
    def test_special_characters(self):
        assert escape_latex("R&D at 100%") == r"R\&D at 100\%"
        assert escape_latex("$5 #1 snake_case") == r"\$5 \#1 snake\_case"
        assert escape_latex("{x}") == r"\{x\}"

    @pytest.mark.unit
    def test_backslash_braces_not_re_escaped(self):
        """The braces emitted for \\textbackslash{} stay unescaped."""
        assert escape_latex("C:\\temp") == r"C:\textbackslash{}temp"

    @pytest.mark.unit
    def test_tilde_and_caret(self):
        assert escape_latex("a~b^c") == r"a\textasciitilde{}b\textasciicircum{}c"

    @pytest.mark.unit
    def test_newline_becomes_space(self):
        assert escape_latex("line one\nline two") == "line one line two"

    @pytest.mark.unit
    def test_empty_and_none(self):
        assert escape_latex("") == ""
        assert escape_latex(None) == ""

    @pytest.mark.unit
    def test_other_characters_untouched(self):
        text = "Héllo <b>World</b> (2024) 'quoted' \"double\" |pipe| *star*"
        assert escape_latex(text) == text

    @pytest.mark.unit
    def test_not_idempotent(self):
        once = escape_latex("R&D")
        assert escape_latex(once) != once
        assert escape_latex(once) == r"R\textbackslash{}\&D"


class TestReadArguments:
    """Tests for read_group, read_arguments and skip_groups."""

    @pytest.mark.unit
    def test_read_group_allows_leading_whitespace(self):
        assert read_group(r"\section {Skills} rest", 8) == ("Skills", 17)

    @pytest.mark.unit
    def test_read_group_missing(self):
        assert read_group(r"\small Text", 6) is None

    @pytest.mark.unit
    def test_read_group_unbalanced(self):
        assert read_group(r"\textbf{open", 7) is None

    @pytest.mark.unit
    def test_read_arguments_across_lines(self):
        text = "\\resumeSubheading\n  {A}{B}\n  {C}{D} tail"
        arguments, end = read_arguments(text, len("\\resumeSubheading"), 4)
        assert arguments == ["A", "B", "C", "D"]
        assert text[end:] == " tail"

    @pytest.mark.unit
    def test_read_arguments_with_optional(self):
        text = r"\item[--]{x}"
        arguments, _ = read_arguments(text, 5, 1, optional=1)
        assert arguments == ["--", "x"]

    @pytest.mark.unit
    def test_read_arguments_missing_mandatory(self):
        assert read_arguments(r"\href{https://x.com} Site", 5, 2) is None

    @pytest.mark.unit
    def test_skip_groups_variable_arity(self):
        text = r"\newcommand{\x}[1]{body {nested}} rest"
        end = skip_groups(text, len(r"\newcommand"))
        assert text[end:] == " rest"

    @pytest.mark.unit
    def test_skip_groups_stops_at_line_break(self):
        """Groups on the next line belong to the document, not the command."""
        text = "\\pagestyle{fancy}\n{kept}"
        end = skip_groups(text, len("\\pagestyle"))
        assert text[end:] == "\n{kept}"


class TestReplaceMacro:
    """Tests for replace_macro function."""

    @pytest.mark.unit
    def test_simple(self):
        assert replace_macro(r"\textbf{bold}", "textbf", 1, lambda s: f"**{s}**") == "**bold**"

    @pytest.mark.unit
    def test_nested_same_macro(self):
        result = replace_macro(r"\textbf{a \textbf{b}}", "textbf", 1, lambda s: f"<b>{s}</b>")
        assert result == "<b>a <b>b</b></b>"

    @pytest.mark.unit
    def test_unbalanced_left_untouched(self):
        assert replace_macro(r"\textbf{open", "textbf", 1, lambda s: s) == r"\textbf{open"

    @pytest.mark.unit
    def test_build_returning_none_skips(self):
        text = r"\textbf{keep} \textbf{swap}"
        result = replace_macro(text, "textbf", 1, lambda s: "X" if s == "swap" else None)
        assert result == r"\textbf{keep} X"

    @pytest.mark.unit
    def test_longer_command_names_not_matched(self):
        """\\resumeItem must not match \\resumeItemListStart."""
        text = r"\resumeItemListStart \resumeItem{x}"
        result = replace_macro(text, "resumeItem", 1, lambda s: f"<li>{s}</li>")
        assert result == r"\resumeItemListStart <li>x</li>"

    @pytest.mark.unit
    def test_multiple_arguments(self):
        result = replace_macro(r"\href{u}{l}", "href", 2, lambda url, label: f"{label}@{url}")
        assert result == "l@u"

    @pytest.mark.unit
    def test_line_break_backslash_is_not_a_command(self):
        """The second backslash of \\\\ belongs to the line break."""
        result = replace_macro(r"one\\textbf{x}", "textbf", 1, lambda s: f"<b>{s}</b>")
        assert result == r"one\\textbf{x}"

    @pytest.mark.unit
    def test_command_after_line_break(self):
        result = replace_macro(r"one\\\textbf{x}", "textbf", 1, lambda s: f"<b>{s}</b>")
        assert result == r"one\\<b>x</b>"


@pytest.mark.unit
def test_strip_formatting():
    """Test argument-less commands are removed with trailing whitespace."""
    assert strip_formatting(r"\raggedright Some text", ["raggedright"]) == "Some text"
    assert strip_formatting(r"\largest", ["large"]) == r"\largest"


@pytest.mark.unit
def test_strip_comments_keeps_escaped_percent():
    text = "Grew revenue 40\\% % reword this\n\\section{Skills}"
    assert strip_comments(text) == "Grew revenue 40\\% \n\\section{Skills}"
