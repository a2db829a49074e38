"""Unit tests for the rewrite pipeline and renderer options."""

import re

import pytest

import resumetex.contexts.rendering.config as config_module
import resumetex.contexts.rendering.renderer as renderer_module
from resumetex.contexts.rendering.config import RenderConfig, load_render_config
from resumetex.contexts.rendering.renderer import (
    build_pipeline,
    placeholder_html,
    render,
    render_with_diagnostics,
)
from resumetex.contexts.rendering.rewrite_passes import DEFAULT_PASSES, RewritePass
from resumetex.contexts.templating.latex_generator import default_source, generate

PLACEHOLDER = (
    "<div class='flex items-center justify-center h-full text-gray-400'>"
    "<p>Start filling the form to see your resume...</p></div>"
)


class TestRender:
    """End-to-end behavior of render()."""

    @pytest.mark.unit
    def test_section_with_small_block(self):
        html = render("\\section{Skills}\n\\small{Go, Rust, C++}")

        assert re.search(
            r"<h2 class='[^']*uppercase[^']*'>Skills</h2>\s*"
            r"<div class='text-sm text-gray-700 leading-relaxed mb-3'>Go, Rust, C\+\+</div>",
            html,
        )

    @pytest.mark.unit
    def test_underlined_link(self):
        html = render("\\href{https://x.com}{\\underline{Site}}")
        assert (
            "<a href='https://x.com' class='text-blue-600 hover:underline' target='_blank'>Site</a>"
            in html
        )
        assert "<u>" not in html

    @pytest.mark.unit
    def test_separator(self):
        assert "A | B" in render("A $|$ B")

    @pytest.mark.unit
    def test_math_symbol_separator(self):
        html = render("A $\\cdot$ B")
        assert "A | B" in html
        assert "$" not in html

    @pytest.mark.unit
    def test_line_break_before_letters_leaves_no_backslash(self):
        html = render("Line one\\\\textbf{x}")
        assert "Line one<br/>" in html
        assert "\\" not in html
        assert "<strong" not in html

    @pytest.mark.unit
    @pytest.mark.parametrize("source", ["", "   \n\t", None])
    def test_empty_input_renders_placeholder(self, source):
        assert render(source) == PLACEHOLDER

    @pytest.mark.unit
    def test_wrapped_in_page_container(self):
        html = render("Hello")
        assert html.startswith('<div class="max-w-4xl mx-auto bg-white min-h-full" style="padding: 0.5in;">')
        assert "Hello" in html

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "source",
        [
            "\\textbf{never closed",
            "}}}{{{",
            "\\begin{document}",
            "\\end{document}\\begin{document}",
            "\\resumeSubheading{A}{B}",
            "\\href{}{}",
            "\\\\\\\\\\",
            "$|$|$$|",
            "%%%",
            "\\begin{tabular}{",
        ],
    )
    def test_malformed_input_never_raises(self, source):
        assert isinstance(render(source), str)

    @pytest.mark.unit
    def test_unknown_commands_are_removed(self):
        result = render_with_diagnostics("\\foo Hello \\bar{x}")

        assert "Hello x" in result.html
        assert "\\" not in result.html
        assert result.leftover_commands == ["\\foo", "\\bar"]
        assert "residual_commands" in result.changed_passes

    @pytest.mark.unit
    def test_generated_document(self, full_record):
        """Name heading, one <h2> per section and no leftover control sequences."""
        html = render(generate(full_record))

        assert "<h1 class='text-3xl font-bold mb-2 text-gray-900'>Jane Doe</h1>" in html
        assert html.count("<h2 ") == 5
        assert not re.search(r"\\[A-Za-z]+", html)
        assert "Jan 2021 - Present" in html
        assert "Cut p99 latency by 40% across the checkout service." in html
        assert "<a href='mailto:jane_doe@example.com' class='text-blue-600 hover:underline'>jane_doe@example.com</a>" in html
        assert "<em class='text-gray-600'>Go, gRPC</em>" in html

    @pytest.mark.unit
    def test_generated_document_without_experience(self, minimal_record_dict):
        html = render(generate(minimal_record_dict))

        assert "Experience</h2>" not in html
        assert "Professional Summary</h2>" in html

    @pytest.mark.unit
    def test_default_source_renders(self):
        html = render(default_source())

        assert "Your Name</h1>" in html
        assert "<strong class='font-semibold'>Languages:</strong>" in html
        assert not re.search(r"\\[A-Za-z]+", html)


class TestDiagnostics:
    """Pass-level diagnostics and fault isolation."""

    @pytest.mark.unit
    def test_failed_pass_is_skipped(self, monkeypatch):
        def explode(text):
            raise RuntimeError("boom")

        passes = DEFAULT_PASSES[:4] + (RewritePass("explode", explode),) + DEFAULT_PASSES[4:]
        monkeypatch.setattr(renderer_module, "DEFAULT_PASSES", passes)

        result = render_with_diagnostics("\\section{Skills}")

        assert result.failed_passes == ["explode"]
        assert "Skills</h2>" in result.html

    @pytest.mark.unit
    def test_changed_passes(self):
        result = render_with_diagnostics("\\section{Skills}")

        assert result.changed_passes[0] == "sections"
        assert result.changed_passes[-1] == "wrap"
        assert "links" not in result.changed_passes
        assert result.failed_passes == []
        assert result.time_s >= 0

    @pytest.mark.unit
    def test_build_pipeline_default(self):
        pipeline = build_pipeline()

        assert pipeline[:-1] == DEFAULT_PASSES
        assert pipeline[-1].name == "wrap"

    @pytest.mark.unit
    def test_build_pipeline_with_escaping(self):
        names = [rewrite_pass.name for rewrite_pass in build_pipeline(RenderConfig(escape_html=True))]

        assert names[0] == "protect_markup"
        assert names[-2:] == ["escape_markup", "wrap"]


class TestRenderConfig:
    """Renderer options and their effect."""

    @pytest.mark.unit
    def test_markup_passes_through_by_default(self):
        assert "<script>" in render("<script>alert(1)</script>")

    @pytest.mark.unit
    def test_escape_html(self):
        html = render("<script>alert('x')</script>", RenderConfig(escape_html=True))

        assert "<script>" not in html
        assert "&lt;script&gt;alert(&#39;x&#39;)&lt;/script&gt;" in html

    @pytest.mark.unit
    def test_page_padding(self):
        assert 'style="padding: 1in;"' in render("x", RenderConfig(page_padding="1in"))

    @pytest.mark.unit
    def test_placeholder_text(self):
        config = RenderConfig(placeholder_text="Nothing yet")
        assert render("", config) == placeholder_html(config)
        assert "<p>Nothing yet</p>" in render("", config)

    @pytest.mark.unit
    def test_load_defaults_without_file(self, monkeypatch):
        monkeypatch.setattr(config_module, "RENDER_CONFIG_PATH", None)
        assert load_render_config() == RenderConfig()

    @pytest.mark.unit
    def test_load_partial_file(self, tmp_path):
        config_path = tmp_path / "render.yaml"
        config_path.write_text("page_padding: 1in\n")

        config = load_render_config(config_path)

        assert config.page_padding == "1in"
        assert config.escape_html is False
        assert config.placeholder_text == RenderConfig().placeholder_text

    @pytest.mark.unit
    def test_load_from_environment_path(self, tmp_path, monkeypatch):
        config_path = tmp_path / "render.yaml"
        config_path.write_text("escape_html: true\n")
        monkeypatch.setattr(config_module, "RENDER_CONFIG_PATH", str(config_path))

        assert load_render_config().escape_html is True

    @pytest.mark.unit
    def test_unknown_keys_rejected(self, tmp_path):
        config_path = tmp_path / "render.yaml"
        config_path.write_text("page_padding: 1in\ntheme: dark\n")

        with pytest.raises(ValueError, match="theme"):
            load_render_config(config_path)

    @pytest.mark.unit
    def test_non_mapping_rejected(self, tmp_path):
        config_path = tmp_path / "render.yaml"
        config_path.write_text("- escape_html\n")

        with pytest.raises(ValueError):
            load_render_config(config_path)
