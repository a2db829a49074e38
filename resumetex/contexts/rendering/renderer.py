"""
LaTeX -> HTML Renderer

Runs the rewrite pipeline over a LaTeX source for the live preview. Rendering
never raises: a pass that fails is logged and skipped, and empty input yields a
placeholder fragment.
"""

import time
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from resumetex.contexts.rendering.config import RenderConfig
from resumetex.contexts.rendering.html_styles import PageStyles
from resumetex.contexts.rendering.logger import _log_warning, log_render_result
from resumetex.contexts.rendering.rewrite_passes import (
    DEFAULT_PASSES,
    ESCAPE_MARKUP_PASS,
    PROTECT_MARKUP_PASS,
    RewritePass,
    find_residual_commands,
    make_wrap_pass,
)
from resumetex.utils.text_processing import truncate_display

RESIDUAL_PASS_NAME = "residual_commands"
MAX_ERROR_DISPLAY = 200


@dataclass
class RenderResult:
    """
    Result of rendering a LaTeX source.

    Attributes:
        html: Rendered HTML fragment (the placeholder for empty input)
        changed_passes: Names of passes that modified the text, in order
        failed_passes: Names of passes that raised and were skipped
        leftover_commands: Unrecognized command tokens deleted by the residual strip
        time_s: Wall time spent rendering
    """

    html: str
    changed_passes: List[str] = field(default_factory=list)
    failed_passes: List[str] = field(default_factory=list)
    leftover_commands: List[str] = field(default_factory=list)
    time_s: float = 0.0


def build_pipeline(config: Optional[RenderConfig] = None) -> Tuple[RewritePass, ...]:
    """
    Assemble the ordered passes for a configuration.

    With escape_html, markup characters are protected before the first pass and
    turned into entities right before the page wrapper is added.
    """
    config = config or RenderConfig()
    passes = DEFAULT_PASSES
    if config.escape_html:
        passes = (PROTECT_MARKUP_PASS,) + passes + (ESCAPE_MARKUP_PASS,)
    return passes + (make_wrap_pass(config.page_padding),)


def placeholder_html(config: Optional[RenderConfig] = None) -> str:
    config = config or RenderConfig()
    return PageStyles.PLACEHOLDER.format(text=config.placeholder_text)


def render_with_diagnostics(source: Optional[str], config: Optional[RenderConfig] = None) -> RenderResult:
    """
    Render a LaTeX source to HTML, recording what each pass did.

    Args:
        source: LaTeX source (None and blank input render the placeholder)
        config: Renderer options (defaults when omitted)

    Returns:
        RenderResult with the HTML and per-pass diagnostics
    """
    start_time = time.time()
    config = config or RenderConfig()

    text = "" if source is None else str(source)
    if not text.strip():
        return RenderResult(html=placeholder_html(config), time_s=time.time() - start_time)

    changed_passes = []
    failed_passes = []
    leftover_commands = []

    for rewrite_pass in build_pipeline(config):
        try:
            if rewrite_pass.name == RESIDUAL_PASS_NAME:
                leftover_commands = find_residual_commands(text)
            output = rewrite_pass.apply(text)
        except Exception as e:
            # Keep the text from before the failing pass
            _log_warning(
                f"Pass '{rewrite_pass.name}' failed and was skipped: {truncate_display(repr(e), MAX_ERROR_DISPLAY)}"
            )
            failed_passes.append(rewrite_pass.name)
            continue

        if output != text:
            changed_passes.append(rewrite_pass.name)
        text = output

    result = RenderResult(
        html=text,
        changed_passes=changed_passes,
        failed_passes=failed_passes,
        leftover_commands=leftover_commands,
        time_s=time.time() - start_time,
    )
    log_render_result(result)
    return result


def render(source: Optional[str], config: Optional[RenderConfig] = None) -> str:
    """
    Render a LaTeX source to an HTML fragment.

    Example:
        >>> html = render("\\\\section{Skills}\\n\\\\small{Go, Rust, C++}")
        >>> "Skills</h2>" in html and "Go, Rust, C++</div>" in html
        True
    """
    return render_with_diagnostics(source, config).html
