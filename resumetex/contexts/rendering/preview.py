"""
Preview Orchestration

Builds an on-disk preview for a resume record: the generated .tex source and a
standalone HTML page around the rendered fragment. Stands in for the preview
host during development.
"""

import os
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from jinja2 import Environment, FileSystemLoader, StrictUndefined

from resumetex.contexts.rendering.config import RenderConfig
from resumetex.contexts.rendering.logger import (
    _log_debug,
    log_preview_result,
    log_preview_start,
    setup_rendering_logger,
)
from resumetex.contexts.rendering.renderer import render_with_diagnostics
from resumetex.contexts.templating.exceptions import InputError, TemplateRenderError
from resumetex.contexts.templating.latex_generator import generate
from resumetex.contexts.templating.resume_record import ResumeRecord
from resumetex.utils.timestamp import now

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))
PREVIEW_OUTPUT_PATH = Path(os.getenv("PREVIEW_OUTPUT_PATH", "outs/previews"))

PAGE_TEMPLATE_DIR = Path(__file__).resolve().parent / "template"
PAGE_TEMPLATE_NAME = "preview_page.html.jinja"
DEFAULT_PAGE_TITLE = "Resume Preview"


@dataclass
class PreviewResult:
    """Result from build_preview() orchestration function."""

    success: bool
    record_path: Optional[Path] = None
    tex_path: Optional[Path] = None
    html_path: Optional[Path] = None
    error: Optional[str] = None
    time_s: float = 0.0
    log_dir: Optional[Path] = None


def render_preview_page(fragment: str, title: str = DEFAULT_PAGE_TITLE) -> str:
    """Embed a rendered fragment in a standalone HTML page (Tailwind from CDN)."""
    env = Environment(
        loader=FileSystemLoader(str(PAGE_TEMPLATE_DIR)),
        undefined=StrictUndefined,
        autoescape=True,
        keep_trailing_newline=True,
    )
    return env.get_template(PAGE_TEMPLATE_NAME).render(title=title, body=fragment)


def build_preview(
    record_path: Path,
    output_dir: Optional[Path] = None,
    config: Optional[RenderConfig] = None,
    log_dir: Optional[Path] = None,
) -> PreviewResult:
    """
    Generate LaTeX for a record file and render it to a standalone HTML page.

    Writes {stem}.tex and {stem}.html to output_dir. Failures (invalid record,
    template errors, unreadable or unwritable files) are logged and reported in
    the result instead of raised.

    Args:
        record_path: YAML resume record
        output_dir: Directory for the .tex and .html files (default: PREVIEW_OUTPUT_PATH)
        config: Renderer options
        log_dir: Directory for this session's log (default: timestamped under LOGS_PATH)

    Returns:
        PreviewResult with output paths, or the error on failure
    """
    start_time = time.time()

    record_path = Path(record_path).resolve()
    output_dir = Path(output_dir or PREVIEW_OUTPUT_PATH).resolve()
    log_dir = Path(log_dir) if log_dir is not None else LOGS_PATH / f"preview_{now()}"

    log_file = setup_rendering_logger(log_dir, record_path)
    log_preview_start(record_path, output_dir, log_file)

    try:
        record = ResumeRecord.from_yaml(record_path)
        source = generate(record)

        output_dir.mkdir(parents=True, exist_ok=True)
        tex_path = output_dir / f"{record_path.stem}.tex"
        tex_path.write_text(source, encoding="utf-8")
        _log_debug(f"Wrote {len(source)} chars of LaTeX")

        render_result = render_with_diagnostics(source, config)
        title = record.contact_info.name or DEFAULT_PAGE_TITLE
        html_path = output_dir / f"{record_path.stem}.html"
        html_path.write_text(render_preview_page(render_result.html, title), encoding="utf-8")

        result = PreviewResult(
            success=True,
            record_path=record_path,
            tex_path=tex_path,
            html_path=html_path,
            time_s=time.time() - start_time,
            log_dir=log_dir,
        )
    except (InputError, TemplateRenderError, OSError) as e:
        result = PreviewResult(
            success=False,
            record_path=record_path,
            error=str(e),
            time_s=time.time() - start_time,
            log_dir=log_dir,
        )

    log_preview_result(result)
    return result
